from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..common.validators import require_positive_int
from ..core.constants import DEFAULT_INTERFACE_PAGE_SIZE
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.service import page_count, validate_paging
from .model import INTERFACE_COLUMNS, NATURAL_KEY, InterfaceFilters, InterfacePage
from .repository import InterfaceRepository


def _optional_int(value, field_name: str) -> Optional[int]:
    if value is None or str(value).strip() == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def _optional_text(value) -> Optional[str]:
    text = str(value).strip() if value is not None else ""
    return text or None


class InterfaceService:
    """Use cases: browse and review Hilan interface reconciliation records."""

    def __init__(self, records: InterfaceRepository):
        self._records = records

    def list_records(self, *, page=1, page_size=DEFAULT_INTERFACE_PAGE_SIZE, filters: Optional[Mapping[str, Any]] = None) -> InterfacePage:
        page, page_size = validate_paging(page, page_size)
        filters = filters or {}
        parsed = InterfaceFilters(
            event_id=_optional_int(filters.get("eventId"), "Event id"),
            employee_id=_optional_int(filters.get("employeeId"), "Employee id"),
            status=_optional_text(filters.get("status")),
            start_date=_optional_text(filters.get("startDate")),
            end_date=_optional_text(filters.get("endDate")),
        )

        rows, total = self._records.list_page(parsed, limit=page_size, offset=(page - 1) * page_size)
        return InterfacePage(
            data=list(rows),
            total=total,
            page=page,
            page_size=page_size,
            total_pages=page_count(total, page_size),
        )

    def update_record(self, record_id, *, status, note) -> Dict[str, Any]:
        record_id = require_positive_int(record_id, "Record id")
        if not self._records.update_review(record_id, status=_optional_text(status), note=note):
            raise NotFoundError(f"Interface record {record_id} not found")
        return self._records.get_by_id(record_id)

    def save_record(self, record: Mapping[str, Any]) -> int:
        """Insert a record, or patch the existing one with the same natural key."""

        missing = [k for k in NATURAL_KEY if record.get(k) in (None, "")]
        if missing:
            raise ValidationError(f"Missing required field(s): {', '.join(missing)}")
        unknown = sorted(set(record) - set(INTERFACE_COLUMNS) - {"id"})
        if unknown:
            raise ValidationError(f"Unknown field(s): {', '.join(unknown)}")
        return self._records.upsert(record)
