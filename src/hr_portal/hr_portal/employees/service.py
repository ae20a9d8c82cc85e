from __future__ import annotations

import logging
import math
from typing import Any, Dict, Optional

from ..common.validators import parse_enum, require_allowed_column, require_positive_int
from ..core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ..core.enums import DataSource, SortOrder
from ..core.exceptions import NotFoundError, ValidationError
from .model import SearchPage, table_for
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def page_count(total: int, page_size: int) -> int:
    return math.ceil(total / page_size) if total else 0


def validate_paging(page, page_size) -> tuple[int, int]:
    page = require_positive_int(page, "Page")
    page_size = require_positive_int(page_size, "Page size")
    if page_size > MAX_PAGE_SIZE:
        raise ValidationError(f"Page size must be at most {MAX_PAGE_SIZE}")
    return page, page_size


class EmployeeService:
    """Use cases: search, detail and cross-system comparison of employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def search(
        self,
        source,
        query: str = "",
        *,
        page=1,
        page_size=DEFAULT_PAGE_SIZE,
        sort_field: Optional[str] = None,
        sort_order="ASC",
    ) -> SearchPage:
        table = table_for(parse_enum(DataSource, source, "Data source"))
        page, page_size = validate_paging(page, page_size)
        sort_field = require_allowed_column(sort_field or table.default_sort, table.columns, "Sort field")
        order = parse_enum(SortOrder, str(sort_order or "ASC").upper(), "Sort order")

        rows, total = self._employees.search(
            table,
            query=(query or "").strip(),
            sort_field=sort_field,
            sort_order=order,
            limit=page_size,
            offset=(page - 1) * page_size,
        )
        return SearchPage(
            employees=list(rows),
            total=total,
            page=page,
            page_size=page_size,
            total_pages=page_count(total, page_size),
        )

    def get_details(self, source, employee_id) -> Optional[Dict[str, Any]]:
        table = table_for(parse_enum(DataSource, source, "Data source"))
        return self._employees.get_by_id(table, require_positive_int(employee_id, "Employee id"))

    def compare(self, employee_id, current, other) -> Dict[str, Any]:
        """Return the other system's row for the same person.

        Identity across systems is assumed from equal ids; nothing enforces it.
        """

        current_src = parse_enum(DataSource, current, "Current system")
        other_src = parse_enum(DataSource, other, "Other system")
        employee_id = require_positive_int(employee_id, "Employee id")

        if self._employees.get_by_id(table_for(current_src), employee_id) is None:
            raise NotFoundError(f"Employee {employee_id} not found in {current_src.value}")

        row = self._employees.get_by_id(table_for(other_src), employee_id)
        if row is None:
            raise NotFoundError(f"No matching employee found in {other_src.value}")
        return row
