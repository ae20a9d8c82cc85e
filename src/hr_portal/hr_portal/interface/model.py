from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

NATURAL_KEY = ("EventID", "Status", "Date", "EmployeeID")

MUTABLE_FIELDS = (
    "SendCode",
    "SubEvent",
    "EventName",
    "LastName",
    "FirstName",
    "CorrectedValue",
    "Error",
    "Note",
)

INTERFACE_COLUMNS = NATURAL_KEY + MUTABLE_FIELDS


@dataclass(frozen=True)
class InterfaceFilters:
    event_id: Optional[int] = None
    employee_id: Optional[int] = None
    status: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


@dataclass(frozen=True)
class InterfacePage:
    data: List[Dict[str, Any]]
    total: int
    page: int
    page_size: int
    total_pages: int

    def to_dict(self) -> dict:
        return {
            "data": self.data,
            "total": self.total,
            "page": self.page,
            "pageSize": self.page_size,
            "totalPages": self.total_pages,
        }
