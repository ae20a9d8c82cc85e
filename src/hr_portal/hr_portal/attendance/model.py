from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

ATTENDANCE_COLUMNS = (
    "hilan_employee_id",
    "date",
    "start_time",
    "end_time",
    "attendance_type",
)


@dataclass(frozen=True)
class AttendanceRecord:
    """One Hilan attendance row (date, start, end, type)."""

    id: int
    hilan_employee_id: int
    date: str
    start_time: Optional[str]
    end_time: Optional[str]
    attendance_type: Optional[str]

    def to_dict(self) -> dict:
        return asdict(self)
