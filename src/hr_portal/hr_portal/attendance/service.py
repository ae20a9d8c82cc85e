from __future__ import annotations

from datetime import date
from typing import Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_positive_int
from ..core.exceptions import ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    """Use case: read a Hilan employee's attendance within a date range."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    @staticmethod
    def _as_date(value, field_name: str) -> date:
        if isinstance(value, date):
            return value
        try:
            return parse_iso_date(str(value or "").strip()[:10])
        except ValueError:
            raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")

    def get_attendance(self, employee_id, start, end) -> Sequence[AttendanceRecord]:
        employee_id = require_positive_int(employee_id, "Employee id")
        start_date = self._as_date(start, "Start date")
        end_date = self._as_date(end, "End date")
        if start_date > end_date:
            raise ValidationError("Start date must not be after end date")

        return self._attendance.get_for_employee(employee_id, start_date=start_date, end_date=end_date)
