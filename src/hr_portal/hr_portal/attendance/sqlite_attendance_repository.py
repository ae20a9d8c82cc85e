from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import AttendanceRecord
from .repository import AttendanceRepository


class SQLiteAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee(self, employee_id: int, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, hilan_employee_id, date, start_time, end_time, attendance_type
                FROM hilan_attendance
                WHERE hilan_employee_id=? AND substr(date, 1, 10) BETWEEN ? AND ?
                ORDER BY date, start_time
                """,
                (employee_id, start_date.isoformat(), end_date.isoformat()),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    id=int(r["id"]),
                    hilan_employee_id=int(r["hilan_employee_id"]),
                    date=str(r["date"])[:10],
                    start_time=r.get("start_time"),
                    end_time=r.get("end_time"),
                    attendance_type=r.get("attendance_type"),
                )
                for r in rows
            ]

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS count FROM hilan_attendance")
            return int(fetchone(cur)["count"])
