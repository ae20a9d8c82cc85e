from __future__ import annotations

import logging
from typing import Any, Dict, List, Sequence

from ..core.constants import REPORT_DATE_FORMAT
from ..core.enums import FilterOperation
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, placeholders
from ..employees.model import EmployeeTable
from .model import ReportFilter
from .repository import ReportRepository

logger = logging.getLogger(__name__)


class SQLiteReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def generate(self, table: EmployeeTable, *, columns: Sequence[str], filters: Sequence[ReportFilter]) -> List[Dict[str, Any]]:
        # Column names were checked against table.columns by the service.
        select = ", ".join(
            f"strftime('{REPORT_DATE_FORMAT}', {col}) AS {col}" if col in table.date_columns else col
            for col in columns
        )
        clauses: list[str] = []
        params: list[object] = []
        for f in filters:
            op = "NOT IN" if f.operation == FilterOperation.EXCLUDE else "IN"
            clauses.append(f"{f.column} {op} ({placeholders(len(f.values))})")
            params.extend(f.values)

        sql = f"SELECT {select} FROM {table.name}"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)

        logger.debug("Report query: %s %s", sql, params)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return fetchall(cur)

    def unique_values(self, table: EmployeeTable, column: str) -> List[Any]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT DISTINCT {column} AS value FROM {table.name} ORDER BY {column}")
            return [r["value"] for r in fetchall(cur)]
