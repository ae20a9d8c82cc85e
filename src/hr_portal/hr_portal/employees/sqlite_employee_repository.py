from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..core.enums import SortOrder
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone
from .model import EmployeeTable
from .repository import EmployeeRepository


def _escape_like(text: str) -> str:
    return text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLiteEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def search(
        self,
        table: EmployeeTable,
        *,
        query: str,
        sort_field: str,
        sort_order: SortOrder,
        limit: int,
        offset: int,
    ) -> Tuple[List[Dict[str, Any]], int]:
        # sort_field was checked against table.columns by the service.
        where = " OR ".join(f"{col} LIKE ? ESCAPE '\\'" for col in table.search_columns)
        pattern = f"%{_escape_like(query)}%"
        params = [pattern] * len(table.search_columns)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM {table.name} WHERE {where}", params)
            total = int(fetchone(cur)["total"])

            cur.execute(
                f"""
                SELECT * FROM {table.name}
                WHERE {where}
                ORDER BY {sort_field} {SortOrder(sort_order).value}, {table.key}
                LIMIT ? OFFSET ?
                """,
                (*params, int(limit), int(offset)),
            )
            return fetchall(cur), total

    def get_by_id(self, table: EmployeeTable, employee_id: int) -> Optional[Dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT * FROM {table.name} WHERE {table.key}=?", (employee_id,))
            return fetchone(cur)
