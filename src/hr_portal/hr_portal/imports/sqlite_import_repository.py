from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, placeholders
from .model import LoadTable
from .repository import RowCallback, TableLoadRepository

logger = logging.getLogger(__name__)


def build_insert_sql(table: LoadTable, columns: Sequence[str]) -> str:
    """INSERT for exactly ``columns``; an upsert on the key when the key is among them.

    Rows are overwritten in place rather than deleted and re-inserted, so
    child rows referencing an employee survive a reload.
    """

    sql = f"INSERT INTO {table.name} ({', '.join(columns)}) VALUES ({placeholders(len(columns))})"
    if table.key and table.key in columns:
        updates = [c for c in columns if c != table.key]
        if updates:
            sql += f" ON CONFLICT({table.key}) DO UPDATE SET " + ", ".join(f"{c}=excluded.{c}" for c in updates)
        else:
            sql += f" ON CONFLICT({table.key}) DO NOTHING"
    return sql


class SQLiteTableLoadRepository(TableLoadRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load_rows(
        self,
        table: LoadTable,
        *,
        columns: Sequence[str],
        rows: Sequence[Mapping[str, Any]],
        on_row: Optional[RowCallback] = None,
    ) -> int:
        # columns were checked against table.columns by the service.
        sql = build_insert_sql(table, columns)
        total = len(rows)

        with db_cursor(self._conn_factory) as (_, cur):
            for index, row in enumerate(rows, start=1):
                cur.execute(sql, tuple(row.get(c) for c in columns))
                if on_row:
                    on_row(index, total)

        logger.info("%s: %d rows written", table.name, total)
        return total
