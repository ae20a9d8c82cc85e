from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..core.constants import INTERFACE_STATUS_ALL
from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall, fetchone, placeholders
from .model import INTERFACE_COLUMNS, MUTABLE_FIELDS, NATURAL_KEY, InterfaceFilters
from .repository import BatchCallback, InterfaceRepository

logger = logging.getLogger(__name__)

_SELECT_BY_KEY = "SELECT id FROM hilan_interface WHERE " + " AND ".join(f"{k} IS ?" for k in NATURAL_KEY)
_UPDATE_MUTABLE = (
    "UPDATE hilan_interface SET " + ", ".join(f"{f}=?" for f in MUTABLE_FIELDS) + " WHERE id=?"
)
_INSERT_FULL = (
    f"INSERT INTO hilan_interface ({', '.join(INTERFACE_COLUMNS)}) "
    f"VALUES ({placeholders(len(INTERFACE_COLUMNS))})"
)


def _upsert_row(cur, row: Mapping[str, Any]) -> int:
    """Update the mutable fields of the row sharing the natural key, else insert."""

    cur.execute(_SELECT_BY_KEY, tuple(row.get(k) for k in NATURAL_KEY))
    existing = fetchone(cur)
    if existing:
        cur.execute(_UPDATE_MUTABLE, (*(row.get(f) for f in MUTABLE_FIELDS), existing["id"]))
        return int(existing["id"])

    cur.execute(_INSERT_FULL, tuple(row.get(c) for c in INTERFACE_COLUMNS))
    return int(cur.lastrowid)


class SQLiteInterfaceRepository(InterfaceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_page(self, filters: InterfaceFilters, *, limit: int, offset: int) -> Tuple[List[Dict[str, Any]], int]:
        clauses: list[str] = []
        params: list[object] = []

        if filters.event_id is not None:
            clauses.append("EventID=?")
            params.append(int(filters.event_id))
        if filters.employee_id is not None:
            clauses.append("EmployeeID=?")
            params.append(int(filters.employee_id))
        if filters.status and filters.status != INTERFACE_STATUS_ALL:
            clauses.append("Status=?")
            params.append(filters.status)
        if filters.start_date:
            clauses.append("Date>=?")
            params.append(filters.start_date)
        if filters.end_date:
            clauses.append("Date<=?")
            params.append(filters.end_date)

        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM hilan_interface{where}", params)
            total = int(fetchone(cur)["total"])

            cur.execute(
                f"SELECT * FROM hilan_interface{where} ORDER BY Date DESC, id DESC LIMIT ? OFFSET ?",
                (*params, int(limit), int(offset)),
            )
            rows = fetchall(cur)

        for r in rows:
            r["Date"] = str(r["Date"]) if r.get("Date") is not None else None
        return rows, total

    def get_by_id(self, record_id: int) -> Optional[Dict[str, Any]]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT * FROM hilan_interface WHERE id=?", (record_id,))
            return fetchone(cur)

    def update_review(self, record_id: int, *, status: Optional[str], note: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE hilan_interface SET Status=?, Note=? WHERE id=?", (status, note, record_id))
            return cur.rowcount > 0

    def upsert(self, row: Mapping[str, Any]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            return _upsert_row(cur, row)

    def upsert_many(
        self,
        rows: Sequence[Mapping[str, Any]],
        *,
        batch_size: int,
        on_batch: Optional[BatchCallback] = None,
    ) -> int:
        total_batches = math.ceil(len(rows) / batch_size)

        with db_cursor(self._conn_factory) as (_, cur):
            for batch_index in range(total_batches):
                batch = rows[batch_index * batch_size:(batch_index + 1) * batch_size]
                for row in batch:
                    _upsert_row(cur, row)
                if on_batch:
                    on_batch(batch_index, total_batches)

        logger.info("hilan_interface: %d rows in %d batches", len(rows), total_batches)
        return len(rows)

    def count(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS count FROM hilan_interface")
            return int(fetchone(cur)["count"])
