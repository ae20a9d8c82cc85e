from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from ..core.exceptions import DataAccessError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection):
    """Run the enclosed statements as one transaction.

    Commits on normal exit. Any exception rolls back; engine errors are
    re-raised as ``DataAccessError`` carrying the SQLite message.
    """

    with conn_factory.lock:
        conn = conn_factory.connect()
        cur = conn.cursor()
        try:
            cur.execute("BEGIN")
            try:
                yield conn, cur
            except sqlite3.Error as exc:
                _rollback(conn)
                raise DataAccessError(str(exc)) from exc
            except BaseException:
                _rollback(conn)
                raise
            else:
                try:
                    cur.execute("COMMIT")
                except sqlite3.Error as exc:
                    _rollback(conn)
                    raise DataAccessError(str(exc)) from exc
        finally:
            cur.close()


def _rollback(conn: sqlite3.Connection) -> None:
    if conn.in_transaction:
        conn.execute("ROLLBACK")


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return dict(row) if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return [dict(r) for r in rows or []]


def placeholders(count: int) -> str:
    return ", ".join("?" for _ in range(count))
