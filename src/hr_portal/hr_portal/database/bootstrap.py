from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .connection import DatabaseConnection
from .sqlite_base import db_cursor, fetchall, fetchone

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def _strip_comments(sql: str) -> str:
    return "\n".join(line for line in sql.splitlines() if not line.lstrip().startswith("--"))


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for the schema file (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False

    for ch in sql:
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue
        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: Optional[str | Path] = None) -> None:
    schema_path = Path(schema_path or SCHEMA_PATH)
    sql = _strip_comments(schema_path.read_text(encoding="utf-8"))

    with db_cursor(conn_factory) as (_, cur):
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)


def ensure_admin_user(conn_factory: DatabaseConnection, *, username: str, password: str) -> bool:
    """Create the bootstrap admin account when it is missing.

    Returns True when a row was inserted. Running it again is a no-op.
    """

    with db_cursor(conn_factory) as (_, cur):
        cur.execute("SELECT id FROM users WHERE username=?", (username,))
        if fetchone(cur):
            return False
        cur.execute(
            "INSERT INTO users (username, password, role) VALUES (?, ?, ?)",
            (username, generate_password_hash(password), Role.ADMIN.value),
        )
    logger.info("Admin user %r created", username)
    return True


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory) as (_, cur):
        cur.execute("SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name")
        return [row["name"] for row in fetchall(cur)]
