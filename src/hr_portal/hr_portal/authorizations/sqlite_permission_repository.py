from __future__ import annotations

from typing import Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall
from .model import Permission, PermissionSystem
from .repository import PermissionRepository

_SELECT = """
    SELECT p.id AS permission_id, p.hilan_employee_id, p.permission_name,
           s.id AS system_id, s.system_name, s.permission_type, s.population
    FROM hilan_employee_permissions p
    LEFT JOIN hilan_permission_systems s ON s.permission_id = p.id
"""


def _group(rows) -> list[Permission]:
    by_id: Dict[int, Permission] = {}
    for r in rows:
        perm = by_id.get(r["permission_id"])
        if perm is None:
            perm = Permission(
                id=int(r["permission_id"]),
                hilan_employee_id=int(r["hilan_employee_id"]),
                name=r["permission_name"],
            )
            by_id[perm.id] = perm
        if r.get("system_id") is not None:
            perm.systems.append(
                PermissionSystem(
                    id=int(r["system_id"]),
                    name=r["system_name"],
                    permission_type=r.get("permission_type"),
                    population=r.get("population"),
                )
            )
    return list(by_id.values())


class SQLitePermissionRepository(PermissionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[Permission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE p.hilan_employee_id=? ORDER BY p.id, s.id", (employee_id,))
            return _group(fetchall(cur))

    def get_by_id(self, permission_id: int) -> Optional[Permission]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE p.id=? ORDER BY s.id", (permission_id,))
            found = _group(fetchall(cur))
            return found[0] if found else None

    def add(self, employee_id: int, name: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO hilan_employee_permissions (hilan_employee_id, permission_name) VALUES (?, ?)",
                (employee_id, name),
            )
            return int(cur.lastrowid)

    def add_system(self, permission_id: int, system: PermissionSystem) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO hilan_permission_systems (permission_id, system_name, permission_type, population)
                VALUES (?, ?, ?, ?)
                """,
                (permission_id, system.name, system.permission_type, system.population),
            )
            return int(cur.lastrowid)

    def replace(self, permission_id: int, *, name: str, systems: Sequence[PermissionSystem]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE hilan_employee_permissions SET permission_name=? WHERE id=?", (name, permission_id))
            if cur.rowcount == 0:
                return False
            cur.execute("DELETE FROM hilan_permission_systems WHERE permission_id=?", (permission_id,))
            cur.executemany(
                """
                INSERT INTO hilan_permission_systems (permission_id, system_name, permission_type, population)
                VALUES (?, ?, ?, ?)
                """,
                [(permission_id, s.name, s.permission_type, s.population) for s in systems],
            )
            return True

    def delete(self, permission_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM hilan_permission_systems WHERE permission_id=?", (permission_id,))
            cur.execute("DELETE FROM hilan_employee_permissions WHERE id=?", (permission_id,))
            return cur.rowcount > 0
