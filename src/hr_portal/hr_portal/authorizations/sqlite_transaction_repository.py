from __future__ import annotations

from typing import Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.sqlite_base import db_cursor, fetchall
from .model import Infotype, Transaction
from .repository import TransactionRepository

_SELECT = """
    SELECT t.id, t.sap_employee_id, t.transaction_code,
           i.id AS infotype_id, i.infotype_code, i.population
    FROM sap_employee_transactions t
    LEFT JOIN sap_transaction_infotypes i ON i.transaction_id = t.id
"""


def _group(rows) -> list[Transaction]:
    by_id: Dict[int, Transaction] = {}
    for r in rows:
        tx = by_id.get(r["id"])
        if tx is None:
            tx = Transaction(id=int(r["id"]), sap_employee_id=int(r["sap_employee_id"]), transaction_code=r["transaction_code"])
            by_id[tx.id] = tx
        if r.get("infotype_id") is not None:
            tx.infotypes.append(Infotype(id=int(r["infotype_id"]), infotype_code=r["infotype_code"], population=r.get("population")))
    return list(by_id.values())


class SQLiteTransactionRepository(TransactionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_employee(self, employee_id: int) -> Sequence[Transaction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE t.sap_employee_id=? ORDER BY t.id, i.id", (employee_id,))
            return _group(fetchall(cur))

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE t.id=? ORDER BY i.id", (transaction_id,))
            found = _group(fetchall(cur))
            return found[0] if found else None

    def add(self, employee_id: int, transaction_code: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO sap_employee_transactions (sap_employee_id, transaction_code) VALUES (?, ?)",
                (employee_id, transaction_code),
            )
            return int(cur.lastrowid)

    def replace(self, transaction_id: int, *, transaction_code: str, infotypes: Sequence[Infotype]) -> bool:
        # Children are swapped wholesale, never diffed.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE sap_employee_transactions SET transaction_code=? WHERE id=?",
                (transaction_code, transaction_id),
            )
            if cur.rowcount == 0:
                return False
            cur.execute("DELETE FROM sap_transaction_infotypes WHERE transaction_id=?", (transaction_id,))
            cur.executemany(
                "INSERT INTO sap_transaction_infotypes (transaction_id, infotype_code, population) VALUES (?, ?, ?)",
                [(transaction_id, i.infotype_code, i.population) for i in infotypes],
            )
            return True

    def delete(self, transaction_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM sap_transaction_infotypes WHERE transaction_id=?", (transaction_id,))
            cur.execute("DELETE FROM sap_employee_transactions WHERE id=?", (transaction_id,))
            return cur.rowcount > 0
