from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Infotype, Permission, PermissionSystem, Transaction


class TransactionRepository(Protocol):
    """SAP transaction authorizations and their infotypes."""

    def list_for_employee(self, employee_id: int) -> Sequence[Transaction]:
        raise NotImplementedError

    def get_by_id(self, transaction_id: int) -> Optional[Transaction]:
        raise NotImplementedError

    def add(self, employee_id: int, transaction_code: str) -> int:
        raise NotImplementedError

    def replace(self, transaction_id: int, *, transaction_code: str, infotypes: Sequence[Infotype]) -> bool:
        """Rename the transaction and swap its infotypes for ``infotypes``."""

        raise NotImplementedError

    def delete(self, transaction_id: int) -> bool:
        raise NotImplementedError


class PermissionRepository(Protocol):
    """Hilan permissions and their systems."""

    def list_for_employee(self, employee_id: int) -> Sequence[Permission]:
        raise NotImplementedError

    def get_by_id(self, permission_id: int) -> Optional[Permission]:
        raise NotImplementedError

    def add(self, employee_id: int, name: str) -> int:
        raise NotImplementedError

    def add_system(self, permission_id: int, system: PermissionSystem) -> int:
        raise NotImplementedError

    def replace(self, permission_id: int, *, name: str, systems: Sequence[PermissionSystem]) -> bool:
        raise NotImplementedError

    def delete(self, permission_id: int) -> bool:
        raise NotImplementedError
