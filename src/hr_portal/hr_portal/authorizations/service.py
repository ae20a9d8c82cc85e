from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from ..common.validators import require_non_empty, require_positive_int
from ..core.exceptions import NotFoundError, ValidationError
from .model import Infotype, Permission, PermissionSystem, Transaction
from .repository import PermissionRepository, TransactionRepository


def _parse_infotypes(raw: Iterable[Mapping[str, Any]]) -> list[Infotype]:
    out = []
    for item in raw or []:
        code = require_non_empty(item.get("infotype_code"), "Infotype code")
        out.append(Infotype(infotype_code=code, population=item.get("population")))
    return out


def _parse_systems(raw: Iterable[Mapping[str, Any]]) -> list[PermissionSystem]:
    out = []
    for item in raw or []:
        name = require_non_empty(item.get("name") or item.get("system_name"), "System name")
        out.append(
            PermissionSystem(
                name=name,
                permission_type=item.get("permissionType", item.get("permission_type")),
                population=item.get("population"),
            )
        )
    return out


class TransactionService:
    """Use case: manage an SAP employee's transaction authorizations."""

    def __init__(self, transactions: TransactionRepository):
        self._transactions = transactions

    def list_transactions(self, employee_id) -> Sequence[Transaction]:
        return self._transactions.list_for_employee(require_positive_int(employee_id, "Employee id"))

    def add_transaction(self, employee_id, transaction_code: str) -> int:
        return self._transactions.add(
            require_positive_int(employee_id, "Employee id"),
            require_non_empty(transaction_code, "Transaction code"),
        )

    def update_transaction(self, transaction_id, *, transaction_code: str, infotypes: Iterable[Mapping[str, Any]]) -> Transaction:
        """Rename a transaction and replace its infotype list with exactly ``infotypes``."""

        transaction_id = require_positive_int(transaction_id, "Transaction id")
        code = require_non_empty(transaction_code, "Transaction code")
        if infotypes is None:
            raise ValidationError("Infotype list is required")

        if not self._transactions.replace(transaction_id, transaction_code=code, infotypes=_parse_infotypes(infotypes)):
            raise NotFoundError(f"Transaction {transaction_id} not found")
        return self._transactions.get_by_id(transaction_id)

    def delete_transaction(self, transaction_id) -> None:
        transaction_id = require_positive_int(transaction_id, "Transaction id")
        if not self._transactions.delete(transaction_id):
            raise NotFoundError(f"Transaction {transaction_id} not found")


class PermissionService:
    """Use case: manage a Hilan employee's permissions."""

    def __init__(self, permissions: PermissionRepository):
        self._permissions = permissions

    def list_permissions(self, employee_id) -> Sequence[Permission]:
        return self._permissions.list_for_employee(require_positive_int(employee_id, "Employee id"))

    def add_permission(self, employee_id, name: str) -> int:
        return self._permissions.add(
            require_positive_int(employee_id, "Employee id"),
            require_non_empty(name, "Permission name"),
        )

    def add_system(self, permission_id, *, name: str, permission_type=None, population=None) -> int:
        permission_id = require_positive_int(permission_id, "Permission id")
        if self._permissions.get_by_id(permission_id) is None:
            raise NotFoundError(f"Permission {permission_id} not found")
        system = PermissionSystem(
            name=require_non_empty(name, "System name"),
            permission_type=permission_type,
            population=population,
        )
        return self._permissions.add_system(permission_id, system)

    def update_permission(self, permission_id, *, name: str, systems: Iterable[Mapping[str, Any]]) -> Permission:
        """Rename a permission and replace its system list with exactly ``systems``."""

        permission_id = require_positive_int(permission_id, "Permission id")
        name = require_non_empty(name, "Permission name")
        if systems is None:
            raise ValidationError("System list is required")

        if not self._permissions.replace(permission_id, name=name, systems=_parse_systems(systems)):
            raise NotFoundError(f"Permission {permission_id} not found")
        return self._permissions.get_by_id(permission_id)

    def delete_permission(self, permission_id) -> None:
        permission_id = require_positive_int(permission_id, "Permission id")
        if not self._permissions.delete(permission_id):
            raise NotFoundError(f"Permission {permission_id} not found")
