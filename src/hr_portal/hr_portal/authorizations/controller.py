from __future__ import annotations

from flask import Flask

from ..common.http import handle_errors, json_body, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container.auth_service)

    # SAP transactions

    @app.route("/api/employees/sap/<int:employee_id>/transactions", methods=["GET"], endpoint="list_transactions")
    @login_required
    @handle_errors("loading transactions")
    def list_transactions(employee_id: int):
        items = container.transaction_service.list_transactions(employee_id)
        return ok(transactions=[t.to_dict() for t in items])

    @app.route("/api/employees/sap/<int:employee_id>/transactions", methods=["POST"], endpoint="add_transaction")
    @login_required
    @handle_errors("adding transaction")
    def add_transaction(employee_id: int):
        tx_id = container.transaction_service.add_transaction(employee_id, json_body().get("transactionCode", ""))
        return ok(201, id=tx_id)

    @app.route("/api/transactions/<int:transaction_id>", methods=["PUT"], endpoint="update_transaction")
    @login_required
    @handle_errors("updating transaction")
    def update_transaction(transaction_id: int):
        data = json_body()
        tx = container.transaction_service.update_transaction(
            transaction_id,
            transaction_code=data.get("transaction_code", ""),
            infotypes=data.get("infotypes"),
        )
        return ok(transaction=tx.to_dict())

    @app.route("/api/transactions/<int:transaction_id>", methods=["DELETE"], endpoint="delete_transaction")
    @login_required
    @handle_errors("deleting transaction")
    def delete_transaction(transaction_id: int):
        container.transaction_service.delete_transaction(transaction_id)
        return ok()

    # Hilan permissions

    @app.route("/api/employees/hilan/<int:employee_id>/permissions", methods=["GET"], endpoint="list_permissions")
    @login_required
    @handle_errors("loading permissions")
    def list_permissions(employee_id: int):
        items = container.permission_service.list_permissions(employee_id)
        return ok(permissions=[p.to_dict() for p in items])

    @app.route("/api/employees/hilan/<int:employee_id>/permissions", methods=["POST"], endpoint="add_permission")
    @login_required
    @handle_errors("adding permission")
    def add_permission(employee_id: int):
        perm_id = container.permission_service.add_permission(employee_id, json_body().get("permissionName", ""))
        return ok(201, id=perm_id)

    @app.route("/api/permissions/<int:permission_id>/systems", methods=["POST"], endpoint="add_permission_system")
    @login_required
    @handle_errors("adding permission system")
    def add_permission_system(permission_id: int):
        data = json_body()
        system_id = container.permission_service.add_system(
            permission_id,
            name=data.get("systemName", ""),
            permission_type=data.get("permissionType"),
            population=data.get("population"),
        )
        return ok(201, id=system_id)

    @app.route("/api/permissions/<int:permission_id>", methods=["PUT"], endpoint="update_permission")
    @login_required
    @handle_errors("updating permission")
    def update_permission(permission_id: int):
        data = json_body()
        perm = container.permission_service.update_permission(
            permission_id,
            name=data.get("name", ""),
            systems=data.get("systems"),
        )
        return ok(permission=perm.to_dict())

    @app.route("/api/permissions/<int:permission_id>", methods=["DELETE"], endpoint="delete_permission")
    @login_required
    @handle_errors("deleting permission")
    def delete_permission(permission_id: int):
        container.permission_service.delete_permission(permission_id)
        return ok()
