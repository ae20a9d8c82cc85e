from __future__ import annotations

from flask import Flask, request

from ..common.http import fail, handle_errors, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container.auth_service)

    @app.route("/api/employees/<source>/search", methods=["GET"], endpoint="search_employees")
    @login_required
    @handle_errors("searching employees")
    def search_employees(source: str):
        result = container.employee_service.search(
            source,
            request.args.get("q", ""),
            page=request.args.get("page", 1),
            page_size=request.args.get("page_size", 10),
            sort_field=request.args.get("sort_field") or None,
            sort_order=request.args.get("sort_order", "ASC"),
        )
        return ok(**result.to_dict())

    @app.route("/api/employees/<source>/<int:employee_id>", methods=["GET"], endpoint="employee_details")
    @login_required
    @handle_errors("loading employee details")
    def employee_details(source: str, employee_id: int):
        employee = container.employee_service.get_details(source, employee_id)
        if employee is None:
            return fail("Employee not found", 404)
        return ok(employee=employee)

    @app.route(
        "/api/employees/<source>/<int:employee_id>/compare/<other>",
        methods=["GET"],
        endpoint="compare_employee",
    )
    @login_required
    @handle_errors("comparing employee data")
    def compare_employee(source: str, employee_id: int, other: str):
        return ok(employee=container.employee_service.compare(employee_id, source, other))
