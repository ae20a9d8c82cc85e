from __future__ import annotations

from flask import Flask, request

from ..common.http import handle_errors, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container.auth_service)

    @app.route("/api/attendance/<int:employee_id>", methods=["GET"], endpoint="employee_attendance")
    @login_required
    @handle_errors("loading attendance")
    def employee_attendance(employee_id: int):
        records = container.attendance_service.get_attendance(
            employee_id,
            request.args.get("start", ""),
            request.args.get("end", ""),
        )
        return ok(attendance=[r.to_dict() for r in records])
