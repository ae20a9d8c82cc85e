from __future__ import annotations

from flask import Flask, g

from ..common.http import handle_errors, json_body, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container.auth_service)

    def _channel() -> str:
        return str(g.current_user["username"])

    @app.route("/api/imports", methods=["POST"], endpoint="import_file")
    @login_required
    @handle_errors("importing file")
    def import_file():
        data = json_body()
        result = container.import_service.import_file(
            data.get("filePath", ""),
            target=data.get("target") or None,
            progress=container.progress_board.publisher(_channel()),
        )
        return ok(message=result.message, table=result.table, rows=result.rows)

    @app.route("/api/imports/interface", methods=["POST"], endpoint="import_interface_file")
    @login_required
    @handle_errors("importing interface file")
    def import_interface_file():
        result = container.import_service.import_interface_file(
            json_body().get("filePath", ""),
            progress=container.progress_board.publisher(_channel()),
        )
        return ok(message=result.message, table=result.table, rows=result.rows)

    @app.route("/api/imports/progress", methods=["GET"], endpoint="import_progress")
    @login_required
    def import_progress():
        event = container.progress_board.latest(_channel())
        return ok(progress=event.to_dict() if event else None)
