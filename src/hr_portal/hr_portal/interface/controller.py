from __future__ import annotations

from flask import Flask, request

from ..common.http import handle_errors, json_body, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container.auth_service)

    @app.route("/api/interface", methods=["GET"], endpoint="list_interface_records")
    @login_required
    @handle_errors("loading interface records")
    def list_interface_records():
        result = container.interface_service.list_records(
            page=request.args.get("page", 1),
            page_size=request.args.get("page_size", 100),
            filters=request.args,
        )
        return ok(**result.to_dict())

    @app.route("/api/interface", methods=["POST"], endpoint="save_interface_record")
    @login_required
    @handle_errors("saving interface record")
    def save_interface_record():
        record_id = container.interface_service.save_record(json_body())
        return ok(id=record_id)

    @app.route("/api/interface/<int:record_id>", methods=["PUT"], endpoint="update_interface_record")
    @login_required
    @handle_errors("updating interface record")
    def update_interface_record(record_id: int):
        data = json_body()
        record = container.interface_service.update_record(record_id, status=data.get("Status"), note=data.get("Note"))
        return ok(record=record)
