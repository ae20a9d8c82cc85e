from __future__ import annotations

from flask import Flask, request

from ..common.http import handle_errors, json_body, make_guards, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    login_required, _ = make_guards(container.auth_service)

    @app.route("/api/reports/generate", methods=["POST"], endpoint="generate_report")
    @login_required
    @handle_errors("generating report")
    def generate_report():
        data = json_body()
        rows = container.report_service.generate(
            data.get("dataSource", ""),
            data.get("columns") or [],
            data.get("filters") or {},
        )
        return ok(data=rows)

    @app.route("/api/reports/export", methods=["POST"], endpoint="export_report")
    @login_required
    @handle_errors("exporting report")
    def export_report():
        data = json_body()
        path = container.report_service.export(data.get("data") or [], data.get("format"), data.get("filePath"))
        return ok(filePath=str(path))

    @app.route("/api/reports/unique-values", methods=["GET"], endpoint="unique_column_values")
    @login_required
    @handle_errors("loading column values")
    def unique_column_values():
        values = container.report_service.unique_values(
            request.args.get("dataSource", ""),
            request.args.get("column", ""),
        )
        return ok(values=values)
