from __future__ import annotations

import atexit
import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.http import fail
from .container import build_container
from .database.bootstrap import apply_schema, ensure_admin_user, list_tables

from .attendance.controller import register as register_attendance
from .authorizations.controller import register as register_authorizations
from .employees.controller import register as register_employees
from .imports.controller import register as register_imports
from .interface.controller import register as register_interface
from .reports.controller import register as register_reports
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    db_path = getattr(settings, "DB_PATH")

    logger.info("Starting hr-portal settings=%s db=%s", settings_module, db_path)

    container = build_container(
        db_path=db_path,
        secret_key=app.secret_key,
        token_ttl_minutes=getattr(settings, "TOKEN_TTL_MINUTES"),
        import_batch_size=getattr(settings, "IMPORT_BATCH_SIZE"),
    )
    container.conn.open()
    atexit.register(container.conn.close)

    if bool(getattr(settings, "AUTO_INIT_DB", True)):
        apply_schema(container.conn)
        logger.info("Schema ready (tables=%d)", len(list_tables(container.conn)))
        created = ensure_admin_user(
            container.conn,
            username=getattr(settings, "ADMIN_USERNAME"),
            password=getattr(settings, "ADMIN_PASSWORD"),
        )
        if created:
            logger.warning("Created default admin user %r; change its password", settings.ADMIN_USERNAME)

    app.extensions["hr_portal"] = container

    register_users(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_interface(app, container)
    register_imports(app, container)
    register_reports(app, container)
    register_authorizations(app, container)

    @app.errorhandler(404)
    def not_found(_):
        return fail("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(_):
        return fail("Method not allowed", 405)

    return app
