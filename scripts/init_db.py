from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_portal.hr_portal.database.bootstrap import apply_schema, ensure_admin_user, list_tables
from src.hr_portal.hr_portal.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    settings = importlib.import_module(get_settings_module())

    with DatabaseConnection(DBConfig(path=settings.DB_PATH)) as conn:
        apply_schema(conn)
        created = ensure_admin_user(conn, username=settings.ADMIN_USERNAME, password=settings.ADMIN_PASSWORD)
        tables = list_tables(conn)

    print(f"OK: Applied schema.sql -> {settings.DB_PATH} (tables={len(tables)})")
    if created:
        print(f"OK: Created admin user '{settings.ADMIN_USERNAME}'")


if __name__ == "__main__":
    main()
