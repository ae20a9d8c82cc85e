from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.core.exceptions import DomainError
from src.hr_portal.hr_portal.database.bootstrap import apply_schema


def _print_progress(event) -> None:
    if event.fraction is None:
        print(f"[{event.step}] {event.message}")
    else:
        print(f"[{event.step}] {event.message} ({event.fraction:.0%})")


def main() -> int:
    parser = argparse.ArgumentParser(description="Load an SAP/Hilan spreadsheet into the database.")
    parser.add_argument("path", help="Path to the .xlsx file")
    parser.add_argument("--target", help="Target table when the file name matches more than one")
    parser.add_argument("--interface", action="store_true", help="Load into hilan_interface by natural key")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_path=settings.DB_PATH,
        secret_key=settings.SECRET_KEY,
        import_batch_size=settings.IMPORT_BATCH_SIZE,
    )
    with container.conn:
        apply_schema(container.conn)
        try:
            if args.interface:
                result = container.import_service.import_interface_file(args.path, progress=_print_progress)
            else:
                result = container.import_service.import_file(args.path, target=args.target, progress=_print_progress)
        except DomainError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

    print(f"OK: {result.message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
