from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_IMPORT_BATCH_SIZE
from ..core.enums import ImportTarget
from ..core.exceptions import DataAccessError, ValidationError
from ..interface.model import INTERFACE_COLUMNS, NATURAL_KEY
from ..interface.repository import InterfaceRepository
from .classifier import classify_target
from .model import SIMPLE_TABLES, ImportResult, ProgressEvent
from .progress import ProgressCallback
from .reader import read_spreadsheet
from .repository import TableLoadRepository

logger = logging.getLogger(__name__)

SpreadsheetReader = Callable[[Path], List[Dict[str, Any]]]


def _noop(_: ProgressEvent) -> None:
    return None


class ImportService:
    """Use case: bulk load a spreadsheet into one of the source tables."""

    def __init__(
        self,
        tables: TableLoadRepository,
        interface: InterfaceRepository,
        *,
        batch_size: int = DEFAULT_IMPORT_BATCH_SIZE,
        reader: Optional[SpreadsheetReader] = None,
    ):
        self._tables = tables
        self._interface = interface
        self._batch_size = max(1, int(batch_size))
        self._read = reader or read_spreadsheet

    def import_file(self, file_path, *, target=None, progress: Optional[ProgressCallback] = None) -> ImportResult:
        path = Path(require_non_empty(file_path, "File path"))
        # Name check happens before the file is opened.
        chosen = classify_target(path, explicit=target)
        return self._run(path, chosen, progress or _noop)

    def import_interface_file(self, file_path, *, progress: Optional[ProgressCallback] = None) -> ImportResult:
        path = Path(require_non_empty(file_path, "File path"))
        return self._run(path, ImportTarget.HILAN_INTERFACE, progress or _noop)

    def _run(self, path: Path, target: ImportTarget, notify: ProgressCallback) -> ImportResult:
        notify(ProgressEvent(step="start", message="Reading Excel file"))
        rows = self._read(path)
        if not rows:
            raise ValidationError(f"{path.name} has no data rows")
        notify(ProgressEvent(step="dataLoaded", message="Excel data loaded", extra={"totalRows": len(rows)}))
        notify(ProgressEvent(step="tableNameDetermined", message="Table name determined", extra={"tableName": target.value}))
        notify(ProgressEvent(step="updatingDatabase", message="Updating database"))

        logger.info("Importing %s into %s (%d rows)", path.name, target.value, len(rows))
        try:
            if target == ImportTarget.HILAN_INTERFACE:
                written = self._load_interface(rows, notify)
            else:
                written = self._load_simple(target, rows, notify)
        except DataAccessError as exc:
            logger.error("Import of %s into %s rolled back: %s", path.name, target.value, exc)
            raise

        notify(ProgressEvent(step="complete", message="Database update completed", fraction=1.0))
        return ImportResult(table=target.value, rows=written)

    def _load_simple(self, target: ImportTarget, rows: Sequence[Dict[str, Any]], notify: ProgressCallback) -> int:
        table = SIMPLE_TABLES[target]
        columns = list(rows[0].keys())
        unknown = [c for c in columns if c not in table.columns]
        if unknown:
            raise ValidationError(f"Unknown column(s) for {table.name}: {', '.join(unknown)}")

        def on_row(done: int, total: int) -> None:
            notify(ProgressEvent(step="progress", fraction=done / total))

        return self._tables.load_rows(table, columns=columns, rows=rows, on_row=on_row)

    def _load_interface(self, rows: Sequence[Dict[str, Any]], notify: ProgressCallback) -> int:
        header = set(rows[0].keys())
        missing = [k for k in NATURAL_KEY if k not in header]
        if missing:
            raise ValidationError(f"Missing key column(s) for hilan_interface: {', '.join(missing)}")
        ignored = sorted(header - set(INTERFACE_COLUMNS))
        if ignored:
            logger.warning("hilan_interface import ignores column(s): %s", ", ".join(ignored))

        def on_batch(batch_index: int, total_batches: int) -> None:
            notify(ProgressEvent(step="progress", fraction=(batch_index + 1) / total_batches))

        return self._interface.upsert_many(rows, batch_size=self._batch_size, on_batch=on_batch)
