from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..common.validators import parse_enum, require_allowed_column, require_non_empty
from ..core.enums import DataSource, ExportFormat, FilterOperation
from ..core.exceptions import ValidationError
from ..employees.model import table_for
from .exporters import write_csv, write_pdf, write_xlsx
from .model import ReportFilter
from .repository import ReportRepository

logger = logging.getLogger(__name__)

_WRITERS = {
    ExportFormat.CSV: write_csv,
    ExportFormat.XLSX: write_xlsx,
    ExportFormat.PDF: write_pdf,
}


class ReportService:
    """Use cases: ad-hoc employee reports and their export."""

    def __init__(self, reports: ReportRepository):
        self._reports = reports

    @staticmethod
    def parse_filters(raw: Optional[Mapping[str, Any]], allowed: Sequence[str]) -> List[ReportFilter]:
        """Turn ``{column: {"value": [...], "operation": "include|exclude"}}`` into filters.

        Filters with no values are dropped.
        """

        out: List[ReportFilter] = []
        for column, spec in (raw or {}).items():
            require_allowed_column(column, allowed, "Filter column")
            spec = spec or {}
            values = spec.get("values", spec.get("value")) or []
            if not isinstance(values, (list, tuple)):
                values = [values]
            if not values:
                continue
            operation = parse_enum(FilterOperation, spec.get("operation") or "include", "Filter operation")
            out.append(ReportFilter(column=column, values=tuple(values), operation=operation))
        return out

    def generate(self, source, columns: Sequence[str], filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        table = table_for(parse_enum(DataSource, source, "Data source"))
        if not columns:
            raise ValidationError("Select at least one column")
        cols = [require_allowed_column(c, table.columns) for c in columns]
        parsed = self.parse_filters(filters, table.columns)

        rows = self._reports.generate(table, columns=cols, filters=parsed)
        logger.info("Report on %s: %d columns, %d filters, %d rows", table.name, len(cols), len(parsed), len(rows))
        return rows

    def unique_values(self, source, column: str) -> List[Any]:
        table = table_for(parse_enum(DataSource, source, "Data source"))
        return self._reports.unique_values(table, require_allowed_column(column, table.columns))

    def export(self, rows: Sequence[Dict[str, Any]], fmt, file_path) -> Path:
        fmt = parse_enum(ExportFormat, str(fmt or "").lower(), "Export format")
        if not rows:
            raise ValidationError("Nothing to export")
        path = Path(require_non_empty(file_path, "File path"))
        path.parent.mkdir(parents=True, exist_ok=True)

        _WRITERS[fmt](rows, path)
        logger.info("Exported %d rows as %s to %s", len(rows), fmt.value, path)
        return path
