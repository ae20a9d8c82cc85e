from __future__ import annotations

import logging
import zipfile
from pathlib import Path
from typing import Any, Dict, List

import numpy as np
import pandas as pd
from openpyxl.utils.exceptions import InvalidFileException

from ..common.datetime_utils import to_db_text
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _cell(value: Any) -> Any:
    if value is None or value is pd.NaT:
        return None
    if isinstance(value, pd.Timestamp):
        if pd.isna(value):
            return None
        value = value.to_pydatetime()
    elif isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and np.isnan(value):
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return to_db_text(value)


def read_spreadsheet(path: str | Path) -> List[Dict[str, Any]]:
    """Read the first sheet; the first row is the header.

    Returns one dict per data row keyed by header name, with blank cells as
    None and dates/times turned into ISO text.
    """

    path = Path(path)
    if not path.is_file():
        raise ValidationError(f"File not found: {path}")

    try:
        df = pd.read_excel(path, sheet_name=0, dtype=object, engine="openpyxl")
    except (ValueError, OSError, zipfile.BadZipFile, InvalidFileException) as exc:
        raise ValidationError(f"Could not read spreadsheet {path.name}: {exc}") from exc

    df.columns = [str(c).strip() for c in df.columns]
    blank_headers = [c for c in df.columns if c.startswith("Unnamed:") and df[c].isna().all()]
    if blank_headers:
        df = df.drop(columns=blank_headers)
    df = df.dropna(how="all")

    rows = [{k: _cell(v) for k, v in record.items()} for record in df.to_dict(orient="records")]
    logger.info("Read %d rows from %s", len(rows), path.name)
    return rows
