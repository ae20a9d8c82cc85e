from __future__ import annotations

import pandas as pd
import pytest

from src.hr_portal.hr_portal.container import build_container
from src.hr_portal.hr_portal.database.bootstrap import apply_schema


@pytest.fixture
def container(tmp_path):
    c = build_container(db_path=str(tmp_path / "hr_portal.db"), secret_key="test-secret", import_batch_size=2)
    c.conn.open()
    apply_schema(c.conn)
    yield c
    c.conn.close()


@pytest.fixture
def make_xlsx(tmp_path):
    """Write ``rows`` (list of dicts) to ``tmp_path/name`` as a one-sheet workbook."""

    def _make(name: str, rows: list[dict]):
        path = tmp_path / name
        pd.DataFrame(rows).to_excel(path, index=False, engine="openpyxl")
        return path

    return _make
