from datetime import datetime

import pandas as pd
import pytest

from src.hr_portal.hr_portal.core.exceptions import ValidationError
from src.hr_portal.hr_portal.imports.reader import read_spreadsheet


def test_reads_first_sheet_and_normalizes_cells(tmp_path):
    path = tmp_path / "sap_cells.xlsx"
    pd.DataFrame(
        [
            {"sap_employee_id": 1, "sap_name": "  Cohen ", "sap_employment_start": datetime(2020, 1, 5)},
            {"sap_employee_id": 2, "sap_name": "", "sap_employment_start": None},
        ]
    ).to_excel(path, index=False, engine="openpyxl")

    rows = read_spreadsheet(path)

    assert rows == [
        {"sap_employee_id": 1, "sap_name": "Cohen", "sap_employment_start": "2020-01-05"},
        {"sap_employee_id": 2, "sap_name": None, "sap_employment_start": None},
    ]


def test_corrupt_workbook_is_a_validation_error(tmp_path):
    path = tmp_path / "sap_corrupt.xlsx"
    path.write_text("sap_employee_id,sap_name\n1,Cohen\n", encoding="utf-8")

    with pytest.raises(ValidationError, match="sap_corrupt.xlsx"):
        read_spreadsheet(path)


def test_legacy_xls_is_a_validation_error(tmp_path):
    path = tmp_path / "sap_legacy.xls"
    path.write_bytes(b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1" + b"\x00" * 64)

    with pytest.raises(ValidationError, match="sap_legacy.xls"):
        read_spreadsheet(path)
