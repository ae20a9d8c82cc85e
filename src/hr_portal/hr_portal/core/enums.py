from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for access control."""

    ADMIN = "admin"
    USER = "user"


class DataSource(str, Enum):
    """Source HR system an employee table comes from."""

    SAP = "sap"
    HILAN = "hilan"


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class FilterOperation(str, Enum):
    INCLUDE = "include"
    EXCLUDE = "exclude"


class ExportFormat(str, Enum):
    CSV = "csv"
    XLSX = "xlsx"
    PDF = "pdf"


class ImportTarget(str, Enum):
    """Tables a spreadsheet can be bulk loaded into."""

    SAP_EMPLOYEES = "sap_employees"
    HILAN_EMPLOYEES = "hilan_employees"
    HILAN_ATTENDANCE = "hilan_attendance"
    HILAN_INTERFACE = "hilan_interface"
