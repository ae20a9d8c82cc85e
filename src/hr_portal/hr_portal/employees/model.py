from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from ..core.enums import DataSource

SAP_COLUMNS = (
    "sap_employee_id",
    "sap_name",
    "sap_title",
    "sap_gender",
    "sap_birth_date",
    "sap_citizenship",
    "sap_personal_id",
    "sap_relationship_status",
    "sap_status",
    "sap_company",
    "sap_hospital",
    "sap_employee_group",
    "sap_employee_subgroup",
    "sap_department",
    "sap_role",
    "sap_job_title",
    "sap_address",
    "sap_city",
    "sap_level",
    "sap_email",
    "sap_phone",
    "sap_employment_start",
    "sap_manager_name",
    "sap_job_percentage",
)

HILAN_COLUMNS = (
    "hilan_employee_id",
    "hilan_last_name",
    "hilan_first_name",
    "hilan_personal_id",
    "hilan_birth_date",
    "hilan_city",
    "hilan_address",
    "hilan_email",
    "hilan_citizenship",
    "hilan_relationship_status",
    "hilan_gender",
    "hilan_phone",
    "hilan_status",
    "hilan_hospital",
    "hilan_department",
    "hilan_title",
    "hilan_job_title",
    "hilan_company",
    "hilan_manager_name",
    "hilan_level",
    "hilan_job_percentage",
    "hilan_employment_start",
    "hilan_group",
    "hilan_role",
)


@dataclass(frozen=True)
class EmployeeTable:
    """Static description of one source system's employee table.

    Every identifier that ends up inside SQL text comes from here, never from
    caller input.
    """

    source: DataSource
    name: str
    key: str
    columns: tuple
    search_columns: tuple
    default_sort: str
    date_columns: tuple


SAP_TABLE = EmployeeTable(
    source=DataSource.SAP,
    name="sap_employees",
    key="sap_employee_id",
    columns=SAP_COLUMNS,
    search_columns=("sap_name", "sap_employee_id"),
    default_sort="sap_name",
    date_columns=("sap_birth_date", "sap_employment_start"),
)

HILAN_TABLE = EmployeeTable(
    source=DataSource.HILAN,
    name="hilan_employees",
    key="hilan_employee_id",
    columns=HILAN_COLUMNS,
    search_columns=("hilan_last_name", "hilan_first_name", "hilan_employee_id"),
    default_sort="hilan_last_name",
    date_columns=("hilan_birth_date", "hilan_employment_start"),
)

EMPLOYEE_TABLES = {
    DataSource.SAP: SAP_TABLE,
    DataSource.HILAN: HILAN_TABLE,
}


def table_for(source: DataSource) -> EmployeeTable:
    return EMPLOYEE_TABLES[DataSource(source)]


@dataclass(frozen=True)
class SearchPage:
    employees: List[Dict[str, Any]]
    total: int
    page: int
    page_size: int
    total_pages: int

    def to_dict(self) -> dict:
        return {
            "employees": self.employees,
            "total": self.total,
            "page": self.page,
            "pageSize": self.page_size,
            "totalPages": self.total_pages,
        }
