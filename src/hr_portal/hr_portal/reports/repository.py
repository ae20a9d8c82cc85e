from __future__ import annotations

from typing import Any, Dict, List, Protocol, Sequence

from ..employees.model import EmployeeTable
from .model import ReportFilter


class ReportRepository(Protocol):
    def generate(self, table: EmployeeTable, *, columns: Sequence[str], filters: Sequence[ReportFilter]) -> List[Dict[str, Any]]:
        raise NotImplementedError

    def unique_values(self, table: EmployeeTable, column: str) -> List[Any]:
        raise NotImplementedError
