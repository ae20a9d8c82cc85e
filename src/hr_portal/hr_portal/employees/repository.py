from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, Tuple

from ..core.enums import SortOrder
from .model import EmployeeTable


class EmployeeRepository(Protocol):
    """Read access to the SAP and Hilan employee tables."""

    def search(
        self,
        table: EmployeeTable,
        *,
        query: str,
        sort_field: str,
        sort_order: SortOrder,
        limit: int,
        offset: int,
    ) -> Tuple[List[Dict[str, Any]], int]:
        raise NotImplementedError

    def get_by_id(self, table: EmployeeTable, employee_id: int) -> Optional[Dict[str, Any]]:
        raise NotImplementedError
