from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..attendance.model import ATTENDANCE_COLUMNS
from ..core.enums import ImportTarget
from ..employees.model import HILAN_TABLE, SAP_TABLE


@dataclass(frozen=True)
class LoadTable:
    """Target table of a simple (row-per-statement) bulk load."""

    name: str
    columns: tuple
    key: Optional[str] = None


SIMPLE_TABLES = {
    ImportTarget.SAP_EMPLOYEES: LoadTable(name=SAP_TABLE.name, columns=SAP_TABLE.columns, key=SAP_TABLE.key),
    ImportTarget.HILAN_EMPLOYEES: LoadTable(name=HILAN_TABLE.name, columns=HILAN_TABLE.columns, key=HILAN_TABLE.key),
    ImportTarget.HILAN_ATTENDANCE: LoadTable(name="hilan_attendance", columns=ATTENDANCE_COLUMNS),
}


@dataclass(frozen=True)
class ProgressEvent:
    step: str
    message: str = ""
    fraction: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        payload = {"step": self.step, "message": self.message}
        if self.fraction is not None:
            payload["progress"] = self.fraction
        payload.update(self.extra)
        return payload


@dataclass(frozen=True)
class ImportResult:
    table: str
    rows: int

    @property
    def message(self) -> str:
        return f"Data loaded successfully into {self.table}"
