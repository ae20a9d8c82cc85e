from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Infotype:
    """SAP infotype qualifier of a transaction authorization."""

    infotype_code: str
    population: Optional[str] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class Transaction:
    id: int
    sap_employee_id: int
    transaction_code: str
    infotypes: List[Infotype] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class PermissionSystem:
    """Hilan system qualifier of a permission."""

    name: str
    permission_type: Optional[str] = None
    population: Optional[str] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class Permission:
    id: int
    hilan_employee_id: int
    name: str
    systems: List[PermissionSystem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "hilan_employee_id": self.hilan_employee_id,
            "name": self.name,
            "systems": [
                {"id": s.id, "name": s.name, "permissionType": s.permission_type, "population": s.population}
                for s in self.systems
            ],
        }
