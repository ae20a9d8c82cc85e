from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from ..core.enums import FilterOperation


@dataclass(frozen=True)
class ReportFilter:
    """``column IN values`` (include) or ``column NOT IN values`` (exclude)."""

    column: str
    values: Tuple[Any, ...]
    operation: FilterOperation = FilterOperation.INCLUDE
