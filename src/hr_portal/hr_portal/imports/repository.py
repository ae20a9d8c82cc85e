from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from .model import LoadTable

RowCallback = Callable[[int, int], None]


class TableLoadRepository(Protocol):
    def load_rows(
        self,
        table: LoadTable,
        *,
        columns: Sequence[str],
        rows: Sequence[Mapping[str, Any]],
        on_row: Optional[RowCallback] = None,
    ) -> int:
        """Write every row in one transaction; all or nothing."""

        raise NotImplementedError
