from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence, Tuple

from .model import InterfaceFilters

BatchCallback = Callable[[int, int], None]


class InterfaceRepository(Protocol):
    """Storage for Hilan interface reconciliation records."""

    def list_page(self, filters: InterfaceFilters, *, limit: int, offset: int) -> Tuple[List[Dict[str, Any]], int]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def update_review(self, record_id: int, *, status: Optional[str], note: Optional[str]) -> bool:
        raise NotImplementedError

    def upsert(self, row: Mapping[str, Any]) -> int:
        raise NotImplementedError

    def upsert_many(
        self,
        rows: Sequence[Mapping[str, Any]],
        *,
        batch_size: int,
        on_batch: Optional[BatchCallback] = None,
    ) -> int:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
