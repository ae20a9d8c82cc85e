from __future__ import annotations

import threading
from datetime import datetime, timezone
from typing import Callable, Dict

from ..common.datetime_utils import utc_now


class TokenRevocationList:
    """Token ids revoked by logout, each kept only until its token expires."""

    def __init__(self, *, clock: Callable[[], datetime] = utc_now):
        self._clock = clock
        self._revoked: Dict[str, float] = {}
        self._lock = threading.Lock()

    def _purge(self) -> None:
        now = self._clock().timestamp()
        for jti in [j for j, exp in self._revoked.items() if exp <= now]:
            del self._revoked[jti]

    def revoke(self, jti: str, expires_at) -> None:
        if isinstance(expires_at, datetime):
            expires_at = expires_at.astimezone(timezone.utc).timestamp()
        with self._lock:
            self._purge()
            self._revoked[jti] = float(expires_at)

    def is_revoked(self, jti: str) -> bool:
        with self._lock:
            self._purge()
            return jti in self._revoked

    def __len__(self) -> int:
        with self._lock:
            self._purge()
            return len(self._revoked)
