from __future__ import annotations

import threading
from typing import Callable, Dict, Optional

from .model import ProgressEvent

ProgressCallback = Callable[[ProgressEvent], None]


class ProgressBoard:
    """One-way import progress channel.

    The loader publishes, readers poll the latest event per channel. Nothing
    is queued or acknowledged: a newer event overwrites an unread older one.
    """

    def __init__(self):
        self._latest: Dict[str, ProgressEvent] = {}
        self._lock = threading.Lock()

    def publish(self, channel: str, event: ProgressEvent) -> None:
        with self._lock:
            self._latest[channel] = event

    def latest(self, channel: str) -> Optional[ProgressEvent]:
        with self._lock:
            return self._latest.get(channel)

    def clear(self, channel: str) -> None:
        with self._lock:
            self._latest.pop(channel, None)

    def publisher(self, channel: str) -> ProgressCallback:
        return lambda event: self.publish(channel, event)
