from __future__ import annotations

import logging
import sqlite3
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    path: str
    timeout: float = 5.0


class DatabaseConnection:
    """Owner of the single SQLite connection used by all repositories.

    Built once by the container and passed to every repository. Callers must
    ``open()`` it before use and ``close()`` it on shutdown. Statement
    execution is serialized through ``lock`` since request threads share the
    connection.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._conn: Optional[sqlite3.Connection] = None
        self.lock = threading.RLock()

    @property
    def path(self) -> str:
        return self._config.path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> "DatabaseConnection":
        if self._conn is not None:
            return self
        if self._config.path != ":memory:":
            Path(self._config.path).parent.mkdir(parents=True, exist_ok=True)
        logger.info("Opening database %s", self._config.path)
        conn = sqlite3.connect(
            self._config.path,
            timeout=self._config.timeout,
            isolation_level=None,
            check_same_thread=False,
        )
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA encoding = 'UTF-8'")
        conn.execute("PRAGMA foreign_keys = ON")
        self._conn = conn
        return self

    def close(self) -> None:
        with self.lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("Closed database %s", self._config.path)

    def connect(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database connection is not open")
        return self._conn

    def __enter__(self) -> "DatabaseConnection":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
