"""SQLite client with an explicit connect/close lifecycle."""
from __future__ import annotations

import os
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from observability import log_event

from .migrate import apply_schema


class DatabaseClosedError(RuntimeError):
    pass


class InterviewDatabase:  # One shared connection, serialized by a lock
    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def connect(self) -> "InterviewDatabase":  # Open the connection and ensure the schema
        with self._lock:
            if self._conn is not None:
                return self
            if self.path != ":memory:":
                directory = os.path.dirname(self.path) or "."
                os.makedirs(directory, exist_ok=True)
            conn = sqlite3.connect(self.path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            apply_schema(conn)
            self._conn = conn
        log_event("db_connected", "-", node=self.path)
        return self

    def close(self) -> None:
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None
        log_event("db_closed", "-", node=self.path)

    def __enter__(self) -> "InterviewDatabase":
        return self.connect()

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Yield the connection; commit on success, roll back on error."""

        with self._lock:
            if self._conn is None:
                raise DatabaseClosedError(f"Database {self.path} is not connected")
            conn = self._conn
            try:
                yield conn
                conn.commit()
            except BaseException:
                conn.rollback()
                raise


__all__ = ["DatabaseClosedError", "InterviewDatabase"]
