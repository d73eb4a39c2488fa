"""Storage backends for serialized override records.

A backend maps a namespaced key to an opaque text payload. Backends raise
their native errors; OverridesStore decides what to do with them.
"""

from __future__ import annotations

import sqlite3
import threading
from pathlib import Path
from typing import Protocol


class Backend(Protocol):
    def load(self, key: str) -> str | None: ...

    def save(self, key: str, payload: str) -> None: ...


class MemoryBackend:
    """Process-local backend, used by tests and the "memory" config option."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def load(self, key: str) -> str | None:
        return self._data.get(key)

    def save(self, key: str, payload: str) -> None:
        self._data[key] = payload


class SqliteBackend:
    """Key/value table in a SQLite file.

    Schema:
        overrides(key TEXT PRIMARY KEY, payload TEXT NOT NULL)
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._conn: sqlite3.Connection | None = None
        self._conn_lock = threading.Lock()

    def _get_conn(self) -> sqlite3.Connection:
        """Lazy connection, created on first use."""
        with self._conn_lock:
            if self._conn is None:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                conn = sqlite3.connect(str(self.path), check_same_thread=False)
                conn.execute(
                    "CREATE TABLE IF NOT EXISTS overrides ("
                    "key TEXT PRIMARY KEY, payload TEXT NOT NULL)"
                )
                conn.commit()
                self._conn = conn
            return self._conn

    def load(self, key: str) -> str | None:
        cur = self._get_conn().execute(
            "SELECT payload FROM overrides WHERE key = ?",
            (key,),
        )
        row = cur.fetchone()
        if row:
            return row[0]
        return None

    def save(self, key: str, payload: str) -> None:
        conn = self._get_conn()
        conn.execute(
            "INSERT INTO overrides (key, payload) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET payload = excluded.payload",
            (key, payload),
        )
        conn.commit()

    def close(self) -> None:
        with self._conn_lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
