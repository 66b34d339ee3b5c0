"""Key-value blob storage backends."""

import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Protocol, runtime_checkable

from .engine import get_db_path, init_db


class StorageError(Exception):
    """Raised when a key-value backend cannot read or write."""


@runtime_checkable
class KeyValueStore(Protocol):
    """Protocol for local key-value blob storage.

    Implementations must raise StorageError when a read or write fails.
    """

    def get(self, key: str) -> bytes | None:
        """Return the value stored under key, or None if absent."""
        ...

    def set(self, key: str, value: bytes) -> None:
        """Store value under key, replacing any previous value."""
        ...


class MemoryKeyValueStore:
    """Dict-backed store that lives as long as the process."""

    def __init__(self, initial: dict[str, bytes] | None = None):
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = value


class SqliteKeyValueStore:
    """Key-value store kept in a single SQLite table.

    Every call opens its own connection, so no handle outlives the call.
    The table is created on first use if `init` was never run.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()
        self._initialized = False

    def _ensure_schema(self) -> None:
        if not self._initialized:
            init_db(self.db_path)
            self._initialized = True

    def get(self, key: str) -> bytes | None:
        try:
            self._ensure_schema()
            with closing(sqlite3.connect(self.db_path)) as conn:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                ).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read '{key}': {e}") from e

        if row is None:
            return None
        return bytes(row[0])

    def set(self, key: str, value: bytes) -> None:
        try:
            self._ensure_schema()
            with closing(sqlite3.connect(self.db_path)) as conn:
                conn.execute(
                    """
                    INSERT INTO kv_store (key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = CURRENT_TIMESTAMP
                    """,
                    (key, sqlite3.Binary(value)),
                )
                conn.commit()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to write '{key}': {e}") from e
