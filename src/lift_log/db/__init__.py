"""Storage layer for lift-log."""

from .engine import get_db_path, init_db
from .kv import KeyValueStore, MemoryKeyValueStore, SqliteKeyValueStore, StorageError
from .log_store import STORAGE_KEY, TrainingLogStore

__all__ = [
    "get_db_path",
    "init_db",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "SqliteKeyValueStore",
    "STORAGE_KEY",
    "StorageError",
    "TrainingLogStore",
]
