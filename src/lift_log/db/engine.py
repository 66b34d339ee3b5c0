"""Database file location and schema setup."""

import sqlite3
from contextlib import closing
from pathlib import Path

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent.parent / "data"

DB_FILENAME = "lift_log.db"


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


def init_db(db_path: Path | None = None) -> None:
    """Initialize the key-value table."""
    if db_path is None:
        db_path = get_db_path()

    with closing(sqlite3.connect(db_path)) as conn:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS kv_store (
                key TEXT PRIMARY KEY,
                value BLOB NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        conn.commit()
