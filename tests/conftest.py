"""Pytest configuration and fixtures."""

import pytest
import tempfile
from datetime import datetime
from pathlib import Path

from lift_log.db import MemoryKeyValueStore, StorageError
from lift_log.models.training_log import BodyPart, TrainingLog


class FailingKeyValueStore:
    """Key-value store whose every call fails."""

    def get(self, key: str) -> bytes | None:
        raise StorageError("storage unavailable")

    def set(self, key: str, value: bytes) -> None:
        raise StorageError("storage unavailable")


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def memory_storage():
    """Create an empty in-memory key-value store."""
    return MemoryKeyValueStore()


@pytest.fixture
def failing_storage():
    """Create a key-value store that cannot read or write."""
    return FailingKeyValueStore()


@pytest.fixture
def session_date():
    """A fixed training session date."""
    return datetime(2024, 5, 14, 18, 30, 15, 250000)


@pytest.fixture
def sample_log(session_date):
    """Create a sample training log for testing."""
    return TrainingLog(
        id="6f1c2a52-5d0e-4d0b-9a54-3a8e8f0d9b11",
        date=session_date,
        part=BodyPart.CHEST,
        exercise_name="Bench Press",
        weight=60.0,
        reps=10,
        sets=3,
    )
