"""In-memory training log backed by whole-collection persistence."""

import json
import logging
from datetime import datetime

from ..models.training_log import BodyPart, TrainingLog
from .kv import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "TrainingLogs"


class TrainingLogStore:
    """Ordered, append-only collection of training logs.

    The collection is loaded from `storage` once at construction and the
    whole collection is written back after every append. During a session
    the in-memory list is authoritative; storage only matters at startup.
    Storage failures never reach the caller.
    """

    def __init__(self, storage: KeyValueStore, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._logs: list[TrainingLog] = []
        self.load()

    def append(
        self,
        date: datetime,
        part: BodyPart | str,
        exercise_name: str,
        weight: float,
        reps: int,
        sets: int,
    ) -> None:
        """Record a new log entry and persist the collection."""
        log = TrainingLog.create(
            part=part,
            exercise_name=exercise_name,
            weight=weight,
            reps=reps,
            sets=sets,
            date=date,
        )
        self._logs.append(log)
        self.persist()

    def current(self) -> tuple[TrainingLog, ...]:
        """Return the logs in insertion order."""
        return tuple(self._logs)

    def load(self) -> None:
        """Replace the in-memory logs with the persisted ones, if readable."""
        try:
            data = self.storage.get(self.key)
        except Exception as e:
            # Backends should raise StorageError, but any failure means "no data"
            logger.debug("Could not read training logs: %s", e)
            return

        if data is None:
            return

        try:
            raw = json.loads(data)
            if not isinstance(raw, list):
                raise TypeError(f"Expected a list, got {type(raw).__name__}")
            logs = [TrainingLog.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError, RecursionError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors;
            # RecursionError comes from pathologically nested arrays
            logger.debug("Discarding unreadable training logs: %s", e)
            return

        self._logs = logs

    def persist(self) -> None:
        """Write the whole collection under the storage key."""
        blob = json.dumps([log.to_dict() for log in self._logs]).encode("utf-8")
        try:
            self.storage.set(self.key, blob)
        except Exception as e:
            # The in-memory logs stay authoritative for the session
            logger.debug("Could not save training logs: %s", e)
