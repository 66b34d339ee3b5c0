"""Data models for lift-log."""

from .training_log import BodyPart, TrainingLog

__all__ = [
    "BodyPart",
    "TrainingLog",
]
