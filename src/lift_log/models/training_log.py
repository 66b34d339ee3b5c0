"""Training log record definitions."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4


class BodyPart(str, Enum):
    """Body part categories selectable when logging a set."""

    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"

    @property
    def label(self) -> str:
        """Human-readable name for menus and list rows."""
        return self.value.capitalize()


def _require(value, expected: type | tuple[type, ...], key: str):
    """Return value if it has the expected JSON type, else raise TypeError."""
    # bool is an int subclass but never a valid count or weight
    if isinstance(value, bool) or not isinstance(value, expected):
        raise TypeError(f"Field '{key}' has unexpected type {type(value).__name__}")
    return value


@dataclass(frozen=True)
class TrainingLog:
    """One logged exercise: weight, reps and sets for a body part on a date.

    Volume is derived from the stored fields and is never serialized.
    """

    date: datetime
    part: BodyPart
    exercise_name: str
    weight: float  # kg
    reps: int
    sets: int
    id: str = field(default_factory=lambda: str(uuid4()))

    @property
    def volume(self) -> float:
        """Training volume: weight x reps x sets."""
        return self.weight * (self.reps * self.sets)

    @classmethod
    def create(
        cls,
        part: BodyPart | str,
        exercise_name: str,
        weight: float,
        reps: int,
        sets: int,
        date: datetime | None = None,
    ) -> "TrainingLog":
        """Create a new record with a fresh id, dated now unless given."""
        return cls(
            date=date or datetime.now(),
            part=BodyPart(part),
            exercise_name=exercise_name,
            weight=float(weight),
            reps=reps,
            sets=sets,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "part": self.part.value,
            "exerciseName": self.exercise_name,
            "weight": self.weight,
            "reps": self.reps,
            "sets": self.sets,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TrainingLog":
        """Create from dictionary.

        Raises:
            KeyError: a field is missing
            TypeError: a field has the wrong JSON type
            ValueError: unknown body part, unparseable date, or a weight
                too large for a float
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected an object, got {type(data).__name__}")

        try:
            weight = float(_require(data["weight"], (int, float), "weight"))
        except OverflowError as e:
            raise ValueError(f"Field 'weight' is out of range: {e}") from e

        return cls(
            id=_require(data["id"], str, "id"),
            date=datetime.fromisoformat(_require(data["date"], str, "date")),
            part=BodyPart(_require(data["part"], str, "part")),
            exercise_name=_require(data["exerciseName"], str, "exerciseName"),
            weight=weight,
            reps=_require(data["reps"], int, "reps"),
            sets=_require(data["sets"], int, "sets"),
        )

    def get_summary_display(self) -> str:
        """Get the list row headline, e.g. 'Bench Press - Chest'."""
        return f"{self.exercise_name} - {self.part.label}"

    def get_detail_display(self) -> str:
        """Get the weight/reps/sets line."""
        return f"Weight: {self.weight:.1f}kg  Reps: {self.reps}  Sets: {self.sets}"

    def get_volume_display(self) -> str:
        """Get the volume line."""
        return f"Volume: {self.volume:.1f}"

    def get_date_display(self) -> str:
        """Get the session date as a calendar date."""
        return self.date.strftime("%Y-%m-%d")
