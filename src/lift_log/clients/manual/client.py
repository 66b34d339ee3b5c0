"""Interactive entry form for logging a set."""

import math
from dataclasses import dataclass
from datetime import datetime

import questionary
from questionary import Style

from ...db.log_store import TrainingLogStore
from ...models.training_log import BodyPart

# Custom style for the form
custom_style = Style(
    [
        ("qmark", "fg:#673ab7 bold"),
        ("question", "bold"),
        ("answer", "fg:#f44336 bold"),
        ("pointer", "fg:#673ab7 bold"),
        ("highlighted", "fg:#673ab7 bold"),
        ("selected", "fg:#cc5454"),
        ("separator", "fg:#cc5454"),
        ("instruction", ""),
        ("text", ""),
    ]
)


@dataclass
class EntryInput:
    """Typed values collected from the form, ready for the store."""

    part: BodyPart
    exercise_name: str
    weight: float
    reps: int
    sets: int


def parse_weight(text: str | None) -> float | None:
    """Parse a weight in kg. Returns None unless it is a finite number >= 0."""
    try:
        weight = float(text)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(weight) or weight < 0:
        return None
    return weight


def parse_count(text: str | None) -> int | None:
    """Parse a rep or set count. Returns None unless it is an integer >= 1."""
    try:
        count = int(text)
    except (TypeError, ValueError):
        return None
    if count < 1:
        return None
    return count


def build_entry(
    part: BodyPart | str,
    exercise_name: str | None,
    weight_text: str | None,
    reps_text: str | None,
    sets_text: str | None,
) -> EntryInput | None:
    """Convert raw form values. Returns None if any number fails to parse."""
    weight = parse_weight(weight_text)
    reps = parse_count(reps_text)
    sets = parse_count(sets_text)
    if weight is None or reps is None or sets is None:
        return None

    return EntryInput(
        part=BodyPart(part),
        exercise_name=exercise_name or "",
        weight=weight,
        reps=reps,
        sets=sets,
    )


def submit_entry(
    store: TrainingLogStore,
    entry: EntryInput | None,
    date: datetime | None = None,
) -> bool:
    """Append the entry to the store. Returns False when there is nothing to add."""
    if entry is None:
        return False

    store.append(
        date=date or datetime.now(),
        part=entry.part,
        exercise_name=entry.exercise_name,
        weight=entry.weight,
        reps=entry.reps,
        sets=entry.sets,
    )
    return True


@dataclass
class FormAnswers:
    """Raw answers from the form, before numbers are parsed."""

    part: BodyPart
    exercise_name: str
    weight_text: str
    reps_text: str
    sets_text: str

    def to_entry(self) -> EntryInput | None:
        """Parse the answers. Returns None if any number is invalid."""
        return build_entry(
            self.part,
            self.exercise_name.strip(),
            self.weight_text,
            self.reps_text,
            self.sets_text,
        )


class ManualEntryClient:
    """Interactive form for a single training log entry.

    Each call starts from empty fields, so the form is effectively
    cleared after every submission.
    """

    def collect_answers(self, default_part: BodyPart = BodyPart.CHEST) -> FormAnswers | None:
        """Run the form. Returns None if the user aborts at any prompt."""
        part = questionary.select(
            "Body part:",
            choices=[questionary.Choice(p.label, p) for p in BodyPart],
            default=default_part,
            style=custom_style,
        ).ask()
        if part is None:
            return None

        answers = []
        for prompt in ("Exercise name:", "Weight (kg):", "Reps:", "Sets:"):
            answer = questionary.text(prompt, style=custom_style).ask()
            if answer is None:
                return None
            answers.append(answer)

        return FormAnswers(part, *answers)

    def collect_entry(self, default_part: BodyPart = BodyPart.CHEST) -> EntryInput | None:
        """Run the form. Returns None if aborted or a number is invalid."""
        answers = self.collect_answers(default_part)
        if answers is None:
            return None
        return answers.to_entry()
