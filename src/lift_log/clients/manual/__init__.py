"""Manual entry via interactive form."""

from .client import (
    EntryInput,
    FormAnswers,
    ManualEntryClient,
    build_entry,
    parse_count,
    parse_weight,
    submit_entry,
)

__all__ = [
    "build_entry",
    "EntryInput",
    "FormAnswers",
    "ManualEntryClient",
    "parse_count",
    "parse_weight",
    "submit_entry",
]
