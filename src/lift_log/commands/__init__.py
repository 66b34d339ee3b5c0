"""CLI commands for lift-log."""

from .add import add
from .init import init
from .list_logs import list_logs
from .parts import parts

__all__ = [
    "add",
    "init",
    "list_logs",
    "parts",
]
