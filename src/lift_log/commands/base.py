"""Shared CLI utilities."""

from pathlib import Path

import click

from ..db import SqliteKeyValueStore, TrainingLogStore, get_db_path
from ..db.engine import DATA_DIR


def get_data_dir(ctx: click.Context | None = None) -> Path:
    """Get the data directory path, honouring the --data-dir option."""
    if ctx is not None and ctx.obj and ctx.obj.get("data_dir"):
        return Path(ctx.obj["data_dir"])
    return DATA_DIR


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    db_path = get_db_path(get_data_dir(ctx))
    if not db_path.exists():
        click.echo(
            click.style("Error: ", fg="red")
            + "Project not initialized. Run 'lift-log init' first."
        )
        ctx.exit(1)


def open_store(ctx: click.Context) -> TrainingLogStore:
    """Load the training log store from the configured data directory."""
    db_path = get_db_path(get_data_dir(ctx))
    return TrainingLogStore(SqliteKeyValueStore(db_path))


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(str(cell)))

    lines = ["".join(h.ljust(widths[i] + padding) for i, h in enumerate(headers))]
    lines.append("".join("-" * w + " " * padding for w in widths))
    for row in rows:
        lines.append(
            "".join(str(cell).ljust(widths[i] + padding) for i, cell in enumerate(row))
        )

    return "\n".join(line.rstrip() for line in lines)
