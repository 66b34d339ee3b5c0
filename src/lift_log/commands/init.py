"""Initialize project command."""

import click

from ..db import get_db_path, init_db
from .base import echo_info, echo_success, get_data_dir


@click.command()
@click.pass_context
def init(ctx: click.Context):
    """Initialize the lift-log data directory and database."""
    data_dir = get_data_dir(ctx)
    echo_info(f"Initializing lift-log in {data_dir}")

    data_dir.mkdir(parents=True, exist_ok=True)
    init_db(get_db_path(data_dir))
    echo_success("Database initialized")

    click.echo()
    click.echo("Next steps:")
    click.echo("  lift-log add          # Log a set with the interactive form")
    click.echo("  lift-log list         # Show your training log")
