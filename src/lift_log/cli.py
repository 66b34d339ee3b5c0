"""CLI entry point for lift-log."""

import logging

import click

from . import __version__
from .commands import add, init, list_logs, parts


@click.group()
@click.version_option(version=__version__, prog_name="lift-log")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    envvar="LIFT_LOG_DATA_DIR",
    help="Directory holding the log database",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, data_dir: str | None, verbose: bool):
    """lift-log: a manual strength-training log.

    Record the weight, reps and sets you lift and keep a running list
    with the training volume of each entry.

    Example usage:

        # Initialize the project
        lift-log init

        # Log a set
        lift-log add -p chest -e "Bench Press" -w 60 -r 10 -s 3

        # Show the log
        lift-log list
    """
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = data_dir
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# Register commands
main.add_command(init)
main.add_command(add)
main.add_command(list_logs)
main.add_command(parts)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
