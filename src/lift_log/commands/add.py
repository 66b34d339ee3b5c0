"""Add training log entry command."""

from datetime import datetime

import click
import questionary

from ..clients.manual import ManualEntryClient, build_entry, submit_entry
from ..clients.manual.client import custom_style
from ..db.log_store import TrainingLogStore
from ..models.training_log import BodyPart, TrainingLog
from .base import echo_error, echo_success, ensure_initialized, open_store

INVALID_INPUT_MESSAGE = (
    "Nothing was logged. Weight must be a number >= 0, "
    "reps and sets whole numbers >= 1."
)


def _echo_logged(log: TrainingLog) -> None:
    echo_success(f"Logged {log.get_summary_display()}")
    click.echo(f"  {log.get_detail_display()}")
    click.echo(f"  {log.get_volume_display()}")


def _run_form(store: TrainingLogStore, part: BodyPart, repeat: bool) -> int:
    """Run the interactive form. Returns the number of entries added.

    Stops quietly when the user aborts a prompt.
    """
    client = ManualEntryClient()
    added = 0

    while True:
        answers = client.collect_answers(default_part=part)
        if answers is None:
            break

        entry = answers.to_entry()
        if submit_entry(store, entry, datetime.now()):
            _echo_logged(store.current()[-1])
            part = entry.part
            added += 1
        else:
            echo_error(INVALID_INPUT_MESSAGE)

        if not repeat:
            break
        another = questionary.confirm(
            "Log another set?", default=True, style=custom_style
        ).ask()
        if not another:
            break

    return added


@click.command()
@click.option(
    "--part",
    "-p",
    type=click.Choice([p.value for p in BodyPart]),
    default=BodyPart.CHEST.value,
    show_default=True,
    help="Body part trained",
)
@click.option("--exercise", "-e", help="Exercise name")
@click.option("--weight", "-w", help="Weight in kg")
@click.option("--reps", "-r", help="Repetitions per set")
@click.option("--sets", "-s", "sets_", help="Number of sets")
@click.option(
    "--repeat",
    is_flag=True,
    help="Keep the form open for more entries",
)
@click.pass_context
def add(
    ctx: click.Context,
    part: str,
    exercise: str | None,
    weight: str | None,
    reps: str | None,
    sets_: str | None,
    repeat: bool,
):
    """Log a set of an exercise.

    Without options an interactive form is shown, starting on --part.
    Pass all of --exercise, --weight, --reps and --sets to log without
    prompting.

    Examples:
        # Interactive form
        lift-log add

        # One-shot
        lift-log add -p chest -e "Bench Press" -w 60 -r 10 -s 3
    """
    ensure_initialized(ctx)

    fields = [exercise, weight, reps, sets_]
    if any(f is not None for f in fields) and not all(f is not None for f in fields):
        echo_error("Pass --exercise, --weight, --reps and --sets together, or none of them.")
        ctx.exit(1)

    store = open_store(ctx)

    if exercise is None:
        if _run_form(store, BodyPart(part), repeat) == 0:
            ctx.exit(1)
        return

    entry = build_entry(part, exercise, weight, reps, sets_)
    if not submit_entry(store, entry, datetime.now()):
        echo_error(INVALID_INPUT_MESSAGE)
        ctx.exit(1)

    _echo_logged(store.current()[-1])
