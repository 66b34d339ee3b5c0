"""Training log listing command."""

import click

from .base import echo_info, ensure_initialized, format_table, open_store


@click.command(name="list")
@click.pass_context
def list_logs(ctx: click.Context):
    """Show all logged sets, oldest first, with their volume."""
    ensure_initialized(ctx)

    logs = open_store(ctx).current()
    if not logs:
        echo_info("No sets logged yet. Add one with 'lift-log add'")
        return

    headers = ["Date", "Part", "Exercise", "Weight (kg)", "Reps", "Sets", "Volume"]
    rows = []

    for log in logs:
        rows.append([
            log.get_date_display(),
            log.part.label,
            log.exercise_name[:30] + "..." if len(log.exercise_name) > 30 else log.exercise_name,
            f"{log.weight:.1f}",
            str(log.reps),
            str(log.sets),
            f"{log.volume:.1f}",
        ])

    click.echo()
    click.echo(format_table(headers, rows))
    click.echo()
    click.echo(f"Total: {len(logs)} log(s)")
