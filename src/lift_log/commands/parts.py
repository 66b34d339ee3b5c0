"""Body part listing command."""

import click

from ..models.training_log import BodyPart


@click.command()
def parts():
    """List the body parts you can log against."""
    for part in BodyPart:
        click.echo(f"  {part.value:<10} {part.label}")
