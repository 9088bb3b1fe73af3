"""The `dialects` command: list accepted dialect names."""

from __future__ import annotations

import click

from sqltables.extract.dialects import dialect_names


@click.command()
def dialects() -> None:
    """List the accepted --dialect names."""
    for name in dialect_names():
        click.echo(name)
