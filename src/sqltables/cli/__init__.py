"""CLI entry point. `sqltables` resolves here."""

from __future__ import annotations

import click

from sqltables.cli.config import config
from sqltables.cli.dialects import dialects
from sqltables.cli.extract import extract


@click.group()
@click.version_option(package_name="sqltables")
def main() -> None:
    """sqltables: list the tables a SQL statement references."""


main.add_command(extract)
main.add_command(dialects)
main.add_command(config)
