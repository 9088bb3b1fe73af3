"""The `config` command group: inspect ~/.sqltables/config.toml."""

from __future__ import annotations

import click

from sqltables.cli._shared import load_config_or_fail
from sqltables.config import config_path


@click.group()
def config() -> None:
    """Inspect the configuration (~/.sqltables/config.toml)."""


@config.command("show")
def config_show() -> None:
    """Print the effective configuration."""
    cfg = load_config_or_fail()
    path = config_path()
    click.echo(f"# {path}{'' if path.exists() else ' (not found, using defaults)'}")
    click.echo(f"dialect = {cfg.dialect}")
    click.echo(f"format = {cfg.output_format}")
    click.echo(f"log.enabled = {str(cfg.log_enabled).lower()}")
    click.echo(f"log.retention_days = {cfg.log_retention_days}")


@config.command("path")
def config_path_cmd() -> None:
    """Print the config file location."""
    click.echo(str(config_path()))
