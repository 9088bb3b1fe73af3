"""Shared helpers for CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from sqltables.config import Config, ConfigError, load_config


def resolve_sql_source(
    sql: str | None, file_path: Path | None, from_stdin: bool
) -> tuple[str, str]:
    """Resolve SQL from the argument, --file or stdin. Exactly one source required.

    Returns (sql_text, source_label).
    """
    given = sum(1 for source in (sql, file_path, from_stdin) if source)
    if given > 1:
        raise click.UsageError("Provide SQL as an argument, --file or --from-stdin, not several.")
    if from_stdin:
        if sys.stdin.isatty():
            raise click.UsageError("--from-stdin requires piped input (stdin is a terminal).")
        text = sys.stdin.read().strip()
        if not text:
            raise click.UsageError("--from-stdin: stdin was empty.")
        return text, "stdin"
    if file_path is not None:
        try:
            text = file_path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as e:
            raise click.UsageError(f"--file: cannot read {file_path}: {e}") from e
        if not text:
            raise click.UsageError(f"--file: {file_path} is empty.")
        return text, f"file:{file_path}"
    if not sql or not sql.strip():
        raise click.UsageError("Missing argument 'SQL'. Provide SQL, --file or --from-stdin.")
    return sql, "sql"


def load_config_or_fail() -> Config:
    try:
        return load_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
