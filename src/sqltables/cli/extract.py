"""The `extract` command: print the tables a SQL text references."""

from __future__ import annotations

import time
from pathlib import Path

import click

from sqltables.cli._output import format_failure, format_result
from sqltables.cli._shared import load_config_or_fail, resolve_sql_source
from sqltables.extract import run_extraction
from sqltables.extract.dialects import UnknownDialectError, dialect_names, resolve_dialect
from sqltables.runlog import cleanup_old_logs, log_extraction


@click.command()
@click.argument("sql", required=False, default=None)
@click.option(
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read SQL from a file.",
)
@click.option("--from-stdin", is_flag=True, help="Read SQL from stdin instead of argument.")
@click.option(
    "--dialect",
    default=None,
    envvar="SQLTABLES_DIALECT",
    help=f"SQL dialect ({', '.join(dialect_names())}).",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default=None,
    help="Output format (default: text, or `format` from the config file).",
)
@click.option("--no-log", is_flag=True, help="Do not record this run in the run log.")
def extract(
    sql: str | None,
    file_path: Path | None,
    from_stdin: bool,
    dialect: str | None,
    output_format: str | None,
    no_log: bool,
) -> None:
    """Print the tables referenced by SQL, one per line, sorted.

    Queries, CREATE VIEW and CREATE TABLE ... AS are walked; other statements
    (INSERT, UPDATE, DELETE, other DDL) are skipped.
    """
    config = load_config_or_fail()
    sql, source = resolve_sql_source(sql, file_path, from_stdin)

    dialect = dialect or config.dialect
    try:
        resolve_dialect(dialect)
    except UnknownDialectError as e:
        raise click.BadParameter(
            f"{e}. Valid: {', '.join(dialect_names())}", param_hint="'--dialect'"
        ) from e
    output_format = output_format or config.output_format
    log_enabled = config.log_enabled and not no_log

    if log_enabled:
        cleanup_old_logs(retention_days=config.log_retention_days)

    started = time.perf_counter()
    result = run_extraction(sql, dialect=dialect)
    duration_ms = (time.perf_counter() - started) * 1000

    if log_enabled:
        log_extraction(result, source=source, duration_ms=duration_ms)

    if output_format == "json":
        click.echo(format_result(result, output_format="json"))
    elif result.failed:
        click.echo(format_failure(result), err=True)
    elif result.tables:
        click.echo(format_result(result, output_format="text"))

    if result.failed:
        raise SystemExit(1)
