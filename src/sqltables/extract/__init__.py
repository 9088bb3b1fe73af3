"""Extraction pipeline: resolve dialect, parse, collect tables, report."""

from __future__ import annotations

import sqlglot

from sqltables.diagnostics import Diagnostic, ExtractionResult, codes
from sqltables.extract._types import StatementKind
from sqltables.extract.classify import classify, statement_label
from sqltables.extract.dialects import (
    DEFAULT_DIALECT,
    UnknownDialectError,
    dialect_names,
    resolve_dialect,
)
from sqltables.extract.tables import extract_tables

__all__ = [
    "StatementKind",
    "extract_tables",
    "run_extraction",
]


def run_extraction(sql: str, *, dialect: str | None = None) -> ExtractionResult:
    """Run the full extraction pipeline on a SQL string.

    Steps:
        1. Reject empty input
        2. Resolve the dialect name
        3. Parse SQL into statements (parse errors stop here)
        4. Collect referenced tables
        5. Report statements the collector does not interpret

    Args:
        sql: Raw SQL text, possibly several `;`-separated statements.
        dialect: Dialect name (None = generic).

    Returns:
        ExtractionResult with the sorted tables and all diagnostics.
    """
    sql = sql.strip()
    dialect_name = (dialect or DEFAULT_DIALECT).strip().lower()
    result = ExtractionResult(sql=sql, dialect=dialect_name)

    # Step 1: Empty input
    if not sql:
        result.diagnostics.append(
            Diagnostic.error(codes.EMPTY_INPUT, "no SQL text given")
        )
        return result

    # Step 2: Dialect
    try:
        read = resolve_dialect(dialect_name)
    except UnknownDialectError as e:
        result.diagnostics.append(
            Diagnostic.error(codes.UNKNOWN_DIALECT, str(e))
            .note(f"valid dialects: {', '.join(dialect_names())}")
        )
        return result

    # Step 3: Parse
    try:
        parsed = sqlglot.parse(sql, read=read)
    except sqlglot.errors.ParseError as e:
        result.diagnostics.append(_syntax_error(e))
        return result
    except sqlglot.errors.SqlglotError as e:
        result.diagnostics.append(
            Diagnostic.error(codes.SYNTAX_ERROR, f"SQL syntax error: {e}")
        )
        return result

    # Trailing semicolons yield empty statements.
    statements = [s for s in parsed if s is not None]

    # Step 4: Collect
    result.tables = extract_tables(statements)

    # Step 5: Coverage
    for position, statement in enumerate(statements, start=1):
        kind = classify(statement)
        result.statements.append(kind.value)
        if kind == StatementKind.OTHER:
            result.diagnostics.append(
                Diagnostic.info(
                    codes.STATEMENT_SKIPPED,
                    f"statement {position} ({statement_label(statement)}) not interpreted",
                ).note("only queries, CREATE VIEW and CREATE TABLE are walked for tables")
            )

    return result


def _syntax_error(error: sqlglot.errors.ParseError) -> Diagnostic:
    diag = Diagnostic.error(codes.SYNTAX_ERROR, f"SQL syntax error: {error}")
    if error.errors:
        first = error.errors[0]
        line, col = first.get("line"), first.get("col")
        if line is not None and col is not None:
            diag.at(line, col)
    return diag
