"""Classify parsed statements by how the table collector treats them."""

from __future__ import annotations

from sqlglot import exp

from sqltables.extract._types import StatementKind


def classify(statement: exp.Expression) -> StatementKind:
    """Name the kind of a parsed statement.

    Only QUERY, VIEW and CTAS can contribute tables. CREATE_TABLE is
    interpreted but has nothing to walk; OTHER is skipped entirely.
    """
    if isinstance(statement, exp.Query):
        return StatementKind.QUERY
    if isinstance(statement, exp.Create):
        kind = (statement.kind or "").upper()
        has_query = isinstance(statement.expression, exp.Query)
        if kind == "VIEW" and has_query:
            return StatementKind.VIEW
        if kind == "TABLE":
            return StatementKind.CTAS if has_query else StatementKind.CREATE_TABLE
    return StatementKind.OTHER


def statement_label(statement: exp.Expression) -> str:
    """Short upper-case label for a statement, e.g. INSERT or CREATE INDEX."""
    if isinstance(statement, exp.Create):
        return f"CREATE {(statement.kind or '').upper()}".strip()
    if isinstance(statement, exp.Command):
        return str(statement.this).upper()
    return statement.key.upper()
