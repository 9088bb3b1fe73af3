"""Render extraction results for terminal (text) and machine (JSON) output."""

from __future__ import annotations

from sqltables.diagnostics.types import Diagnostic, ExtractionResult, Level


def render_json(result: ExtractionResult) -> dict:
    """Render an ExtractionResult as a JSON-serializable dict."""
    return {
        "tables": result.tables,
        "dialect": result.dialect,
        "statements": result.statements,
        "failed": result.failed,
        "diagnostics": [_diagnostic_to_dict(diag) for diag in result.diagnostics],
    }


def render_tables(result: ExtractionResult) -> str:
    """One table name per line, in the result's (sorted) order."""
    return "\n".join(result.tables)


def render_diagnostics(result: ExtractionResult, *, min_level: Level = Level.INFO) -> str:
    """Render diagnostics as human-readable text."""
    lines: list[str] = []
    for d in result.diagnostics:
        if d.level < min_level:
            continue
        where = f" (at {d.location})" if d.location is not None else ""
        lines.append(f"{d.level.name.lower()}[{d.code}]: {d.message}{where}")
        for note in d.notes:
            lines.append(f"  = note: {note}")
    return "\n".join(lines)


def _diagnostic_to_dict(d: Diagnostic) -> dict:
    data: dict = {
        "level": d.level.name.lower(),
        "code": str(d.code),
        "message": d.message,
        "notes": d.notes,
    }
    if d.location is not None:
        data["line"] = d.location.line
        data["col"] = d.location.col
    return data
