"""Shared output formatting for CLI commands."""

from __future__ import annotations

import json

from sqltables.diagnostics.render import render_diagnostics, render_json, render_tables
from sqltables.diagnostics.types import ExtractionResult, Level


def format_result(result: ExtractionResult, *, output_format: str = "text") -> str:
    if output_format == "json":
        return json.dumps(render_json(result), indent=2)
    return render_tables(result)


def format_failure(result: ExtractionResult) -> str:
    """Text shown on stderr when an extraction fails."""
    return render_diagnostics(result, min_level=Level.WARNING)
