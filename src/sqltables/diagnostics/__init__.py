"""Diagnostic system: types, codes and rendering."""

from sqltables.diagnostics.codes import DiagnosticCode
from sqltables.diagnostics.types import (
    Diagnostic,
    ExtractionResult,
    Level,
    Location,
)

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ExtractionResult",
    "Level",
    "Location",
]
