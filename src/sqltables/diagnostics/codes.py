"""Stable, searchable diagnostic code registry.

Ranges:
- Q00xx  Input and parsing (syntax errors, empty input, dialects)
- Q01xx  Statement coverage (statements the collector does not walk)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiagnosticCode:
    value: int

    def __str__(self) -> str:
        return f"Q{self.value:04d}"


# Input and parsing
SYNTAX_ERROR = DiagnosticCode(1)
EMPTY_INPUT = DiagnosticCode(2)
UNKNOWN_DIALECT = DiagnosticCode(3)

# Statement coverage (Q01xx)
STATEMENT_SKIPPED = DiagnosticCode(101)
