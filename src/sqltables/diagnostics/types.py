"""Diagnostic values produced by the extraction pipeline.

The table collector itself never fails; everything that can go wrong around
it (empty input, unknown dialect, unparsable SQL) is reported as a Diagnostic
on the ExtractionResult instead of an exception.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from sqltables.diagnostics.codes import DiagnosticCode


class Level(enum.IntEnum):
    INFO = 0
    WARNING = 1
    ERROR = 2


@dataclass(frozen=True)
class Location:
    """1-based line/column position in the SQL text."""

    line: int
    col: int

    def __str__(self) -> str:
        return f"{self.line}:{self.col}"


@dataclass
class Diagnostic:
    level: Level
    code: DiagnosticCode
    message: str
    location: Location | None = None
    notes: list[str] = field(default_factory=list)

    # -- Builder classmethods ---------------------------------------------------

    @classmethod
    def error(cls, code: DiagnosticCode, message: str) -> Diagnostic:
        return cls(level=Level.ERROR, code=code, message=message)

    @classmethod
    def info(cls, code: DiagnosticCode, message: str) -> Diagnostic:
        return cls(level=Level.INFO, code=code, message=message)

    # -- Builder chain methods --------------------------------------------------

    def at(self, line: int, col: int) -> Diagnostic:
        self.location = Location(line, col)
        return self

    def note(self, note: str) -> Diagnostic:
        self.notes.append(note)
        return self

    # -- Query methods ----------------------------------------------------------

    @property
    def is_fatal(self) -> bool:
        return self.level == Level.ERROR


@dataclass
class ExtractionResult:
    sql: str
    dialect: str | None
    tables: list[str] = field(default_factory=list)
    statements: list[str] = field(default_factory=list)
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return any(d.is_fatal for d in self.diagnostics)

    def codes(self) -> list[str]:
        return [str(d.code) for d in self.diagnostics]
