"""Internal types for the extraction pipeline."""

from __future__ import annotations

import enum


class StatementKind(enum.Enum):
    QUERY = "query"
    VIEW = "view"                  # CREATE VIEW ... AS query
    CTAS = "ctas"                  # CREATE TABLE ... AS query
    CREATE_TABLE = "create_table"  # CREATE TABLE with a column list only
    OTHER = "other"                # Not interpreted → contributes no tables
