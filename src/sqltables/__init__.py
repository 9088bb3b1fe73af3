"""List the tables a SQL statement references."""

from sqltables.extract import extract_tables, run_extraction

__all__ = ["extract_tables", "run_extraction"]
