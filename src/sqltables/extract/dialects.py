"""Dialect selector: user-facing dialect names mapped to sqlglot dialects."""

from __future__ import annotations

# None means sqlglot's default (dialect-agnostic) grammar.
_DIALECTS: dict[str, str | None] = {
    "generic": None,
    "postgres": "postgres",
    "postgresql": "postgres",
    "mysql": "mysql",
    "mssql": "tsql",
    "snowflake": "snowflake",
    "bigquery": "bigquery",
    "sqlite": "sqlite",
    "hive": "hive",
    "ansi": None,
    "redshift": "redshift",
}

DEFAULT_DIALECT = "generic"


class UnknownDialectError(ValueError):
    """Raised when a dialect name is not one of the accepted names."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown dialect '{name}'")
        self.name = name


def dialect_names() -> list[str]:
    return list(_DIALECTS)


def resolve_dialect(name: str | None) -> str | None:
    """Map a dialect name (case-insensitive) to the sqlglot `read` argument.

    None selects the generic dialect.
    """
    if name is None:
        return None
    key = name.strip().lower()
    if key not in _DIALECTS:
        raise UnknownDialectError(name)
    return _DIALECTS[key]
