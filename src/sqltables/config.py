"""User configuration: ~/.sqltables/config.toml."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

from sqltables.extract.dialects import DEFAULT_DIALECT, UnknownDialectError, resolve_dialect

APP_DIR = Path.home() / ".sqltables"
_CONFIG_FILE = APP_DIR / "config.toml"

DEFAULT_RETENTION_DAYS = 30

_FORMATS = ("text", "json")


class ConfigError(Exception):
    """Raised when the config file cannot be read or holds invalid values."""


@dataclass
class Config:
    dialect: str = DEFAULT_DIALECT
    output_format: str = "text"
    log_enabled: bool = True
    log_retention_days: int = DEFAULT_RETENTION_DAYS


def config_path() -> Path:
    return _CONFIG_FILE


def _load_file() -> dict:
    if not _CONFIG_FILE.exists():
        return {}
    try:
        return tomllib.loads(_CONFIG_FILE.read_text())
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{_CONFIG_FILE}: {e}") from e


def _expect(value: object, kind: type, key: str) -> object:
    # bool is an int subclass; don't let `retention_days = true` through.
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"{_CONFIG_FILE}: '{key}' must be {kind.__name__}")
    return value


def load_config() -> Config:
    """Read the config file. Missing file or keys fall back to defaults."""
    data = _load_file()
    config = Config()

    if "dialect" in data:
        dialect = _expect(data["dialect"], str, "dialect")
        try:
            resolve_dialect(dialect)
        except UnknownDialectError as e:
            raise ConfigError(f"{_CONFIG_FILE}: {e}") from e
        config.dialect = dialect.lower()

    if "format" in data:
        output_format = _expect(data["format"], str, "format")
        if output_format not in _FORMATS:
            raise ConfigError(
                f"{_CONFIG_FILE}: 'format' must be one of {', '.join(_FORMATS)}"
            )
        config.output_format = output_format

    log = data.get("log", {})
    if not isinstance(log, dict):
        raise ConfigError(f"{_CONFIG_FILE}: [log] must be a table")
    if "enabled" in log:
        config.log_enabled = _expect(log["enabled"], bool, "log.enabled")
    if "retention_days" in log:
        days = _expect(log["retention_days"], int, "log.retention_days")
        if days < 1:
            raise ConfigError(f"{_CONFIG_FILE}: 'log.retention_days' must be >= 1")
        config.log_retention_days = days

    return config
