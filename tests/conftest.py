"""Root conftest: shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep run logs and config out of the real home directory."""
    log_root = tmp_path / "logs"
    config_file = tmp_path / "config.toml"
    monkeypatch.setattr("sqltables.runlog._LOG_ROOT", log_root)
    monkeypatch.setattr("sqltables.config._CONFIG_FILE", config_file)
    monkeypatch.delenv("SQLTABLES_DIALECT", raising=False)
    return tmp_path
