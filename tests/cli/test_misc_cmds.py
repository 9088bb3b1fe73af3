"""Test the dialects and config commands."""

from click.testing import CliRunner

from sqltables.cli import main


def test_dialects_lists_names() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["dialects"])
    assert result.exit_code == 0
    names = result.output.splitlines()
    assert "generic" in names
    assert "redshift" in names


def test_config_path(isolated_home) -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["config", "path"])
    assert result.exit_code == 0
    assert result.output.strip() == str(isolated_home / "config.toml")


def test_config_show_defaults() -> None:
    runner = CliRunner()
    result = runner.invoke(main, ["config", "show"])
    assert result.exit_code == 0
    assert "not found, using defaults" in result.output
    assert "dialect = generic" in result.output
    assert "log.retention_days = 30" in result.output


def test_config_show_file(isolated_home) -> None:
    (isolated_home / "config.toml").write_text('dialect = "Snowflake"\n')
    runner = CliRunner()
    result = runner.invoke(main, ["config", "show"])
    assert result.exit_code == 0
    assert "dialect = snowflake" in result.output
