"""Tests for diagnostic values and rendering."""

from sqltables.diagnostics import Diagnostic, ExtractionResult, Level, codes
from sqltables.diagnostics.render import render_diagnostics, render_json, render_tables


def test_diagnostic_code_display() -> None:
    assert str(codes.SYNTAX_ERROR) == "Q0001"
    assert str(codes.STATEMENT_SKIPPED) == "Q0101"


def test_builder_api() -> None:
    diag = (
        Diagnostic.error(codes.SYNTAX_ERROR, "SQL syntax error: boom")
        .at(3, 7)
        .note("check the parentheses")
    )
    assert diag.level == Level.ERROR
    assert diag.is_fatal
    assert str(diag.location) == "3:7"
    assert diag.notes == ["check the parentheses"]
    assert not Diagnostic.info(codes.STATEMENT_SKIPPED, "skipped").is_fatal


def test_render_text_filters_by_level() -> None:
    result = ExtractionResult(
        sql="x",
        dialect="generic",
        diagnostics=[
            Diagnostic.info(codes.STATEMENT_SKIPPED, "statement 1 (DROP) not interpreted"),
            Diagnostic.error(codes.SYNTAX_ERROR, "SQL syntax error").at(1, 4).note("n"),
        ],
    )
    text = render_diagnostics(result, min_level=Level.WARNING)
    assert text == "error[Q0001]: SQL syntax error (at 1:4)\n  = note: n"
    assert "Q0101" in render_diagnostics(result)


def test_render_json() -> None:
    result = ExtractionResult(
        sql="SELECT * FROM a",
        dialect="generic",
        tables=["a"],
        statements=["query"],
    )
    assert render_json(result) == {
        "tables": ["a"],
        "dialect": "generic",
        "statements": ["query"],
        "failed": False,
        "diagnostics": [],
    }
    assert render_tables(result) == "a"


def test_failed_follows_fatal_diagnostics() -> None:
    result = ExtractionResult(sql="DROP TABLE t", dialect=None)
    assert not result.failed
    result.diagnostics.append(Diagnostic.info(codes.STATEMENT_SKIPPED, "skipped"))
    assert not result.failed
    result.diagnostics.append(Diagnostic.error(codes.EMPTY_INPUT, "no SQL text given"))
    assert result.failed
    assert result.codes() == ["Q0101", "Q0002"]
