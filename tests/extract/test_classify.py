"""Test statement classification."""

import pytest
import sqlglot

from sqltables.extract._types import StatementKind
from sqltables.extract.classify import classify, statement_label


@pytest.mark.parametrize(
    "sql,expected",
    [
        ("SELECT 1", StatementKind.QUERY),
        ("SELECT * FROM a UNION SELECT * FROM b", StatementKind.QUERY),
        ("WITH c AS (SELECT 1) SELECT * FROM c", StatementKind.QUERY),
        ("CREATE VIEW v AS SELECT * FROM a", StatementKind.VIEW),
        ("CREATE TABLE t AS SELECT * FROM a", StatementKind.CTAS),
        ("CREATE TABLE t (id INT)", StatementKind.CREATE_TABLE),
        ("INSERT INTO t VALUES (1)", StatementKind.OTHER),
        ("UPDATE t SET x = 1", StatementKind.OTHER),
        ("DELETE FROM t", StatementKind.OTHER),
        ("DROP TABLE t", StatementKind.OTHER),
        ("CREATE INDEX idx ON t (x)", StatementKind.OTHER),
    ],
)
def test_classify(sql: str, expected: StatementKind) -> None:
    assert classify(sqlglot.parse_one(sql)) == expected


def test_statement_labels() -> None:
    assert statement_label(sqlglot.parse_one("INSERT INTO t VALUES (1)")) == "INSERT"
    assert statement_label(sqlglot.parse_one("DROP TABLE t")) == "DROP"
    assert statement_label(sqlglot.parse_one("CREATE INDEX idx ON t (x)")) == "CREATE INDEX"
