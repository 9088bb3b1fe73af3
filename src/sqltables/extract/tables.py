"""Table reference collection over a parsed sqlglot tree.

Walks queries, FROM/JOIN clauses and the subqueries embedded in expressions,
accumulating every referenced table into a caller-owned set. CTE names are not
suppressed: a CTE referenced in a FROM clause is reported like any other name.

Known limits, kept on purpose:
- only one level of parenthesized join grouping is unwrapped: in
  ``((a JOIN b) JOIN c)`` only ``c`` is reported, ``a`` and ``b`` sit two
  levels deep;
- function-call arguments are not searched for subqueries;
- GROUP BY expressions are not scanned.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from sqlglot import exp


def qualified_name(table: exp.Table) -> str:
    """Render a table path (catalog.db.name) exactly as written, minus quotes."""
    return ".".join(part.name for part in table.parts)


def extract_tables(statements: Iterable[exp.Expression | None]) -> list[str]:
    """Collect the tables referenced by a sequence of parsed statements.

    Interprets queries, CREATE VIEW and CREATE TABLE [AS query]; every other
    statement type is skipped. Returns a sorted list of unique names.
    """
    tables: set[str] = set()
    for statement in statements:
        collect_from_statement(statement, tables)
    return sorted(tables)


def collect_from_statement(statement: exp.Expression | None, out: set[str]) -> None:
    if isinstance(statement, exp.Query):
        collect_from_query(statement, out)
    elif isinstance(statement, exp.Create):
        kind = (statement.kind or "").upper()
        query = statement.expression
        if kind in ("VIEW", "TABLE") and isinstance(query, exp.Query):
            collect_from_query(query, out)
    # INSERT, UPDATE, DELETE, other DDL: not interpreted, contributes nothing.


def collect_from_query(query: exp.Expression, out: set[str]) -> None:
    """Add every table reachable from a query: its CTEs, then its body."""
    pending: deque[exp.Expression] = deque([query])
    while pending:
        node = pending.popleft()

        if isinstance(node, exp.Query):
            for cte in node.ctes:
                collect_from_query(cte.this, out)

        if isinstance(node, exp.Select):
            collect_from_select(node, out)
        elif isinstance(node, exp.SetOperation):
            pending.append(node.left)
            pending.append(node.right)
        elif isinstance(node, exp.Subquery):
            pending.append(node.this)
        elif isinstance(node, exp.Values):
            pass  # literal rows
        # Anything else contributes nothing.


def collect_from_select(select: exp.Select, out: set[str]) -> None:
    """Resolve the FROM/JOIN relations of a SELECT, then scan its expressions."""
    from_clause = select.args.get("from_")
    if from_clause is not None:
        _collect_from_factor(from_clause.this, out)
    for join in select.args.get("joins") or []:
        _collect_from_factor(join.this, out)

    for projection in select.expressions:
        collect_from_expr(projection.unalias(), out)

    for clause in ("where", "having"):
        node = select.args.get(clause)
        if node is not None:
            collect_from_expr(node.this, out)


def _collect_from_factor(factor: exp.Expression | None, out: set[str]) -> None:
    if _is_join_group(factor):
        # ( primary JOIN ... ) -- unwrapped one level only.
        inner = factor.this
        _collect_from_simple_factor(inner, out)
        for join in inner.args.get("joins") or []:
            _collect_from_simple_factor(join.this, out)
    else:
        _collect_from_simple_factor(factor, out)


def _collect_from_simple_factor(factor: exp.Expression | None, out: set[str]) -> None:
    if isinstance(factor, exp.Table):
        # A table-valued function parses as a Table wrapping the call.
        if factor.name and not isinstance(factor.this, exp.Func):
            out.add(qualified_name(factor))
    elif isinstance(factor, exp.Subquery) and isinstance(factor.this, exp.Query):
        # Derived table: its alias is never a referenced table.
        collect_from_query(factor.this, out)
    # Table functions, nested join groups at this depth, etc.: nothing.


def _is_join_group(factor: exp.Expression | None) -> bool:
    if not isinstance(factor, exp.Subquery):
        return False
    inner = factor.this
    if not isinstance(inner, exp.Query):
        return True
    # ((...) JOIN b): the primary is itself parenthesized and carries the joins.
    return isinstance(inner, exp.Subquery) and bool(inner.args.get("joins"))


def collect_from_expr(expr: exp.Expression | None, out: set[str]) -> None:
    """Search an expression for embedded queries and collect their tables."""
    if expr is None:
        return

    if isinstance(expr, exp.Subquery):
        collect_from_query(expr, out)
    elif isinstance(expr, exp.Exists):
        collect_from_query(expr.this, out)
    elif isinstance(expr, exp.In):
        query = expr.args.get("query")
        if query is not None:
            collect_from_query(query, out)
    elif isinstance(expr, exp.Binary):
        collect_from_expr(expr.left, out)
        collect_from_expr(expr.right, out)
    elif isinstance(expr, (exp.Unary, exp.Paren, exp.Cast)):
        collect_from_expr(expr.this, out)
    elif isinstance(expr, exp.Extract):
        collect_from_expr(expr.expression, out)
    elif isinstance(expr, exp.Case):
        collect_from_expr(expr.args.get("this"), out)
        for branch in expr.args.get("ifs") or []:
            collect_from_expr(branch.this, out)
            collect_from_expr(branch.args.get("true"), out)
        collect_from_expr(expr.args.get("default"), out)
    elif isinstance(expr, exp.Between):
        collect_from_expr(expr.this, out)
        collect_from_expr(expr.args.get("low"), out)
        collect_from_expr(expr.args.get("high"), out)
    elif isinstance(expr, exp.Tuple):
        for element in expr.expressions:
            collect_from_expr(element, out)
    elif isinstance(expr, exp.Func):
        pass  # arguments are not searched
    # Literals, columns, stars and other leaves contribute nothing.
