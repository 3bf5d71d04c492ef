# utils/table_format.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Text rendering of truth tables and parse error markers

"""Plain-text rendering for truth tables.

Layout produced for `a&b=a|b|c` with `c` preset to true:

    | a | b | c* || a & b | a | b | c |
    +---+---+----++-------+-----------+
    | 0 | 0 |  1 ||     0 |         1 |
    ...

Variable columns come first, fixed variables are marked with `*`, and a double
bar separates them from one column per sub-expression.
"""

from typing import Iterable, List, Sequence

from parser.ast_nodes import Expr
from parser.exceptions import ParseError

FIXED_MARKER = "*"


def _bit(value: bool) -> str:
    return "1" if value else "0"


def _cells(items: Sequence[str]) -> str:
    return "".join(f" {item} |" for item in items)


def format_header(
    variables: Sequence[str], expressions: Sequence[Expr], fixed: Iterable[str] = ()
) -> List[str]:
    """Return the header line and the separator line below it."""
    fixed = set(fixed)
    var_labels = [name + FIXED_MARKER if name in fixed else name for name in variables]
    expr_labels = [str(expr) for expr in expressions]

    header = "|" + _cells(var_labels) + "|" + _cells(expr_labels)
    separator = (
        "+"
        + "".join("-" * (len(label) + 2) + "+" for label in var_labels)
        + "+"
        + "".join("-" * (len(label) + 2) + "+" for label in expr_labels)
    )
    return [header, separator]


def format_row(row, var_widths: Sequence[int], expr_widths: Sequence[int]) -> str:
    """Render one row with every value right-aligned to its column width."""
    var_cells = [_bit(v).rjust(w) for v, w in zip(row.values, var_widths)]
    expr_cells = [_bit(r).rjust(w) for r, w in zip(row.results, expr_widths)]
    return "|" + _cells(var_cells) + "|" + _cells(expr_cells)


def format_table(
    variables: Sequence[str],
    expressions: Sequence[Expr],
    rows: Iterable,
    fixed: Iterable[str] = (),
) -> Iterable[str]:
    """Yield the lines of a complete truth table.

    Args:
        variables: Variable names in column order
        expressions: Parsed sub-expressions, one column each
        rows: Rows as produced by `evaluation.evaluate`
        fixed: Names of preset variables

    Yields:
        Table lines without trailing newlines
    """
    fixed = set(fixed)
    var_widths = [len(name) + (name in fixed) for name in variables]
    expr_widths = [len(str(expr)) for expr in expressions]

    yield from format_header(variables, expressions, fixed)
    for row in rows:
        yield format_row(row, var_widths, expr_widths)


def format_parse_error(source: str, error: ParseError, indent: int = 2) -> List[str]:
    """Echo the input with a marker under the offending position.

    Returns just the message when the error carries no position.
    """
    if error.position is None:
        return [error.message]

    pad = " " * indent
    marker = "^" + "~" * max(error.length - 1, 0)
    return [
        pad + source,
        pad + " " * error.position + marker,
        pad + error.message,
    ]
