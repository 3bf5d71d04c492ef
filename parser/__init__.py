# parser/__init__.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Expression parsing components for boolean truth tables

"""Boolean expression parsing for truth table evaluation.

This module converts textual expressions into abstract syntax trees and
collects the variables they reference. An input may hold several
sub-expressions separated by `=`; they are parsed independently and share one
variable set.

Core Functions:
    parse: Converts an expression string into ASTs plus its variable set
    collect_variables: Variable set of hand-built ASTs

Supported Syntax:
    - Variables: identifiers such as `a`, `ready`, `x_1`
    - Constants: `0`, `1`, `true`, `false`
    - Operators: `!`/`not`, `&`, `^`, `|`, `=>`
    - Parenthetical grouping
    - `=` separating sub-expressions

Example:
    >>> from parser import parse
    >>> expressions, variables = parse("a&b=a|b|c")
    >>> variables
    ('a', 'b', 'c')
"""

from typing import Tuple

from .exceptions import ParseError
from .grammar import _ExprParser
from .ast_nodes import Expr
from .variables import collect_variables
from utils.logger import get_logger


def parse(source: str) -> Tuple[Tuple[Expr, ...], Tuple[str, ...]]:
    """Parse an expression string into ASTs and the referenced variables.

    Uses a fresh parser instance for each invocation so no state is kept
    between calls.

    Args:
        source: Expression text, optionally holding `=`-separated
            sub-expressions

    Returns:
        Tuple of (expressions, variables): one AST per sub-expression in
        input order, and the distinct variable names in first-occurrence order

    Raises:
        ParseError: Expression is empty or malformed

    Example:
        >>> expressions, variables = parse("!a & b")
        >>> # expressions == (And(Not(Variable("a")), Variable("b")),)
    """
    logger = get_logger()
    logger.debug(f"Parsing input: {source}")

    parser = _ExprParser()

    try:
        expressions = parser.parse(source)
    except ParseError:
        logger.debug("ParseError encountered during expression parsing")
        raise
    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc

    variables = collect_variables(expressions)
    logger.debug(
        f"Parsed {len(expressions)} sub-expression(s) over variables {list(variables)}"
    )
    return expressions, variables


__all__ = ["parse", "collect_variables", "ParseError"]

__version__ = "1.0.0"
__description__ = "Boolean expression parsing components"
