# evaluation/__init__.py
# This file is part of Tabula - A Boolean Truth Table Evaluator

"""Truth table evaluation engine.

This package provides:
  • evaluate: lazy row enumeration for parsed expressions and presets
  • evaluate_expression: value of one expression under one assignment
  • build_truth_table: parse-and-evaluate pipeline for expression text
  • Row: one table line (assignment plus sub-expression results)
  • UnknownPresetVariable / EvaluationError: evaluation failures
"""

from typing import List, Mapping, Optional, Tuple

from parser import parse
from parser.ast_nodes import Expr
from .evaluator import ExpressionEvaluator, evaluate_expression
from .exceptions import EvaluationError, UnknownPresetVariable
from .truth_table import Row, evaluate, free_variables


def build_truth_table(
    source: str, presets: Optional[Mapping[str, bool]] = None
) -> Tuple[Tuple[Expr, ...], Tuple[str, ...], List[Row]]:
    """Parse expression text and evaluate its complete truth table.

    Args:
        source: Expression text, optionally holding `=`-separated
            sub-expressions
        presets: Fixed values for some of the variables

    Returns:
        Tuple of (expressions, variables, rows)

    Raises:
        ParseError: Expression text is malformed
        UnknownPresetVariable: A preset names a variable not in the input
    """
    expressions, variables = parse(source)
    rows = list(evaluate(expressions, variables, presets))
    return expressions, variables, rows


__all__ = [
    "build_truth_table",
    "evaluate",
    "evaluate_expression",
    "free_variables",
    "ExpressionEvaluator",
    "Row",
    "EvaluationError",
    "UnknownPresetVariable",
]
