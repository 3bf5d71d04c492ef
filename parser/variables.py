# parser/variables.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Variable collection over parsed expression trees

"""Collects the variable names referenced by one or more expression trees.

Names are reported once each, in the order they first appear when reading the
expressions left to right. That order determines the column order of the
truth table.
"""

from __future__ import annotations
from typing import Dict, Iterable, Tuple
from . import ast_nodes as ast


class VariableCollector(ast.Visitor):
    """Visitor recording variable names in first-occurrence order.

    The tree is walked pre-order with an explicit stack; each node is visited
    once through accept and only leaves record anything.

    Attributes:
        _seen: Insertion-ordered set of names found so far
    """

    def __init__(self):
        self._seen: Dict[str, None] = {}

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._seen)

    def collect(self, root: ast.Expr) -> None:
        stack = [root]
        while stack:
            node = stack.pop()
            node.accept(self)
            stack.extend(reversed(node.children()))

    def visit_variable(self, n: ast.Variable) -> None:
        self._seen.setdefault(n.name, None)

    def _visit_operator(self, n: ast.Expr) -> None:
        pass

    visit_constant = _visit_operator
    visit_not = _visit_operator
    visit_and = _visit_operator
    visit_or = _visit_operator
    visit_xor = _visit_operator
    visit_implies = _visit_operator


def collect_variables(expressions: Iterable[ast.Expr]) -> Tuple[str, ...]:
    """Return the distinct variable names of all expressions.

    Args:
        expressions: Expression trees, in input order

    Returns:
        Variable names in first-occurrence order
    """
    collector = VariableCollector()
    for expr in expressions:
        collector.collect(expr)
    return collector.names
