# evaluation/evaluator.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Structural evaluation of expression trees against a variable assignment

"""Evaluates expression trees against a single variable assignment.

Evaluation is a post-order walk over the AST driven by an explicit stack, so
chains of thousands of operators evaluate without hitting the interpreter's
recursion limit. Each node is dispatched through the visitor pattern once its
operands have been computed; operand values are taken from a value stack.
Both operands of a binary connective are always evaluated; there are no side
effects that short-circuiting could skip.
"""

from __future__ import annotations
from typing import List, Mapping
from parser import ast_nodes as ast
from .exceptions import EvaluationError


class ExpressionEvaluator(ast.Visitor):
    """Visitor computing the boolean value of an expression tree.

    Attributes:
        _assignment: Value of every variable the expression may reference
        _values: Results of already evaluated operands
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self._assignment = assignment
        self._values: List[bool] = []

    def evaluate(self, root: ast.Expr) -> bool:
        self._values = []
        stack = [(root, False)]

        while stack:
            node, expanded = stack.pop()
            children = node.children()

            if expanded or not children:
                self._values.append(node.accept(self))
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(children))

        if len(self._values) != 1:
            raise EvaluationError(
                f"evaluation left {len(self._values)} values instead of one"
            )
        return self._values.pop()

    def _operands(self):
        right = self._values.pop()
        left = self._values.pop()
        return left, right

    def visit_variable(self, n: ast.Variable) -> bool:
        try:
            return self._assignment[n.name]
        except KeyError:
            raise EvaluationError(
                f"variable '{n.name}' has no value in the current assignment"
            ) from None

    def visit_constant(self, n: ast.Constant) -> bool:
        return n.value

    def visit_not(self, n: ast.Not) -> bool:
        return not self._values.pop()

    def visit_and(self, n: ast.And) -> bool:
        left, right = self._operands()
        return left and right

    def visit_or(self, n: ast.Or) -> bool:
        left, right = self._operands()
        return left or right

    def visit_xor(self, n: ast.Xor) -> bool:
        left, right = self._operands()
        return left != right

    def visit_implies(self, n: ast.Implies) -> bool:
        left, right = self._operands()
        return (not left) or right


def evaluate_expression(expr: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Evaluate one expression tree against an assignment.

    Args:
        expr: Root of the expression tree
        assignment: Mapping from variable name to value

    Returns:
        Boolean value of the expression

    Raises:
        EvaluationError: The expression references a variable missing from
            the assignment
    """
    return ExpressionEvaluator(assignment).evaluate(expr)
