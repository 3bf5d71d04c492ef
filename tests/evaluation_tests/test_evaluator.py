# tests/evaluation_tests/test_evaluator.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Test suite for single-assignment expression evaluation

"""Test suite for evaluating expression trees against one assignment."""

import pytest
from parser.ast_nodes import And, Or, Xor, Implies, Not, Variable, Constant
from evaluation import evaluate_expression, EvaluationError
from utils.logger import get_logger

a, b = Variable("a"), Variable("b")


class TestExpressionEvaluator:
    """Test cases for operator semantics and invariant checks."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    # (node, a, b, expected)
    OPERATOR_CASES = [
        (And(a, b), False, False, False),
        (And(a, b), True, False, False),
        (And(a, b), False, True, False),
        (And(a, b), True, True, True),
        (Or(a, b), False, False, False),
        (Or(a, b), True, False, True),
        (Or(a, b), False, True, True),
        (Or(a, b), True, True, True),
        (Xor(a, b), False, False, False),
        (Xor(a, b), True, False, True),
        (Xor(a, b), False, True, True),
        (Xor(a, b), True, True, False),
        (Implies(a, b), False, False, True),
        (Implies(a, b), True, False, False),
        (Implies(a, b), False, True, True),
        (Implies(a, b), True, True, True),
    ]

    @pytest.mark.parametrize("node, a_value, b_value, expected", OPERATOR_CASES)
    def test_binary_operator_semantics(self, node, a_value, b_value, expected):
        """Test each binary connective against its full truth table."""
        result = evaluate_expression(node, {"a": a_value, "b": b_value})

        assert result is expected, (
            f"{node} with a={int(a_value)}, b={int(b_value)}: "
            f"expected {int(expected)}, got {int(result)}"
        )

    def test_negation(self):
        """Test Not inverts its operand."""
        assert evaluate_expression(Not(a), {"a": True}) is False
        assert evaluate_expression(Not(a), {"a": False}) is True
        assert evaluate_expression(Not(Not(a)), {"a": True}) is True

    def test_constants_ignore_assignment(self):
        """Test constants evaluate to their literal value."""
        assert evaluate_expression(Constant(True), {}) is True
        assert evaluate_expression(Constant(False), {}) is False
        assert evaluate_expression(Or(Constant(False), a), {"a": True}) is True

    def test_nested_expression(self):
        """Test a nested tree combines sub-results structurally."""
        node = Or(And(Not(a), b), Xor(a, Constant(True)))

        assert evaluate_expression(node, {"a": False, "b": False}) is True
        assert evaluate_expression(node, {"a": True, "b": True}) is False

    def test_missing_variable_raises_evaluation_error(self):
        """Test a variable absent from the assignment is reported, not defaulted."""
        with pytest.raises(EvaluationError) as exc_info:
            evaluate_expression(And(a, b), {"a": True})

        self.logger.debug(f"Evaluation error: {exc_info.value}")
        assert "'b'" in str(exc_info.value)

    def test_missing_variable_not_masked_by_left_operand(self):
        """Test both operands are evaluated even when the left decides the result."""
        with pytest.raises(EvaluationError):
            evaluate_expression(Or(Constant(True), b), {})
