# tests/parser_tests/test_parser_basic.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Test suite for basic parser functionality and round-trip integrity

"""Test suite for basic parser functionality.

Checks the shape of parse results, variable collection across sub-expressions
and that AST string representations re-parse into equal trees.
"""

import pytest
from parser import parse, collect_variables
from parser.ast_nodes import And, Or, Not, Variable, Constant
from utils.logger import get_logger


class TestExprParserBasic:
    """Test cases for parse results and round-trip integrity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    VALID_EXPRESSIONS = [
        # Basic variables and operators
        "p",
        "!q",
        "not q",
        "p & q",
        "p | r",
        "p ^ r",
        "p => r",
        # Precedence and associativity
        "p & q | r",
        "p | q & r",
        "a & b & c",
        "a & (b & c)",
        "a | (b | c)",
        "a => (b => c)",
        "!!!p",
        # Parentheses and grouping
        "p & (q | r)",
        "!(p & q)",
        "((p))",
        "(p & q) | (r & s)",
        "!((p | q) & (r ^ s))",
        "a & (b | (c & (d | (e & f))))",
        # Constants
        "0",
        "1",
        "true",
        "!false",
        "(p | 1) & !0",
        # Identifiers
        "variable_123",
        "_underscore_var",
        # Sub-expressions
        "a&b=a|b|c",
        "a = b = !(a ^ b)",
        # Whitespace handling
        "  (p | q)  ",
        "\t p \n",
    ]

    @pytest.mark.parametrize("expression", VALID_EXPRESSIONS)
    def test_round_trip_parsing_integrity(self, expression):
        """Test that parsing -> stringifying -> parsing preserves AST structure.

        Args:
            expression: Valid expression string
        """
        original, _ = parse(expression)
        stringified = " = ".join(str(expr) for expr in original)
        reparsed, _ = parse(stringified)

        self.logger.debug(f"Original: {expression} Stringified: {stringified}")

        assert original == reparsed, (
            f"Round-trip parsing failed:\n"
            f"Original: {expression}\n"
            f"Stringified: {stringified}"
        )

    RENDERING_CASES = [
        ("a&b", "a & b"),
        ("(a&b)&c", "a & b & c"),
        ("a&(b&c)", "a & (b & c)"),
        ("(a|b)&!c", "(a | b) & !c"),
        ("!(a|b)", "!(a | b)"),
        ("((a))", "a"),
        ("true ^ false", "1 ^ 0"),
        ("a => b | c", "a => b | c"),
        ("(a => b) | c", "(a => b) | c"),
    ]

    @pytest.mark.parametrize("expression, rendered", RENDERING_CASES)
    def test_minimal_parentheses_rendering(self, expression, rendered):
        """Test AST rendering keeps only the parentheses precedence requires."""
        (ast,), _ = parse(expression)
        assert str(ast) == rendered

    def test_single_expression_result_shape(self, basic_expression):
        """Test a single expression yields a one-element tuple."""
        expressions, variables = parse(basic_expression)

        assert expressions == (And(Variable("a"), Variable("b")),)
        assert variables == ("a", "b")

    def test_multi_expression_shares_variable_set(self, multi_expression):
        """Test `=` splits the input and variables are unified across segments."""
        expressions, variables = parse(multi_expression)

        assert expressions == (
            And(Variable("a"), Variable("b")),
            Or(Or(Variable("a"), Variable("b")), Variable("c")),
        )
        assert variables == ("a", "b", "c")

    VARIABLE_ORDER_CASES = [
        ("b & a", ("b", "a")),
        ("c | a & b", ("c", "a", "b")),
        ("x = y & x = z", ("x", "y", "z")),
        ("!(q ^ p) => p", ("q", "p")),
        ("abc | !def", ("abc", "def")),
        ("1 & 0", ()),
    ]

    @pytest.mark.parametrize("expression, expected_variables", VARIABLE_ORDER_CASES)
    def test_variables_in_first_occurrence_order(self, expression, expected_variables):
        """Test variables are reported once, in order of first appearance."""
        _, variables = parse(expression)
        assert variables == expected_variables

    def test_constants_parse_to_constant_nodes(self):
        """Test both literal spellings produce Constant nodes."""
        expressions, variables = parse("1 = true = 0 = false")

        assert expressions == (
            Constant(True),
            Constant(True),
            Constant(False),
            Constant(False),
        )
        assert variables == ()

    def test_collect_variables_on_hand_built_trees(self):
        """Test variable collection works without going through the parser."""
        trees = [Not(Variable("z")), And(Variable("y"), Variable("z"))]
        assert collect_variables(trees) == ("z", "y")

    def test_parse_is_deterministic(self, multi_expression):
        """Test repeated parses of the same text give equal results."""
        assert parse(multi_expression) == parse(multi_expression)

    def test_empty_variable_name_rejected(self):
        """Test a Variable node cannot be built with an empty name."""
        with pytest.raises(ValueError):
            Variable("")


class TestDeepExpressions:
    """Test cases for long operator chains and deep negations."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    @pytest.mark.parametrize(
        "expression",
        [
            " | ".join(["a"] * 1000),
            " & ".join(["a", "b"] * 1500),
            "!" * 1000 + "a",
            "(" * 1000 + "a" + ")" * 1000,
        ],
    )
    def test_deep_expression_parses(self, expression):
        """Test deep trees parse and report their variables."""
        (ast,), variables = parse(expression)

        self.logger.debug(f"Parsed deep expression of {len(expression)} characters")
        assert variables in (("a",), ("a", "b"))
        assert isinstance(ast, (Or, And, Not, Variable))

    def test_deep_chain_renders_back_to_source(self):
        """Test rendering a 2000-term chain yields the normalized source text."""
        expression = " | ".join(["a"] * 2000)
        (ast,), _ = parse(expression)

        assert str(ast) == expression

    def test_deep_negation_renders_back_to_source(self):
        """Test rendering a 1000-fold negation keeps every operator."""
        (ast,), _ = parse("!" * 1000 + "a")

        assert str(ast) == "!" * 1000 + "a"
