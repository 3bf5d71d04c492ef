# parser/grammar.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# LALR(1) grammar and parser for boolean expressions using SLY

"""Boolean expression grammar implementation using SLY parser generator.

This module defines the grammar rules for boolean expressions. The parser
constructs one Abstract Syntax Tree per `=`-separated sub-expression from the
token stream provided by the lexer.

Operator Precedence (lowest to highest):
- '=' : sub-expression separator, not an operator
- '=>': implication, left-associative
- '|' : or, left-associative
- '^' : xor, left-associative
- '&' : and, left-associative
- '!' / 'not': negation, right-associative
"""

from typing import Tuple

from sly import Parser
from .lexer import ExprLexer
from .ast_nodes import Expr, Variable, Constant, Not, And, Or, Xor, Implies
from .exceptions import ParseError
from utils.logger import get_logger


class _ExprParser(Parser):
    """SLY-based LALR(1) parser for boolean expressions.

    Attributes:
        tokens: Token types from ExprLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = ExprLexer.tokens

    precedence = (
        ("left", "IMPLIES"),
        ("left", "OR"),
        ("left", "XOR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    def __init__(self):
        super().__init__()
        self._text = ""

    @_("exprs")
    def start(self, p) -> Tuple[Expr, ...]:
        """Start rule: one or more sub-expressions."""
        return tuple(p.exprs)

    @_("exprs EQUALS expr")
    def exprs(self, p):
        """Further sub-expression after a separator."""
        return p.exprs + [p.expr]

    @_("expr")
    def exprs(self, p):
        """First sub-expression."""
        return [p.expr]

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("expr XOR expr")
    def expr(self, p) -> Expr:
        """Exclusive or operator."""
        return Xor(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("expr IMPLIES expr")
    def expr(self, p) -> Expr:
        """Implication operator."""
        return Implies(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("ID")
    def expr(self, p) -> Expr:
        return Variable(p.ID)

    @_("VALUE")
    def expr(self, p) -> Expr:
        return Constant(p.VALUE)

    @_("TRUE")
    def expr(self, p) -> Expr:
        return Constant(True)

    @_("FALSE")
    def expr(self, p) -> Expr:
        return Constant(False)

    def parse(self, text: str) -> Tuple[Expr, ...]:
        """Parse expression text into one AST per sub-expression.

        Args:
            text: Expression string to parse

        Returns:
            Tuple of root AST nodes, in input order

        Raises:
            ParseError: If the input is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing expression: {text}")

        if text.strip() == "":
            raise ParseError("Input expression is empty.", position=len(text))

        self._text = text

        try:
            ast_result = super().parse(ExprLexer().tokenize(text))

            if ast_result is None:
                raise ParseError("Failed to parse expression (syntax error).")

            logger.debug(f"Successfully parsed {len(ast_result)} sub-expression(s)")
            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Called by SLY when a token does not match any grammar rule.

        Args:
            token: Problematic token or None at end of input

        Raises:
            ParseError: Always raises with the offending position
        """
        if token is None:
            stripped = self._text.rstrip()
            end = len(stripped)
            if stripped.endswith("=") and not stripped.endswith("=>"):
                raise ParseError(
                    "Syntax error: empty sub-expression after '='", position=end - 1, length=1
                )
            if self._text.count("(") > self._text.count(")"):
                raise ParseError("Syntax error: ')' expected", position=end)
            raise ParseError(
                "Syntax error: Unexpected end of expression, operand expected",
                position=end,
            )

        length = len(str(token.value)) if token.type != "VALUE" else 1

        if token.type == "EQUALS":
            message = f"Syntax error: empty sub-expression at position {token.index}"
        elif token.type == "RPAREN":
            message = f"Syntax error: unexpected ')' at position {token.index}"
        else:
            message = (
                f"Syntax error near '{self._text[token.index:token.index + length]}' "
                f"(type: {token.type}) at position {token.index}"
            )

        raise ParseError(message, position=token.index, length=length)
