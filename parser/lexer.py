# parser/lexer.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Lexical analyzer for boolean expression tokenization using SLY

"""Lexical analyzer for boolean expression strings.

This module breaks expression strings into tokens for parser consumption. The
lexer handles operator recognition, keyword distinction and identifier
processing, and reports illegal characters with their position.

Supported Tokens:
- Operators: !, &, ^, |, =>, (, )
- Separator: = (splits the input into sub-expressions)
- Literals: 0, 1, true, false
- Keywords: not
- Identifiers: variable names
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from .exceptions import ParseError
from utils.logger import get_logger


class ExprLexer(Lexer):
    """SLY-based lexer for boolean expression tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "ID",
        "VALUE",
        "TRUE",
        "FALSE",
        "NOT",
        "AND",
        "XOR",
        "OR",
        "IMPLIES",
        "EQUALS",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    # "=>" must be tried before "="
    IMPLIES = r"=>"
    EQUALS = r"="
    NOT = r"!"
    AND = r"&"
    XOR = r"\^"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"

    ID["not"] = "NOT"
    ID["true"] = "TRUE"
    ID["false"] = "FALSE"

    @_(r"[01]")
    def VALUE(self, t):
        t.value = t.value == "1"
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ParseError: Always raised with character and position information
        """
        illegal_char = t.value[0]
        error_pos = self.index

        get_logger().debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ParseError(
            f"Illegal character '{illegal_char}' at position {error_pos}",
            position=error_pos,
            length=1,
        )
