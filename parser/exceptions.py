# parser/exceptions.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Custom exceptions for expression parsing

"""Domain-specific exceptions for boolean expression parsing.

Parsing failures are reported with a human-readable message and, where it is
known, the offending position in the input text so that callers can point at
the problem when echoing the expression back to the user.
"""

from typing import Optional


class ParseError(RuntimeError):
    """Exception raised when expression parsing fails due to syntax errors.

    Indicates that the input does not conform to the expression grammar:
    empty input, a missing operand, unbalanced parentheses, an illegal
    character or an empty `=`-separated segment.

    Attributes:
        message: Human-readable reason
        position: 0-based offset of the offending token, or None if unknown
        length: Length of the offending token (0 at end of input)
    """

    def __init__(self, message: str, position: Optional[int] = None, length: int = 0):
        super().__init__(message)
        self.message = message
        self.position = position
        self.length = length
