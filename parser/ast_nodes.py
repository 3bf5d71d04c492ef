# parser/ast_nodes.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Abstract Syntax Tree node classes for boolean expression representation

"""AST node classes for representing parsed boolean expressions.

This module defines immutable and hashable node classes used to construct tree
representations of boolean expressions. Every node renders back to source text
with the minimal parentheses required to re-parse into an equal tree.

Node Types:
    Variable: Named boolean input
    Constant: Literal true/false value
    Not: Negation
    And, Or, Xor, Implies: Binary connectives

All nodes support the visitor design pattern for traversal and evaluation.
Long operator chains produce trees thousands of levels deep, so traversals
over whole trees (rendering here, variable collection, evaluation) walk them
with an explicit stack and use `accept` for one node at a time.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import ClassVar, List, Protocol, Sequence, Tuple


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type.
    """

    def visit_variable(self, n: Variable): ...

    def visit_constant(self, n: Constant): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_xor(self, n: Xor): ...

    def visit_implies(self, n: Implies): ...


# Binding strength used for rendering; mirrors the grammar precedence table
PREC_IMPLIES = 0
PREC_OR = 1
PREC_XOR = 2
PREC_AND = 3
PREC_NOT = 4
PREC_ATOM = 5


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in boolean expressions.

    Concrete node types implement accept for visitor dispatch, children for
    traversal and _format for rendering back to expression syntax.
    """

    precedence: ClassVar[int] = PREC_ATOM

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def children(self) -> Tuple[Expr, ...]:
        """Direct operands, left to right."""
        return ()

    def _format(self, parts: Sequence[str]) -> str:
        """Render this node given the rendered text of its children."""
        raise NotImplementedError

    def __str__(self) -> str:
        return render(self)


def _wrap(node: Expr, text: str, min_precedence: int) -> str:
    """Parenthesize text when node binds weaker than min_precedence."""
    if node.precedence < min_precedence:
        return f"({text})"
    return text


def render(root: Expr) -> str:
    """Render a tree back to expression syntax without recursion.

    Args:
        root: Root of the expression tree

    Returns:
        Expression text that re-parses into an equal tree
    """
    rendered: List[str] = []
    stack = [(root, False)]

    while stack:
        node, expanded = stack.pop()
        children = node.children()

        if expanded or not children:
            parts = rendered[len(rendered) - len(children):]
            del rendered[len(rendered) - len(children):]
            rendered.append(node._format(parts))
        else:
            stack.append((node, True))
            stack.extend((child, False) for child in reversed(children))

    return rendered[0]


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Named boolean input, e.g. `a` or `ready`.

    Attributes:
        name: The identifier string of the variable
    """

    name: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Variable name must not be empty")

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def _format(self, parts: Sequence[str]) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Literal boolean value, written `0`/`1` or `false`/`true`.

    Attributes:
        value: The boolean value of the literal
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    def _format(self, parts: Sequence[str]) -> str:
        return "1" if self.value else "0"


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation that inverts the truth value of its operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    precedence: ClassVar[int] = PREC_NOT

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def children(self) -> Tuple[Expr, ...]:
        return (self.operand,)

    def _format(self, parts: Sequence[str]) -> str:
        return f"!{_wrap(self.operand, parts[0], PREC_NOT)}"


@dataclass(frozen=True, slots=True)
class BinaryExpr(Expr):
    """Common base for left-associative binary connectives.

    The left operand keeps its parentheses only when it binds weaker than this
    node; the right operand also keeps them at equal strength, which preserves
    the grouping of `a & (b & c)` when rendered.

    Attributes:
        left: Left operand
        right: Right operand
    """

    left: Expr
    right: Expr

    symbol: ClassVar[str] = "?"

    def children(self) -> Tuple[Expr, ...]:
        return (self.left, self.right)

    def _format(self, parts: Sequence[str]) -> str:
        left = _wrap(self.left, parts[0], self.precedence)
        right = _wrap(self.right, parts[1], self.precedence + 1)
        return f"{left} {self.symbol} {right}"


@dataclass(frozen=True, slots=True)
class And(BinaryExpr):
    """Logical conjunction, true when both operands are true."""

    precedence: ClassVar[int] = PREC_AND
    symbol: ClassVar[str] = "&"

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(BinaryExpr):
    """Logical disjunction, true when at least one operand is true."""

    precedence: ClassVar[int] = PREC_OR
    symbol: ClassVar[str] = "|"

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Xor(BinaryExpr):
    """Exclusive or, true when exactly one operand is true."""

    precedence: ClassVar[int] = PREC_XOR
    symbol: ClassVar[str] = "^"

    def accept(self, v: Visitor):
        return v.visit_xor(self)


@dataclass(frozen=True, slots=True)
class Implies(BinaryExpr):
    """Material implication, false only when left is true and right is false."""

    precedence: ClassVar[int] = PREC_IMPLIES
    symbol: ClassVar[str] = "=>"

    def accept(self, v: Visitor):
        return v.visit_implies(self)
