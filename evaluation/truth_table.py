# evaluation/truth_table.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Enumeration of variable assignments and truth table rows

"""Truth table enumeration over the free variables of parsed expressions.

Every assignment of the free variables is generated from an integer counter:
bit i of the counter is the value of the i-th free variable, so the first
variable toggles on every row and the last one changes only once. Preset
variables keep their fixed value in every row.

The number of rows is 2 ** n for n free variables. Nothing here caps n;
callers printing tables should bound it themselves.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterator, Mapping, Optional, Sequence, Tuple

from parser.ast_nodes import Expr
from utils.logger import get_logger
from .evaluator import ExpressionEvaluator
from .exceptions import UnknownPresetVariable


@dataclass(frozen=True, slots=True)
class Row:
    """One line of a truth table.

    Attributes:
        variables: Variable names, in column order
        values: Value of each variable, aligned with `variables`
        results: Value of each sub-expression, in input order
        fixed: Names of the variables fixed by a preset
    """

    variables: Tuple[str, ...]
    values: Tuple[bool, ...]
    results: Tuple[bool, ...]
    fixed: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def assignment(self) -> Dict[str, bool]:
        return dict(zip(self.variables, self.values))

    @property
    def output(self) -> bool:
        """Result of the last sub-expression, the designated output column."""
        return self.results[-1]

    @property
    def agrees(self) -> bool:
        """True when every sub-expression evaluates to the same value."""
        return len(set(self.results)) <= 1

    def is_fixed(self, name: str) -> bool:
        return name in self.fixed


def free_variables(variables: Sequence[str], presets: Mapping[str, bool]) -> Tuple[str, ...]:
    """Variables not fixed by a preset, order preserved."""
    return tuple(name for name in variables if name not in presets)


def evaluate(
    expressions: Sequence[Expr],
    variables: Sequence[str],
    presets: Optional[Mapping[str, bool]] = None,
) -> Iterator[Row]:
    """Enumerate the truth table rows of the given expressions.

    The preset check runs immediately; rows are then produced lazily.

    Args:
        expressions: Parsed sub-expressions, in input order
        variables: Distinct variable names in column order
        presets: Fixed values for some of the variables

    Returns:
        Iterator over 2 ** len(free variables) rows

    Raises:
        UnknownPresetVariable: A preset names a variable not in `variables`
    """
    logger = get_logger()
    presets = dict(presets or {})
    variables = tuple(variables)

    for name in presets:
        if name not in variables:
            logger.debug(f"Rejecting preset for unknown variable '{name}'")
            raise UnknownPresetVariable(name)

    free = free_variables(variables, presets)
    logger.debug(
        f"Enumerating {2 ** len(free)} row(s) over free variables {list(free)}, "
        f"presets {presets}"
    )
    return _iter_rows(tuple(expressions), variables, free, presets)


def _iter_rows(
    expressions: Tuple[Expr, ...],
    variables: Tuple[str, ...],
    free: Tuple[str, ...],
    presets: Dict[str, bool],
) -> Iterator[Row]:
    fixed = frozenset(presets)

    for counter in range(1 << len(free)):
        assignment = dict(presets)
        for bit, name in enumerate(free):
            assignment[name] = bool(counter & (1 << bit))

        evaluator = ExpressionEvaluator(assignment)
        yield Row(
            variables=variables,
            values=tuple(assignment[name] for name in variables),
            results=tuple(evaluator.evaluate(expr) for expr in expressions),
            fixed=fixed,
        )
