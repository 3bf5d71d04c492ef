# evaluation/exceptions.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Custom exceptions for truth table evaluation


class UnknownPresetVariable(LookupError):
    """Raised when a preset names a variable that no sub-expression uses.

    Attributes:
        name: The preset variable name that was not found
    """

    def __init__(self, name: str):
        super().__init__(f"no variable named '{name}'")
        self.name = name


class EvaluationError(RuntimeError):
    """Raised when evaluation finds an internal inconsistency.

    Signals a mismatch between the parsed expressions and the assignment they
    are evaluated against, such as a variable missing from the assignment.
    """

    pass
