"""Value system for the interpreter.

Run-time values are Python numbers (``int``/``float``) and ``bool``.
``bool`` is a subclass of ``int``, so every classification checks it first.
"""

from __future__ import annotations

from typing import Union

RuntimeValue = Union[float, bool]


class InterpreterError(Exception):
    """Runtime error during program execution."""


class UndefinedVariable(InterpreterError, NameError):
    """Lookup exhausted the scope chain without finding the name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Variable '{name}' is not defined in the state.")
        self.name = name


class OperandTypeError(InterpreterError, TypeError):
    """Operands of a binary operator fail its type contract.

    *requirement* is one of ``"numbers"``, ``"booleans"`` or
    ``"comparable"``.
    """

    _MESSAGES = {
        "numbers": "Both operands should be numbers for binary operations",
        "booleans": "Both operands should be true or false for boolean operations",
        "comparable": "Both operands should be numbers or booleans for '===' operation",
    }

    def __init__(self, operator: str, requirement: str) -> None:
        super().__init__(self._MESSAGES[requirement])
        self.operator = operator
        self.requirement = requirement


class DivisionByZero(InterpreterError, ZeroDivisionError):
    def __init__(self) -> None:
        super().__init__("Division by zero is not allowed")


class DuplicateDeclaration(InterpreterError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Variable {name} already exists.")
        self.name = name


class UndeclaredAssignment(InterpreterError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Variable {name} does not exist.")
        self.name = name


class NonBooleanTest(InterpreterError, TypeError):
    """An ``if``/``while`` test evaluated to something other than a boolean."""

    def __init__(self, statement: str) -> None:
        super().__init__(
            f"Test expression in '{statement}' statement must be boolean."
        )
        self.statement = statement


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def is_boolean(value: object) -> bool:
    return isinstance(value, bool)


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_runtime_value(value: object) -> bool:
    return is_boolean(value) or is_number(value)


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

_MAX_PLAIN_INTEGRAL = 1e16


def format_value(value: RuntimeValue) -> str:
    """Render a run-time value the way the language displays it.

    - True/False -> "true"/"false"
    - Integral numbers drop the fractional part: 10.0 -> "10"
    - Integral numbers at or above 1e16 keep the float repr: 1e300 -> "1e+300"
    - Other numbers use the shortest float repr: 2.5 -> "2.5"
    """
    if is_boolean(value):
        return "true" if value else "false"
    if not is_number(value):
        raise InterpreterError(
            f"Cannot format non-runtime value of type {type(value).__name__}"
        )
    if isinstance(value, float) and value.is_integer() and abs(value) < _MAX_PLAIN_INTEGRAL:
        return str(int(value))
    return repr(value)
