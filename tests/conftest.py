"""Shared test helpers for the minilang test suite."""

from minilang.model.expressions import (
    BinaryExpr,
    BinaryOp,
    BooleanLiteral,
    NumberLiteral,
    VariableRef,
)
from minilang.model.statements import (
    Assignment,
    IfStatement,
    LetStatement,
    PrintStatement,
    WhileStatement,
)


def lit(value):
    """Boolean or number literal from a Python value."""
    if isinstance(value, bool):
        return BooleanLiteral(value=value)
    return NumberLiteral(value=value)


def var(name):
    return VariableRef(name=name)


def binop(op, left, right):
    """Binary expression; *op* is a symbol ("+") or BinaryOp.

    Plain Python values for *left*/*right* become literals, strings
    become variable references.
    """
    return BinaryExpr(operator=BinaryOp(op), left=_expr(left), right=_expr(right))


def let(name, value):
    return LetStatement(name=name, expression=_expr(value))


def assign(name, value):
    return Assignment(name=name, expression=_expr(value))


def if_(test, true_part, false_part=()):
    return IfStatement(
        test=_expr(test), true_part=list(true_part), false_part=list(false_part),
    )


def while_(test, body):
    return WhileStatement(test=_expr(test), body=list(body))


def print_(value):
    return PrintStatement(expression=_expr(value))


def _expr(value):
    if isinstance(value, str):
        return var(value)
    if isinstance(value, (bool, int, float)):
        return lit(value)
    return value
