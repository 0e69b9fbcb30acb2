"""Expression evaluation with run-time type enforcement.

Pure: reads the state chain, never mutates it.
"""

from __future__ import annotations

from collections.abc import Callable

from minilang.model.expressions import (
    ARITHMETIC_OPS,
    LOGICAL_OPS,
    BinaryExpr,
    BinaryOp,
    BooleanLiteral,
    Expression,
    NumberLiteral,
    VariableRef,
)

from ._scope import State
from ._values import (
    DivisionByZero,
    InterpreterError,
    OperandTypeError,
    RuntimeValue,
    is_boolean,
    is_number,
)


def evaluate(state: State, expr: Expression) -> RuntimeValue:
    """Reduce *expr* to a number or boolean against *state*."""
    handler = _EXPR_DISPATCH.get(expr.kind)
    if handler is None:
        raise InterpreterError(f"Unsupported expression kind: {expr.kind}")
    return handler(state, expr)


def _eval_literal(_state: State, expr: BooleanLiteral | NumberLiteral) -> RuntimeValue:
    return expr.value


def _eval_variable(state: State, expr: VariableRef) -> RuntimeValue:
    return state.lookup(expr.name)


def _eval_binary(state: State, expr: BinaryExpr) -> RuntimeValue:
    # No short-circuit: both sides are always evaluated and type-checked
    left = evaluate(state, expr.left)
    right = evaluate(state, expr.right)
    return apply_binop(expr.operator, left, right)


def apply_binop(op: BinaryOp | str, left: RuntimeValue, right: RuntimeValue) -> RuntimeValue:
    """Apply *op* to two already-evaluated operands."""
    op = BinaryOp(op)
    if op in ARITHMETIC_OPS:
        if not (is_number(left) and is_number(right)):
            raise OperandTypeError(op.value, "numbers")
        if op == BinaryOp.ADD:
            return left + right
        if op == BinaryOp.SUB:
            return left - right
        if op == BinaryOp.MUL:
            return left * right
        if op == BinaryOp.DIV:
            if right == 0:
                raise DivisionByZero()
            return left / right
        if op == BinaryOp.GT:
            return left > right
        if op == BinaryOp.LT:
            return left < right

    if op in LOGICAL_OPS:
        if not (is_boolean(left) and is_boolean(right)):
            raise OperandTypeError(op.value, "booleans")
        if op == BinaryOp.AND:
            return left and right
        return left or right

    if op == BinaryOp.EQ:
        same_kind = (
            (is_number(left) and is_number(right))
            or (is_boolean(left) and is_boolean(right))
        )
        if not same_kind:
            raise OperandTypeError(op.value, "comparable")
        return left == right

    raise InterpreterError(f"Unsupported binary op: {op}")


# Expression dispatch table
_EXPR_DISPATCH: dict[str, Callable[[State, Expression], RuntimeValue]] = {
    "boolean": _eval_literal,
    "number": _eval_literal,
    "variable": _eval_variable,
    "operator": _eval_binary,
}
