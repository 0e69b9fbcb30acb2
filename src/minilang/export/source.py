"""Source pretty-printer for the AST.

Walks Pydantic AST models and emits the language's concrete syntax.
"""

from __future__ import annotations

from io import StringIO
from typing import Any

from pydantic import BaseModel

from minilang.interpret._values import format_value
from minilang.model.expressions import (
    BinaryExpr,
    BinaryOp,
    BooleanLiteral,
    Expression,
    NumberLiteral,
    VariableRef,
)
from minilang.model.program import Program
from minilang.model.statements import (
    Assignment,
    IfStatement,
    LetStatement,
    PrintStatement,
    Statement,
    WhileStatement,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def to_source(target: Any) -> str:
    """Emit source text for a Program, statement list, statement or expression.

    Statements end with a newline; a lone expression does not.
    """
    w = SourceWriter()
    if isinstance(target, Program):
        w.write_statements(target.statements)
    elif isinstance(target, list):
        w.write_statements(target)
    elif isinstance(target, BaseModel) and getattr(target, "kind", None) in _STMT_WRITERS:
        w.write_statement(target)
    elif isinstance(target, BaseModel) and getattr(target, "kind", None) in _EXPR_WRITERS:
        return w.expr(target)
    else:
        raise TypeError(
            f"to_source() expects a Program, statement or expression, "
            f"got {type(target).__name__}"
        )
    return w.getvalue()


# ---------------------------------------------------------------------------
# Operator precedence (higher = binds tighter)
# ---------------------------------------------------------------------------

_BINOP_PRECEDENCE: dict[BinaryOp, int] = {
    BinaryOp.OR: 1,
    BinaryOp.AND: 2,
    BinaryOp.EQ: 3,
    BinaryOp.GT: 4,
    BinaryOp.LT: 4,
    BinaryOp.ADD: 5,
    BinaryOp.SUB: 5,
    BinaryOp.MUL: 6,
    BinaryOp.DIV: 6,
}


# ---------------------------------------------------------------------------
# SourceWriter
# ---------------------------------------------------------------------------

class SourceWriter:
    """Walks AST models and emits source text into an internal buffer."""

    def __init__(self) -> None:
        self._buf = StringIO()
        self._indent = 0
        self._indent_str = "    "

    def getvalue(self) -> str:
        return self._buf.getvalue()

    def _line(self, text: str) -> None:
        self._buf.write(self._indent_str * self._indent + text + "\n")

    # ======================================================================
    # Statements
    # ======================================================================

    def write_statements(self, stmts: list[Statement]) -> None:
        for stmt in stmts:
            self.write_statement(stmt)

    def write_statement(self, stmt: Statement) -> None:
        handler = _STMT_WRITERS.get(stmt.kind)
        if handler is None:
            raise TypeError(f"Unsupported statement kind: {stmt.kind}")
        handler(self, stmt)

    def _block(self, stmts: list[Statement]) -> None:
        self._indent += 1
        self.write_statements(stmts)
        self._indent -= 1

    def _write_let(self, stmt: LetStatement) -> None:
        self._line(f"let {stmt.name} = {self.expr(stmt.expression)};")

    def _write_assignment(self, stmt: Assignment) -> None:
        self._line(f"{stmt.name} = {self.expr(stmt.expression)};")

    def _write_if(self, stmt: IfStatement) -> None:
        self._line(f"if ({self.expr(stmt.test)}) {{")
        self._block(stmt.true_part)
        if stmt.false_part:
            self._line("} else {")
            self._block(stmt.false_part)
        self._line("}")

    def _write_while(self, stmt: WhileStatement) -> None:
        self._line(f"while ({self.expr(stmt.test)}) {{")
        self._block(stmt.body)
        self._line("}")

    def _write_print(self, stmt: PrintStatement) -> None:
        self._line(f"print({self.expr(stmt.expression)});")

    # ======================================================================
    # Expressions
    # ======================================================================

    def expr(self, expr: Expression, parent_prec: int = 0) -> str:
        handler = _EXPR_WRITERS.get(expr.kind)
        if handler is None:
            raise TypeError(f"Unsupported expression kind: {expr.kind}")
        return handler(self, expr, parent_prec)

    def _expr_boolean(self, expr: BooleanLiteral, _prec: int) -> str:
        return "true" if expr.value else "false"

    def _expr_number(self, expr: NumberLiteral, _prec: int) -> str:
        return format_value(expr.value)

    def _expr_variable(self, expr: VariableRef, _prec: int) -> str:
        return expr.name

    def _expr_binary(self, expr: BinaryExpr, parent_prec: int) -> str:
        my_prec = _BINOP_PRECEDENCE[expr.operator]
        left = self.expr(expr.left, my_prec)
        right = self.expr(expr.right, my_prec + 1)
        result = f"{left} {expr.operator.value} {right}"
        if my_prec < parent_prec:
            return f"({result})"
        return result


_STMT_WRITERS = {
    "let": SourceWriter._write_let,
    "assignment": SourceWriter._write_assignment,
    "if": SourceWriter._write_if,
    "while": SourceWriter._write_while,
    "print": SourceWriter._write_print,
}

_EXPR_WRITERS = {
    "boolean": SourceWriter._expr_boolean,
    "number": SourceWriter._expr_number,
    "variable": SourceWriter._expr_variable,
    "operator": SourceWriter._expr_binary,
}
