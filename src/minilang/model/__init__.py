"""AST models consumed by the evaluator."""

from .expressions import (
    ARITHMETIC_OPS,
    EQUALITY_OPS,
    LOGICAL_OPS,
    BinaryExpr,
    BinaryOp,
    BooleanLiteral,
    Expression,
    NumberLiteral,
    VariableRef,
)
from .program import Program
from .statements import (
    Assignment,
    IfStatement,
    LetStatement,
    PrintStatement,
    Statement,
    WhileStatement,
)

__all__ = [
    "ARITHMETIC_OPS",
    "EQUALITY_OPS",
    "LOGICAL_OPS",
    "Assignment",
    "BinaryExpr",
    "BinaryOp",
    "BooleanLiteral",
    "Expression",
    "IfStatement",
    "LetStatement",
    "NumberLiteral",
    "PrintStatement",
    "Program",
    "Statement",
    "VariableRef",
    "WhileStatement",
]
