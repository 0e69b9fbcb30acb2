"""Expression AST nodes."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class BinaryOp(str, Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    GT = ">"
    LT = "<"
    AND = "&&"
    OR = "||"
    EQ = "==="


ARITHMETIC_OPS = frozenset({
    BinaryOp.ADD, BinaryOp.SUB, BinaryOp.MUL, BinaryOp.DIV,
    BinaryOp.GT, BinaryOp.LT,
})

LOGICAL_OPS = frozenset({BinaryOp.AND, BinaryOp.OR})

EQUALITY_OPS = frozenset({BinaryOp.EQ})


class BooleanLiteral(BaseModel):
    """A ``true`` / ``false`` constant."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["boolean"] = "boolean"
    value: bool = Field(strict=True)


class NumberLiteral(BaseModel):
    """A numeric constant (e.g. 10, 3.14)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: float = Field(strict=True)


class VariableRef(BaseModel):
    """Reference to a variable by name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["variable"] = "variable"
    name: str


class BinaryExpr(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["operator"] = "operator"
    operator: BinaryOp
    left: Expression
    right: Expression


Expression = Annotated[
    Union[
        BooleanLiteral,
        NumberLiteral,
        VariableRef,
        BinaryExpr,
    ],
    Field(discriminator="kind"),
]

# Rebuild models with recursive Expression references.
BinaryExpr.model_rebuild()
