"""Statement AST nodes."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .expressions import Expression


class LetStatement(BaseModel):
    """Declare *name* in the current scope: ``let x = 10;``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["let"] = "let"
    name: str
    expression: Expression


class Assignment(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["assignment"] = "assignment"
    name: str
    expression: Expression


class IfStatement(BaseModel):
    """``if (test) { true_part } else { false_part }``.

    The parser emits ``truePart`` / ``falsePart``; both spellings validate.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["if"] = "if"
    test: Expression
    true_part: list[Statement] = Field(
        validation_alias=AliasChoices("true_part", "truePart"),
    )
    false_part: list[Statement] = Field(
        default=[],
        validation_alias=AliasChoices("false_part", "falsePart"),
    )


class WhileStatement(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["while"] = "while"
    test: Expression
    body: list[Statement]


class PrintStatement(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["print"] = "print"
    expression: Expression


Statement = Annotated[
    Union[
        LetStatement,
        Assignment,
        IfStatement,
        WhileStatement,
        PrintStatement,
    ],
    Field(discriminator="kind"),
]

# Rebuild models with recursive Statement references.
IfStatement.model_rebuild()
WhileStatement.model_rebuild()
