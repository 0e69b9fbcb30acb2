"""Top-level program container."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, TypeAdapter

from .statements import Statement


class Program(BaseModel):
    """An ordered list of top-level statements.

    The external parser hands over a bare list of statement nodes; use
    :meth:`from_nodes` / :meth:`from_json` to validate that shape.
    """

    model_config = ConfigDict(frozen=True)

    statements: list[Statement] = []

    @classmethod
    def from_nodes(cls, nodes: list[Any]) -> Program:
        """Validate a list of statement nodes (models or plain dicts)."""
        return cls(statements=_STATEMENT_LIST.validate_python(nodes))

    @classmethod
    def from_json(cls, text: str | bytes) -> Program:
        """Validate a JSON array of statement objects."""
        return cls(statements=_STATEMENT_LIST.validate_json(text))


_STATEMENT_LIST: TypeAdapter[list[Statement]] = TypeAdapter(list[Statement])
