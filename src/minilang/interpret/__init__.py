"""minilang interpreter: run a parsed program against a fresh state.

Entry point::

    from minilang.interpret import run, CollectingSink

    sink = CollectingSink()
    state = run(program, output=sink)
    assert state == {"x": 0}
    assert sink.values == [0]
"""

from __future__ import annotations

import logging
from typing import Any

from minilang.model.program import Program
from minilang.model.statements import Statement

from ._evaluator import apply_binop, evaluate
from ._executor import ExecutionEngine, execute
from ._output import CollectingSink, OutputSink, StreamSink
from ._scope import State
from ._values import (
    DivisionByZero,
    DuplicateDeclaration,
    InterpreterError,
    NonBooleanTest,
    OperandTypeError,
    RuntimeValue,
    UndeclaredAssignment,
    UndefinedVariable,
    format_value,
)

logger = logging.getLogger(__name__)


def run(program: Any, *, output: Any = None) -> State:
    """Execute a program from an empty root state.

    Parameters
    ----------
    program
        A ``Program``, a list of statement nodes, or a list of plain dicts
        in the parser's output shape.
    output
        Sink for ``print`` statements: an ``OutputSink``, a callable taking
        one value, or ``None`` for standard output.

    Returns
    -------
    State
        The root state after the last statement.  Errors propagate; no
        partial state is returned.
    """
    statements = _resolve_statements(program)
    logger.debug("running %d top-level statements", len(statements))

    engine = ExecutionEngine(output=output)
    state = State()
    engine.execute_all(state, statements)

    logger.debug("final state: %r", dict(state))
    return state


def _resolve_statements(program: Any) -> list[Statement]:
    """Resolve a run target to a list of statement nodes."""
    if isinstance(program, Program):
        return program.statements
    if isinstance(program, (list, tuple)):
        return Program.from_nodes(list(program)).statements
    raise TypeError(
        f"run() expects a Program or a list of statements, "
        f"got {type(program).__name__}"
    )


__all__ = [
    "CollectingSink",
    "DivisionByZero",
    "DuplicateDeclaration",
    "ExecutionEngine",
    "InterpreterError",
    "NonBooleanTest",
    "OperandTypeError",
    "OutputSink",
    "RuntimeValue",
    "State",
    "StreamSink",
    "UndeclaredAssignment",
    "UndefinedVariable",
    "apply_binop",
    "evaluate",
    "execute",
    "format_value",
    "run",
]
