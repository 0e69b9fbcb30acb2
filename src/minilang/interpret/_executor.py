"""Execution engine: tree-walking statement executor.

Statements mutate a ``State`` in place.  ``if`` and ``while`` bodies run
in a child scope that is merged back into the enclosing state when the
block finishes; only names the enclosing state already binds survive.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from minilang.model.statements import (
    Assignment,
    IfStatement,
    LetStatement,
    PrintStatement,
    Statement,
    WhileStatement,
)

from ._evaluator import evaluate
from ._output import OutputSink, resolve_sink
from ._scope import State
from ._values import (
    DuplicateDeclaration,
    InterpreterError,
    NonBooleanTest,
    RuntimeValue,
    UndeclaredAssignment,
    is_boolean,
)

logger = logging.getLogger(__name__)


class ExecutionEngine:
    """Executes statements against a state chain.

    Parameters
    ----------
    output : OutputSink | callable | None
        Receives every value produced by a ``print`` statement.  ``None``
        writes to standard output.
    """

    def __init__(self, output: Any = None) -> None:
        self.output: OutputSink = resolve_sink(output)

    # -----------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------

    def execute(self, state: State, stmt: Statement) -> None:
        """Execute a single statement, mutating *state* in place."""
        handler = self._STMT_DISPATCH.get(stmt.kind)
        if handler is None:
            raise InterpreterError(f"Unsupported statement kind: {stmt.kind}")
        if logger.isEnabledFor(logging.DEBUG):
            from minilang.export.source import to_source
            logger.debug(
                "exec [depth %d] %s", state.depth(), to_source(stmt).splitlines()[0],
            )
        handler(self, state, stmt)

    def execute_all(self, state: State, stmts: list[Statement]) -> None:
        for stmt in stmts:
            self.execute(state, stmt)

    # -----------------------------------------------------------------------
    # Block scoping
    # -----------------------------------------------------------------------

    def _exec_block(self, state: State, stmts: list[Statement]) -> None:
        """Run *stmts* in a fresh child scope, then merge back."""
        scope = state.child()
        self.execute_all(scope, stmts)
        state.merge_back(scope)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("merged block scope: %r", dict(state))

    def _test(self, state: State, stmt: IfStatement | WhileStatement) -> bool:
        value = evaluate(state, stmt.test)
        if not is_boolean(value):
            raise NonBooleanTest(stmt.kind)
        return value

    # -----------------------------------------------------------------------
    # Statement handlers
    # -----------------------------------------------------------------------

    def _exec_let(self, state: State, stmt: LetStatement) -> None:
        if stmt.name in state:
            raise DuplicateDeclaration(stmt.name)
        state[stmt.name] = evaluate(state, stmt.expression)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("declared %s, bindings: %r", stmt.name, dict(state))

    def _exec_assignment(self, state: State, stmt: Assignment) -> None:
        if stmt.name not in state:
            raise UndeclaredAssignment(stmt.name)
        state[stmt.name] = evaluate(state, stmt.expression)

    def _exec_if(self, state: State, stmt: IfStatement) -> None:
        if self._test(state, stmt):
            self._exec_block(state, stmt.true_part)
        else:
            self._exec_block(state, stmt.false_part)

    def _exec_while(self, state: State, stmt: WhileStatement) -> None:
        while self._test(state, stmt):
            self._exec_block(state, stmt.body)

    def _exec_print(self, state: State, stmt: PrintStatement) -> None:
        value: RuntimeValue = evaluate(state, stmt.expression)
        self.output.emit(value)

    # Statement dispatch table
    _STMT_DISPATCH: dict[str, Callable[[ExecutionEngine, State, Statement], None]] = {
        "let": _exec_let,
        "assignment": _exec_assignment,
        "if": _exec_if,
        "while": _exec_while,
        "print": _exec_print,
    }


def execute(state: State, stmt: Statement, *, output: Any = None) -> None:
    """Execute one statement against *state* with a throwaway engine."""
    ExecutionEngine(output=output).execute(state, stmt)
