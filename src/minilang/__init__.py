"""minilang — tree-walking evaluator for a small imperative language."""

import logging

from minilang.interpret import InterpreterError, State, run

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["InterpreterError", "State", "run"]
