"""Output sinks for ``print`` statements."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import Any, Protocol, TextIO, runtime_checkable

from ._values import RuntimeValue, format_value


@runtime_checkable
class OutputSink(Protocol):
    """Anything that can receive printed values."""

    def emit(self, value: RuntimeValue) -> None: ...


class CollectingSink:
    """Records every emitted value in order."""

    def __init__(self) -> None:
        self.values: list[RuntimeValue] = []

    def emit(self, value: RuntimeValue) -> None:
        self.values.append(value)

    def __len__(self) -> int:
        return len(self.values)


class StreamSink:
    """Writes one formatted value per line to a text stream.

    *stream* defaults to whatever ``sys.stdout`` is at emit time, so
    redirection (e.g. pytest's ``capsys``) is honoured.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, value: RuntimeValue) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(format_value(value) + "\n")


class _CallableSink:
    def __init__(self, fn: Callable[[RuntimeValue], Any]) -> None:
        self._fn = fn

    def emit(self, value: RuntimeValue) -> None:
        self._fn(value)


def resolve_sink(output: Any) -> OutputSink:
    """Resolve the ``output`` argument of the entry points to a sink."""
    if output is None:
        return StreamSink()
    if isinstance(output, OutputSink):
        return output
    if callable(output):
        return _CallableSink(output)
    raise TypeError(
        f"output must be an OutputSink, a callable or None, "
        f"got {type(output).__name__}"
    )
