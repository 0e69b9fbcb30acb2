"""Scope chain: the mutable state programs execute against.

A ``State`` is a plain ``dict`` of variable bindings.  The link to the
enclosing scope lives on the ``parent`` attribute rather than in the
mapping, so it never shows up as a binding, in iteration, in equality or
in merge-back.
"""

from __future__ import annotations

from typing import Union

from ._values import RuntimeValue, UndefinedVariable, is_runtime_value


class State(dict[str, Union[RuntimeValue, "State"]]):
    """Variable bindings for one scope level.

    Parameters
    ----------
    bindings : dict, optional
        Initial entries for this level.
    parent : State, optional
        Enclosing scope consulted by :meth:`lookup`.  Not owned: the parent
        always outlives its children.
    """

    def __init__(
        self,
        bindings: dict[str, RuntimeValue | State] | None = None,
        parent: State | None = None,
    ) -> None:
        super().__init__(bindings or {})
        self.parent = parent

    def __repr__(self) -> str:
        if self.parent is None:
            return f"State({dict.__repr__(self)})"
        return f"State({dict.__repr__(self)}, parent=...)"

    # -----------------------------------------------------------------------
    # Lookup
    # -----------------------------------------------------------------------

    def lookup(self, name: str) -> RuntimeValue:
        """Resolve *name* through this level and then each ancestor.

        The walk stops at the first level that binds *name*; if that
        binding is not a run-time value the name counts as undefined.
        """
        scope: State | None = self
        while scope is not None and name not in scope:
            scope = scope.parent
        if scope is None:
            raise UndefinedVariable(name)
        value = scope[name]
        if not is_runtime_value(value):
            raise UndefinedVariable(name)
        return value

    def depth(self) -> int:
        """Number of enclosing scopes above this one (root is 0)."""
        n = 0
        scope = self.parent
        while scope is not None:
            n += 1
            scope = scope.parent
        return n

    # -----------------------------------------------------------------------
    # Block entry / merge-back
    # -----------------------------------------------------------------------

    def child(self) -> State:
        """Shallow copy of every binding, linked back to this state."""
        return State(dict(self), parent=self)

    def merge_back(self, child: State) -> None:
        """Copy the child's values for names this state already binds.

        Names declared only inside the block are dropped.
        """
        for key in list(self):
            if key in child:
                self[key] = child[key]
