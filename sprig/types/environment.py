"""Runtime environment for Sprig.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Lookup walks outward; definition always
writes the frame it is called on.
"""

from __future__ import annotations

from typing import Optional

from sprig import LispValue
from sprig.errors import SprigInvalidSymbol, SprigUnboundSymbol
from sprig.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame, replacing any binding it already has.

        Raises SprigInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise SprigInvalidSymbol(f"cannot define {name!r}: name must be a symbol")
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return the innermost value bound to `name`.

        Raises SprigUnboundSymbol if no frame in the chain binds it.
        """
        env = self.find(name)
        if env is None:
            raise SprigUnboundSymbol(f"atom not defined: {name}")
        return env.vars[name]

    def set(self, name: Symbol, value: LispValue) -> None:
        """Overwrite the nearest existing binding of `name`."""
        if not isinstance(name, Symbol):
            raise SprigInvalidSymbol(f"cannot set {name!r}: name must be a symbol")
        env = self.find(name)
        if env is None:
            raise SprigUnboundSymbol(f"atom not defined: {name}")
        env.vars[name] = value

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in this frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def snapshot(self) -> dict[Symbol, LispValue]:
        """Copy of this frame's bindings, unaffected by later definitions."""
        return dict(self.vars)

    def __repr__(self) -> str:
        names = ", ".join(str(k) for k in self.vars)
        parent = " -> ..." if self.outer is not None else ""
        return f"<Environment {{{names}}}{parent}>"
