"""Closure representation and argument binding for Sprig."""

from __future__ import annotations

from sprig import SExpression, LispValue
from sprig.errors import SprigArityError
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


class Closure:
    """A first-class function: parameters, a single body form and its defining env.

    `env` is shared, not owned: every closure created in the same frame refers
    to the same Environment object and sees later definitions made in it.
    """

    __slots__ = ("params", "body", "env", "name")

    def __init__(
        self,
        params: list[Symbol],
        body: SExpression,
        env: Environment,
        name: Symbol | None = None,
    ):
        self.params: list[Symbol] = params
        self.body: SExpression = body
        self.env: Environment = env
        self.name: Symbol | None = name

    def __repr__(self) -> str:
        params = " ".join(str(p) for p in self.params)
        if self.name is None:
            return f"<lambda ({params})>"
        return f"<function {self.name} ({params})>"

    def bind(self, args: list[LispValue]) -> Environment:
        """Return a child of the captured env with params bound to args by position."""
        if len(args) != len(self.params):
            raise SprigArityError(
                f"argument count mismatch: {self!r} expects {len(self.params)}, got {len(args)}"
            )
        frame = Environment(outer=self.env)
        frame.update(dict(zip(self.params, args)))
        return frame
