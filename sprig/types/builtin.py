from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from sprig import LispValue

if TYPE_CHECKING:
    from sprig.runtime_context import Context

NativeFn = Callable[["Context", list[LispValue]], LispValue]


class Builtin:
    """A native function bound under a name. Called with (ctx, evaluated args)."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeFn):
        self.name = name
        self.fn = fn

    def __call__(self, ctx: Context, args: list[LispValue]) -> LispValue:
        return self.fn(ctx, args)

    def __repr__(self) -> str:
        return f"<builtin {self.name}>"
