from __future__ import annotations

import logging
import sys
from typing import Callable, Iterator

from sprig import SExpression, LispValue
from sprig.builtin.env_builtin import register
from sprig.config import get_max_depth
from sprig.errors import SprigRuntimeError
from sprig.evaluation.evaluator import evaluate
from sprig.printer import to_repr
from sprig.reader.parser import lex, TokenStream
from sprig.runtime_context import Context, write_stdout
from sprig.types.builtin import Builtin
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol

logger = logging.getLogger(__name__)

# Python frames one closure call may use (evaluate, evaluate0, handlers, apply, ...)
FRAMES_PER_CALL = 25
FRAME_HEADROOM = 1000


def ensure_stack(max_depth: int) -> None:
    """Raise the host recursion limit so max_depth nested calls fit; never lower it."""
    needed = max_depth * FRAMES_PER_CALL + FRAME_HEADROOM
    if sys.getrecursionlimit() < needed:
        logger.debug("raising recursion limit to %d", needed)
        sys.setrecursionlimit(needed)


class Interpreter:
    """
    Orchestrates reading and evaluating Sprig code for an embedding host.
    Keeps one root Environment for the whole session, so definitions persist
    across calls.
    """

    def __init__(
        self,
        output: Callable[[str], None] | None = None,
        max_depth: int | None = None,
    ):
        root = Environment()
        register(root)
        self.context = Context(
            root=root,
            output=output or write_stdout,
            max_depth=max_depth if max_depth is not None else get_max_depth(),
        )
        ensure_stack(self.context.max_depth)

    @property
    def env(self) -> Environment:
        return self.context.root

    def read(self, code: str) -> Iterator[SExpression]:
        """Yield the forms of `code` one at a time; a read error surfaces where it occurs."""
        return TokenStream(lex(code)).parse_all()

    def eval_form(self, expr: SExpression) -> LispValue:
        """Evaluate one form at top level. Raises SprigError on failure."""
        logger.debug("evaluating %s", to_repr(expr))
        root = self.context.root
        self.context.depth = 0
        try:
            return evaluate(expr, root, self.context)
        except RecursionError:
            # the host stack ran out before max_depth was reached
            err = SprigRuntimeError("host stack exhausted: recursion too deep")
            err.locate(expr, root)
            raise err from None

    def eval(self, code: str) -> LispValue:
        """Read and evaluate each form of `code` in turn; return the last result (nil if none)."""
        result: LispValue = []
        for expr in self.read(code):
            result = self.eval_form(expr)
        return result

    def bind(self, name: str, value: LispValue) -> None:
        """Expose a host value to Sprig code under `name`."""
        self.context.root.define(Symbol(name), value)

    def bind_builtin(self, name: str, fn: Callable[[Context, list[LispValue]], LispValue]) -> None:
        """Expose a host function taking (ctx, args) as a builtin."""
        self.bind(name, Builtin(name, fn))
