"""Application engine for Sprig.

Function application is centralized here so the evaluator and builtins that
take function arguments (filter, map) share one set of rules. It is also
where recursion is bounded: each closure application counts one level of
`ctx.depth` against `ctx.max_depth`.
"""

from sprig import LispValue, EvaluatorFn
from sprig.errors import SprigNotApplicable, SprigRuntimeError
from sprig.printer import to_repr
from sprig.runtime_context import Context
from sprig.types.builtin import Builtin
from sprig.types.closure import Closure


def apply(
    head: LispValue,
    args: list[LispValue],
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure or Builtin to already-evaluated arguments.

    - A Closure's body runs in a new frame whose parent is the closure's own
      captured environment, not the caller's.
    - A Builtin receives the context and the argument list.
    - Anything else is not applicable.
    """
    match head:
        case Closure():
            frame = head.bind(args)
            ctx.depth += 1
            try:
                if ctx.depth > ctx.max_depth:
                    raise SprigRuntimeError(
                        f"maximum call depth of {ctx.max_depth} exceeded"
                    )
                return evaluate_fn(head.body, frame, ctx)
            finally:
                ctx.depth -= 1
        case Builtin():
            return head(ctx, args)
    raise SprigNotApplicable(f"not applicable: {to_repr(head)}")
