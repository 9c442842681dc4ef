"""Core tree-walking evaluator for Sprig.

Dispatch order for an expression:
1. numbers and text evaluate to themselves;
2. symbols are looked up in the environment chain;
3. the empty list evaluates to itself;
4. a non-empty list is either a special form (head symbol found in the
   special-form table, arguments passed unevaluated) or an application
   (head and arguments evaluated left to right, then applied).
"""

from __future__ import annotations

from sprig import SExpression, LispValue
from sprig.errors import SprigError, SprigNotApplicable
from sprig.printer import to_repr
from sprig.runtime_context import Context
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol
from sprig.types.value import is_callable
from sprig.evaluation.apply import apply
from sprig.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment, ctx: Context) -> LispValue:
    """
    Evaluate `expr` in `env`.

    A SprigError passing through is located at the innermost expression that
    raised it, together with a snapshot of that frame's bindings.
    """
    try:
        return evaluate0(expr, env, ctx)
    except SprigError as err:
        err.locate(expr, env)
        raise


def evaluate0(expr: SExpression, env: Environment, ctx: Context) -> LispValue:
    """Single evaluation step; errors are not located here."""
    match expr:
        case Symbol():
            return env.lookup(expr)

        case [head, *tail_args]:
            if isinstance(head, Symbol):
                handler = SPECIAL_FORMS.get(head)
                if handler is not None:
                    return handler(tail_args, env, ctx, evaluate)
            fn = evaluate(head, env, ctx)
            if not is_callable(fn):
                raise SprigNotApplicable(f"not applicable: {to_repr(fn)}")
            args = [evaluate(arg, env, ctx) for arg in tail_args]
            return apply(fn, args, ctx, evaluate)

    # --- Numbers, text, the empty list and other values return as-is ---
    return expr
