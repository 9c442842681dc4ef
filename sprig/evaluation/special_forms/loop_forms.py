"""Looping special forms for Sprig: for, while.

Both evaluate their body like `do`, but in a fresh child frame per iteration,
so a `define` in the body never outlives its iteration. Use `set` to update
a binding that lives outside the loop.
"""

from __future__ import annotations
from sprig import SExpression, LispValue, EvaluatorFn
from sprig.errors import SprigArityError, SprigInvalidSymbol, SprigTypeError
from sprig.printer import to_repr
from sprig.runtime_context import Context
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol
from sprig.types.value import is_true, type_name
from sprig.evaluation.special_forms.do_form import evaluate_sequence


def for_form(
    tail: list[SExpression],
    env: Environment,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(for var list body...) runs body once per element with var bound to it."""
    if len(tail) < 2:
        raise SprigArityError("for requires a variable, a list and a body")

    var, list_expr, *body = tail
    if not isinstance(var, Symbol):
        raise SprigInvalidSymbol(f"for variable must be a symbol, got {to_repr(var)}")

    items = evaluate_fn(list_expr, env, ctx)
    if not isinstance(items, list):
        raise SprigTypeError(f"type mismatch: for expects a list, got {type_name(items)}")

    result: LispValue = []
    # iterate over a copy so the body cannot disturb the iteration
    for item in list(items):
        frame = Environment(outer=env)
        frame.define(var, item)
        result = evaluate_sequence(body, frame, ctx, evaluate_fn)
    return result


def while_form(
    tail: list[SExpression],
    env: Environment,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(while cond body...) re-tests cond in the caller's frame before each iteration."""
    if not tail:
        raise SprigArityError("while requires a condition")

    cond, *body = tail
    result: LispValue = []
    while is_true(evaluate_fn(cond, env, ctx)):
        result = evaluate_sequence(body, Environment(outer=env), ctx, evaluate_fn)
    return result
