from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArityError
from sprig.runtime_context import Context
from sprig.types.environment import Environment
from sprig.types.value import is_true


def if_form(
    tail: list[SExpression],
    env: Environment,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if cond then else) evaluates cond, then exactly one branch."""
    if len(tail) not in (2, 3):
        raise SprigArityError("if requires a condition, a then-expression and an optional else-expression")

    cond = evaluate_fn(tail[0], env, ctx)
    if is_true(cond):
        return evaluate_fn(tail[1], env, ctx)
    if len(tail) == 3:
        return evaluate_fn(tail[2], env, ctx)
    return []
