from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArityError
from sprig.runtime_context import Context
from sprig.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (set name value)
    Overwrites the nearest existing binding of name; it is an error if there is none.
    """
    if len(tail) != 2:
        raise SprigArityError("set requires exactly 2 arguments")

    name, val_expr = tail
    value = evaluate_fn(val_expr, env, ctx)
    env.set(name, value)
    return value
