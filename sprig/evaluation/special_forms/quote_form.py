from sprig import SExpression, LispValue, EvaluatorFn
from sprig.errors import SprigArityError
from sprig.runtime_context import Context
from sprig.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, ctx: Context, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise SprigArityError("quote expects exactly 1 argument")
    return tail[0]
