from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.runtime_context import Context
from sprig.types.environment import Environment


def evaluate_sequence(
    forms: list[SExpression],
    env: Environment,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate forms in order in `env`; the last value, or nil for no forms."""
    result: LispValue = []
    for form in forms:
        result = evaluate_fn(form, env, ctx)
    return result


def do_form(
    tail: list[SExpression],
    env: Environment,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (do e1 e2 ...) shares the caller's frame
    return evaluate_sequence(tail, env, ctx, evaluate_fn)
