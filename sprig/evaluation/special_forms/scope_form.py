from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.runtime_context import Context
from sprig.types.environment import Environment
from sprig.evaluation.special_forms.do_form import evaluate_sequence


def scope_form(
    tail: list[SExpression],
    env: Environment,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (scope e1 e2 ...)
    Like do, but definitions land in a fresh child frame and do not leak out.
    The frame survives only if a closure created inside it captured it.
    """
    return evaluate_sequence(tail, Environment(outer=env), ctx, evaluate_fn)
