from sprig import EvaluatorFn
from sprig import SExpression, LispValue
from sprig.errors import SprigArityError, SprigInvalidSymbol
from sprig.printer import to_repr
from sprig.runtime_context import Context
from sprig.types.closure import Closure
from sprig.types.environment import Environment
from sprig.types.symbol import Symbol


def parse_params(params: SExpression) -> list[Symbol]:
    """Validate a parameter list: a list of distinct symbols."""
    if not isinstance(params, list):
        raise SprigInvalidSymbol(f"parameter list must be a list of symbols, got {to_repr(params)}")
    for p in params:
        if not isinstance(p, Symbol):
            raise SprigInvalidSymbol(f"parameter must be a symbol, got {to_repr(p)}")
    if len(set(params)) != len(params):
        raise SprigInvalidSymbol("parameter names must be distinct")
    return list(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    ctx: Context,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body) takes a single body form; use do or scope to sequence.
    if len(tail) != 2:
        raise SprigArityError("lambda requires a parameter list and exactly one body form")

    params, body = tail
    return Closure(parse_params(params), body, env)
