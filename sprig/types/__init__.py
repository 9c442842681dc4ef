from sprig.types.symbol import Symbol
from sprig.types.environment import Environment
from sprig.types.closure import Closure
from sprig.types.builtin import Builtin
from sprig.types.value import is_number, is_callable, is_true, truth, type_name

__all__ = [
    "Symbol",
    "Environment",
    "Closure",
    "Builtin",
    "is_number",
    "is_callable",
    "is_true",
    "truth",
    "type_name",
]
