# Core type aliases for Sprig's data model.
# Plain Python types represent both code (forms) and runtime values:
# int/float for numbers, str for text, list for lists, plus the Symbol,
# Closure and Builtin classes from sprig.types. There is no Cons type.
#
# Naming guidance:
# - SExpression: use in reader and special-form code for syntactic forms (code-as-data).
# - LispValue:  use in evaluator and builtin code for evaluated values.
# Both resolve to `Any`; a list used as code and a list used as data are the same object.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias
SExpression = LispValue

# Evaluator function type handed to special forms and builtins
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
