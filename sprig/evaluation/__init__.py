from sprig.evaluation.evaluator import evaluate
from sprig.evaluation.apply import apply

__all__ = ["evaluate", "apply"]
