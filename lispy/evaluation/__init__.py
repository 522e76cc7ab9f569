from lispy.evaluation.evaluator import evaluate, evaluate_sexpr
from lispy.evaluation.apply import apply, apply_builtin, apply_lambda

__all__ = ["evaluate", "evaluate_sexpr", "apply", "apply_builtin", "apply_lambda"]
