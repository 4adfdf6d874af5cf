from simplysp.evaluation.evaluator import evaluate, evaluate_sexpr
from simplysp.evaluation.builtins import BUILTINS, builtin_op

__all__ = ["evaluate", "evaluate_sexpr", "BUILTINS", "builtin_op"]
