"""Core evaluator for Simplysp.

Numbers, errors and symbols evaluate to themselves. An S-expression evaluates
its cells left to right, lets the leftmost Error win, unwraps singletons, and
otherwise applies the builtin operator named by its head symbol to the rest.
"""

from __future__ import annotations

from simplysp.types.value import Error, Number, Symbol, Value, dispose
from simplysp.types.sexpr import SExpr
from simplysp.evaluation.builtins import builtin_op

ERR_BAD_HEAD = "S-expression does not start with symbol"


def evaluate(v: Value) -> Value:
    match v:
        case SExpr():
            return evaluate_sexpr(v)
        case Number() | Error() | Symbol():
            return v


def evaluate_sexpr(v: SExpr) -> Value:
    # Evaluate the children in place
    for i, cell in enumerate(v.cells):
        v.cells[i] = evaluate(cell)

    # Leftmost error wins
    for i, cell in enumerate(v.cells):
        if isinstance(cell, Error):
            return v.take(i)

    # Empty expression
    if len(v) == 0:
        return v

    # Single expression
    if len(v) == 1:
        return v.take(0)

    f = v.pop(0)
    if not isinstance(f, Symbol):
        dispose(f)
        v.dispose()
        return Error(ERR_BAD_HEAD)

    result = builtin_op(v, f.sym)
    dispose(f)
    return result
