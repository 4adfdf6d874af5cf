from __future__ import annotations
from typing import Callable

from simplysp.types.value import Error, Number, Value, wrap_int64
from simplysp.types.sexpr import SExpr

ERR_NON_NUMBER = "Cannot operate on a non-number!"
ERR_DIV_ZERO = "Division by zero is not supported"


class DivisionByZero(Exception):
    """ Raised inside an operator fold; builtin_op turns it into an Error value"""


# -------------------------------
# Arithmetic on 64-bit integers
# -------------------------------
def add(x: int, y: int) -> int:
    return wrap_int64(x + y)

def sub(x: int, y: int) -> int:
    return wrap_int64(x - y)

def mul(x: int, y: int) -> int:
    return wrap_int64(x * y)

def div(x: int, y: int) -> int:
    if y == 0:
        raise DivisionByZero()
    # Truncate toward zero, as machine integer division does
    q = abs(x) // abs(y)
    if (x < 0) != (y < 0):
        q = -q
    return wrap_int64(q)


BUILTINS: dict[str, Callable[[int, int], int]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
}


def builtin_op(a: SExpr, op: str) -> Value:
    """Fold the numeric operands in ``a`` with operator ``op``.

    ``a`` is consumed: every path disposes of it, and the result is a fresh
    Number or an Error.
    """
    # Ensure all arguments are numbers
    for cell in a:
        if not isinstance(cell, Number):
            a.dispose()
            return Error(ERR_NON_NUMBER)

    fn = BUILTINS.get(op)
    if fn is None:
        a.dispose()
        return Error(f"Unknown operator '{op}'")

    if len(a) == 0:
        a.dispose()
        return Error(f"Operator '{op}' needs at least one operand")

    x = a.pop(0)

    # Unary negation
    if op == "-" and len(a) == 0:
        a.dispose()
        return Number(-x.num)

    acc = x.num
    while len(a) > 0:
        y = a.pop(0)
        try:
            acc = fn(acc, y.num)
        except DivisionByZero:
            # The whole fold fails: no partial result survives
            a.dispose()
            return Error(ERR_DIV_ZERO)
    a.dispose()
    return Number(acc)
