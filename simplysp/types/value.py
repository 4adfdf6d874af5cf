"""Leaf variants of the Simplysp value model.

A Value is exactly one of:

    - Number  -> signed 64-bit integer
    - Error   -> diagnostic message, produced by evaluation instead of raising
    - Symbol  -> operator name
    - SExpr   -> ordered list of owned child values (see types/sexpr.py)

Leaves never carry children. The container type lives in its own module.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from simplysp.types.sexpr import SExpr

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def wrap_int64(n: int) -> int:
    """Fold an arbitrary Python int into the signed 64-bit range (two's complement)."""
    return (n - INT64_MIN) % (2 ** 64) + INT64_MIN


class Number:
    __slots__ = ("num",)

    def __init__(self, num: int):
        self.num = wrap_int64(num)

    def __eq__(self, other) -> bool:
        return isinstance(other, Number) and self.num == other.num

    def __hash__(self) -> int:
        return hash(("num", self.num))

    def __repr__(self):
        return f"Number({self.num})"

    def __str__(self):
        return str(self.num)


class Error:
    __slots__ = ("err",)

    def __init__(self, err: str):
        self.err = err

    def __eq__(self, other) -> bool:
        return isinstance(other, Error) and self.err == other.err

    def __hash__(self) -> int:
        return hash(("err", self.err))

    def __repr__(self):
        return f"Error({self.err!r})"

    def __str__(self):
        return f"Error: {self.err}"


class Symbol:
    __slots__ = ("sym",)

    def __init__(self, sym: str):
        # Interned so operator lookups compare by identity first
        self.sym = sys.intern(sym)

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.sym == other.sym

    def __hash__(self) -> int:
        return hash(self.sym)

    def __repr__(self):
        return f"Symbol({self.sym!r})"

    def __str__(self):
        return self.sym


Value = Union[Number, Error, Symbol, "SExpr"]


def dispose(v: Value) -> None:
    """Release a value. Lists release their children first; leaves hold nothing to release."""
    from simplysp.types.sexpr import SExpr

    match v:
        case SExpr():
            v.dispose()
        case Number() | Error() | Symbol():
            pass
