"""Printer: Value -> text.

    Number -> decimal digits
    Error  -> "Error: " + message
    Symbol -> name
    SExpr  -> "(" cells separated by one space ")"
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from simplysp.types.value import Error, Number, Symbol, Value
from simplysp.types.sexpr import SExpr


def write_expr(v: SExpr, buffer: TextIO, open_: str = "(", close: str = ")") -> None:
    buffer.write(open_)
    for i, cell in enumerate(v):
        write_value(cell, buffer)
        # No trailing space after the last cell
        if i != len(v) - 1:
            buffer.write(" ")
    buffer.write(close)


def write_value(v: Value, buffer: TextIO) -> None:
    match v:
        case Number():
            buffer.write(str(v.num))
        case Error():
            buffer.write(f"Error: {v.err}")
        case Symbol():
            buffer.write(v.sym)
        case SExpr():
            write_expr(v, buffer)


def to_str(v: Value) -> str:
    with StringIO() as buffer:
        write_value(v, buffer)
        return buffer.getvalue()


def println(v: Value, out: TextIO | None = None) -> None:
    out = out if out is not None else sys.stdout
    write_value(v, out)
    out.write("\n")
