"""Reader: Lark parse tree -> Value tree.

    - NUMBER token       -> Number (or Error("invalid number") outside 64-bit range)
    - SYMBOL token       -> Symbol, text taken verbatim
    - start / sexpr tree -> SExpr of the children read left to right,
                            skipping the literal '(' and ')' tokens
"""

from __future__ import annotations

from lark import Token, Tree

from simplysp.errors import SimplyspReaderError
from simplysp.types.value import INT64_MAX, INT64_MIN, Error, Number, Symbol, Value
from simplysp.types.sexpr import SExpr

LIST_RULES = ("start", "sexpr")
SKIPPED_TOKENS = ("(", ")")


def read_num(text: str) -> Value:
    x = int(text, 10)
    if not INT64_MIN <= x <= INT64_MAX:
        return Error("invalid number")
    return Number(x)


def read(node: Tree | Token) -> Value:
    match node:
        case Token(type="NUMBER"):
            return read_num(str(node))
        case Token(type="SYMBOL"):
            return Symbol(str(node))
        case Tree() if node.data in LIST_RULES:
            x = SExpr()
            for child in node.children:
                if isinstance(child, Token) and str(child) in SKIPPED_TOKENS:
                    continue
                if isinstance(child, Token) and not child.strip():
                    continue
                x.add(read(child))
            return x
    raise SimplyspReaderError(f"Cannot read parse node {node!r}")
