"""
  Simplysp grammar, built on Lark.

    number   : /-?[0-9]+/
    symbol   : '+' | '-' | '*' | '/'
    sexpr    : '(' <expr>* ')'
    expr     : <number> | <symbol> | <sexpr>
    start    : <expr>*            (anchored at both ends of the input)

The parser keeps every token, parentheses included, so the tree handed to the
reader carries the literal '(' and ')' leaves alongside the expressions.
"""

from __future__ import annotations

from lark import Lark, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from simplysp.errors import SimplyspSyntaxError


GRAMMAR = r"""
    start: expr*

    ?expr: NUMBER
         | SYMBOL
         | sexpr

    sexpr: LPAR expr* RPAR

    NUMBER: /-?[0-9]+/
    SYMBOL: "+" | "-" | "*" | "/"
    LPAR: "("
    RPAR: ")"

    %import common.WS
    %ignore WS
"""

parser = Lark(GRAMMAR, parser="lalr", keep_all_tokens=True)


def _describe(err: UnexpectedInput) -> str:
    match err:
        case UnexpectedCharacters():
            return f"unexpected character {err.char!r}"
        case UnexpectedEOF():
            expected = ", ".join(sorted(err.expected))
            return f"unexpected end of input, expected one of {expected}"
        case UnexpectedToken():
            if err.token.type == "$END":
                what = "end of input"
            else:
                what = repr(str(err.token))
            expected = ", ".join(sorted(err.expected))
            return f"unexpected {what}, expected one of {expected}"
    return str(err).splitlines()[0]


def parse(text: str, source_name: str = "<stdin>") -> Tree:
    """Parse ``text`` into a Lark tree rooted at ``start``.

    Raises SimplyspSyntaxError on any input the grammar rejects.
    """
    try:
        return parser.parse(text)
    except UnexpectedInput as err:
        line = getattr(err, "line", None)
        column = getattr(err, "column", None)
        # Lark reports "?" or -1 when the failure is at end of input
        if not isinstance(line, int) or line < 1:
            line = text.count("\n") + 1
        if not isinstance(column, int) or column < 1:
            column = len(text.rsplit("\n", 1)[-1]) + 1
        raise SimplyspSyntaxError(_describe(err), source_name, line, column) from err
