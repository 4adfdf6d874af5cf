from simplysp.reader.grammar import parse
from simplysp.reader.reader import read


def read_str(text: str, source_name: str = "<stdin>"):
    """Parse ``text`` and read it into a single SExpr holding every top-level expression."""
    return read(parse(text, source_name))


__all__ = ["parse", "read", "read_str"]
