from __future__ import annotations

import logging

from simplysp.errors import SimplyspNestingError
from simplysp.types.value import Value
from simplysp.types.sexpr import SExpr
from simplysp.reader.grammar import parse
from simplysp.reader.reader import read
from simplysp.evaluation.evaluator import evaluate
from simplysp.printer import to_str

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Runs Simplysp source text through parse -> read -> evaluate.
    Holds no state between calls; each line is read into a fresh value tree.
    """

    def __init__(self, source_name: str = "<stdin>"):
        self.source_name = source_name

    def read(self, code: str) -> SExpr:
        tree = parse(code, self.source_name)
        logger.debug("parsed %r -> %s", code, tree)
        try:
            return read(tree)
        except RecursionError as err:
            raise SimplyspNestingError(self.source_name) from err

    def eval(self, code: str) -> Value:
        form = self.read(code)
        logger.debug("read %s", form)
        try:
            result = evaluate(form)
        except RecursionError as err:
            raise SimplyspNestingError(self.source_name) from err
        logger.debug("evaluated %s -> %s", code, result)
        return result

    def rep(self, code: str) -> str:
        """Read, evaluate and print ``code`` to a string."""
        return to_str(self.eval(code))
