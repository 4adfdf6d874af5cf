# Core aliases for the Simplysp data model.
#
# Every value the reader builds and the evaluator returns is one of the four
# variants re-exported here. Evaluation errors are values (Error), not exceptions;
# exceptions from simplysp.errors are reserved for host-level failures such as
# text that does not parse.

from simplysp.types.value import Number, Error, Symbol, Value, dispose
from simplysp.types.sexpr import SExpr

__all__ = ["Number", "Error", "Symbol", "SExpr", "Value", "dispose"]
