from simplysp.types.value import Number, Error, Symbol, Value, dispose
from simplysp.types.sexpr import SExpr

__all__ = ["Number", "Error", "Symbol", "SExpr", "Value", "dispose"]
