from .document import parse, parse_document
from .parser import parse_atom, parse_element, parse_nat, parse_scalar, parse_sexpr
from .convert import to_native, unparse
from .errors import DepthExceeded, ParseError, Reason
from .types import Atom, Cursor, Failure, Nat, ParserConfig, Scalar, Sexpr, Success

__all__ = [
    "parse", "parse_document",
    "parse_nat", "parse_atom", "parse_scalar", "parse_element", "parse_sexpr",
    "to_native", "unparse",
    "ParseError", "DepthExceeded", "Reason",
    "Nat", "Atom", "Scalar", "Sexpr", "Cursor", "Success", "Failure", "ParserConfig",
]
