"""Failure reasons and the exceptions raised at the API boundary."""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Failure


class Reason(Enum):
    UNEXPECTED_TOKEN = "unexpected token"
    UNMATCHED_OPEN_PAREN = "unmatched '('"
    NUMERIC_OVERFLOW = "numeric overflow"
    TRAILING_INPUT = "trailing input"
    EMPTY_INPUT = "unexpected end of input"
    NESTING_TOO_DEEP = "nesting too deep"


class ParseError(SyntaxError):
    """Raised by sexpr.parse() when a document is rejected.

    Carries the failure reason plus the 0-based offset and 1-based
    line/column of the offending location.
    """

    def __init__(self, reason: Reason, offset: int, line: int, column: int, expected: str = "", text: str = ""):
        self.reason = reason
        self.expected = expected
        msg = f"{reason.value} at line {line}, column {column}"
        if expected:
            msg += f": expected {expected}"
        super().__init__(msg, ("<sexpr>", line, column, text))
        # SyntaxError.offset is the 1-based column; keep the absolute position separately.
        self.position = offset
        self.line = line
        self.column = column

    @classmethod
    def from_failure(cls, failure: "Failure") -> "ParseError":
        cur = failure.cursor
        return cls(failure.reason, cur.offset, cur.line, cur.column, failure.expected, _line_text(cur.text, cur.offset))


class DepthExceeded(RuntimeError):
    pass


def _line_text(text: str, offset: int) -> str:
    start = text.rfind("\n", 0, offset) + 1
    end = text.find("\n", offset)
    return text[start:] if end < 0 else text[start:end]
