"""Result-returning parser combinators.

A parser is any callable taking a Cursor (or a str) and returning Success
or Failure. Failures are plain values; a committed failure stops alt() from
trying the next branch and many0() from swallowing it.
"""

from typing import Any, Callable, Sequence

from .errors import Reason
from .types import Cursor, Failure, Result, Success

Parser = Callable[[Cursor], Result]

WHITESPACE = " \t\n\r"


def _miss(cur: Cursor, expected: str) -> Failure:
    reason = Reason.EMPTY_INPUT if cur.at_end else Reason.UNEXPECTED_TOKEN
    return Failure(reason, cur, expected)


def tag(literal: str) -> Parser:
    def _tag(cur: Cursor) -> Result:
        cur = Cursor.of(cur)
        if cur.text.startswith(literal, cur.offset):
            return Success(literal, cur.advance(len(literal)))
        return _miss(cur, repr(literal))
    return _tag


def take_while1(pred: Callable[[str], bool], expected: str) -> Parser:
    def _take(cur: Cursor) -> Result:
        cur = Cursor.of(cur)
        text, end = cur.text, cur.offset
        while end < len(text) and pred(text[end]):
            end += 1
        if end == cur.offset:
            return _miss(cur, expected)
        return Success(text[cur.offset:end], Cursor(text, end))
    return _take


def multispace0(cur: Cursor) -> Success:
    cur = Cursor.of(cur)
    text, end = cur.text, cur.offset
    while end < len(text) and text[end] in WHITESPACE:
        end += 1
    return Success(text[cur.offset:end], Cursor(text, end))


def alt(*parsers: Parser) -> Parser:
    """Ordered choice: the first success wins."""
    def _alt(cur: Cursor) -> Result:
        cur = Cursor.of(cur)
        misses: list[Failure] = []
        for p in parsers:
            r = p(cur)
            if r or r.committed:
                return r
            misses.append(r)
        return _merge(misses)
    return _alt


def _merge(misses: Sequence[Failure]) -> Failure:
    furthest = max(misses, key=lambda f: f.offset)
    expected: list[str] = []
    for f in misses:
        if f.offset == furthest.offset and f.expected and f.expected not in expected:
            expected.append(f.expected)
    return Failure(furthest.reason, furthest.cursor, " or ".join(expected))


def many0(p: Parser) -> Parser:
    """Zero or more applications of p, stopping at the first uncommitted failure.

    A success that consumes nothing also ends the repetition.
    """
    def _many0(cur: Cursor) -> Result:
        cur = Cursor.of(cur)
        values: list[Any] = []
        while True:
            r = p(cur)
            if not r:
                if r.committed:
                    return r
                return Success(values, cur)
            if r.remainder.offset <= cur.offset:
                return Success(values, cur)
            values.append(r.value)
            cur = r.remainder
    return _many0


def map_value(p: Parser, fn: Callable[[Any], Any]) -> Parser:
    def _map(cur: Cursor) -> Result:
        cur = Cursor.of(cur)
        r = p(cur)
        if not r:
            return r
        return Success(fn(r.value), r.remainder)
    return _map


def preceded(first: Parser, second: Parser) -> Parser:
    def _preceded(cur: Cursor) -> Result:
        cur = Cursor.of(cur)
        r = first(cur)
        if not r:
            return r
        return second(r.remainder)
    return _preceded


def terminated(first: Parser, second: Parser) -> Parser:
    def _terminated(cur: Cursor) -> Result:
        cur = Cursor.of(cur)
        r = first(cur)
        if not r:
            return r
        end = second(r.remainder)
        if not end:
            return end
        return Success(r.value, end.remainder)
    return _terminated


def all_consuming(p: Parser) -> Parser:
    def _all(cur: Cursor) -> Result:
        cur = Cursor.of(cur)
        r = p(cur)
        if not r:
            return r
        if not r.remainder.at_end:
            return Failure(Reason.TRAILING_INPUT, r.remainder, "end of input", committed=True)
        return r
    return _all
