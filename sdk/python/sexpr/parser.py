"""Scalar classifier and recursive-descent parser for S-expressions.

Every rule takes a str or Cursor and returns Success(value, remainder) or a
Failure. Rules never raise on bad input; the public rules raise the
recursion limit for their own nesting budget.
"""

import sys
import threading
from contextlib import contextmanager
from string import ascii_letters, digits
from typing import Iterator, Union

from .combinators import alt, many0, map_value, multispace0, preceded, tag, take_while1
from .errors import Reason
from .types import (
    DEFAULT_CONFIG,
    Atom,
    Cursor,
    Failure,
    Nat,
    ParserConfig,
    Result,
    Scalar,
    Sexpr,
    Success,
)

Input = Union[str, Cursor]

# Interpreter frames consumed per nested list by _element/_sexpr/many0.
FRAMES_PER_LEVEL = 5
# Fixed frames for entry points and combinator wrappers above the first level.
RECURSION_HEADROOM = 100

_DIGITS = frozenset(digits)
_ALNUM = frozenset(ascii_letters + digits)

digit1 = take_while1(_DIGITS.__contains__, "digit")
alphanumeric1 = take_while1(_ALNUM.__contains__, "alphanumeric")
open_paren = preceded(multispace0, tag("("))
close_paren = preceded(multispace0, tag(")"))

_atom = map_value(alphanumeric1, Atom)

_budget_lock = threading.Lock()
_budget_users = 0
_saved_limit = 0


@contextmanager
def recursion_budget(levels: int) -> Iterator[None]:
    """Raise the recursion limit enough for `levels` nested lists.

    Reference counted across threads; the original limit is restored when
    the last concurrent user exits.
    """
    global _budget_users, _saved_limit
    with _budget_lock:
        if _budget_users == 0:
            _saved_limit = sys.getrecursionlimit()
        _budget_users += 1
        needed = _saved_limit + RECURSION_HEADROOM + levels * FRAMES_PER_LEVEL
        if sys.getrecursionlimit() < needed:
            sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        with _budget_lock:
            _budget_users -= 1
            if _budget_users == 0:
                sys.setrecursionlimit(_saved_limit)


# --- Scalars ---

def parse_nat(i: Input, config: ParserConfig = DEFAULT_CONFIG) -> Result:
    cur = Cursor.of(i)
    r = digit1(cur)
    if not r:
        return r
    run = r.value.lstrip("0") or "0"
    # Compare lengths first so enormous runs never reach int().
    if len(run) > len(str(config.max_nat)) or int(run) > config.max_nat:
        return Failure(Reason.NUMERIC_OVERFLOW, cur, f"natural number <= {config.max_nat}", committed=True)
    return Success(Nat(int(run)), r.remainder)


def parse_atom(i: Input) -> Result:
    return _atom(i)


def parse_scalar(i: Input, config: ParserConfig = DEFAULT_CONFIG) -> Result:
    """Skip whitespace, then a Nat if the token is numeric, else an Atom."""
    leaf = alt(lambda c: parse_nat(c, config), parse_atom)
    r = map_value(preceded(multispace0, leaf), Scalar)(i)
    if not r and not r.committed:
        return Failure(r.reason, r.cursor, "natural number or atom")
    return r


# --- Elements ---

def parse_element(i: Input, config: ParserConfig = DEFAULT_CONFIG, _depth: int = 0) -> Result:
    if _depth == 0:
        with recursion_budget(config.max_depth):
            return _element(Cursor.of(i), config, 0)
    return _element(Cursor.of(i), config, _depth)


def parse_sexpr(i: Input, config: ParserConfig = DEFAULT_CONFIG, _depth: int = 0) -> Result:
    """Parse one parenthesized list and everything nested inside it.

    Once the '(' is consumed, failures are committed: an unmatched paren or
    a stray character is reported rather than backtracked over.
    """
    if _depth == 0:
        with recursion_budget(config.max_depth):
            return _sexpr(Cursor.of(i), config, 0)
    return _sexpr(Cursor.of(i), config, _depth)


def _element(cur: Cursor, config: ParserConfig, depth: int) -> Result:
    r = parse_scalar(cur, config)
    if r or r.committed:
        return r
    r = _sexpr(cur, config, depth)
    if r or r.committed:
        return r
    return Failure(r.reason, r.cursor, "natural number, atom or '('")


def _sexpr(cur: Cursor, config: ParserConfig, depth: int) -> Result:
    opened = open_paren(cur)
    if not opened:
        return opened
    start = opened.remainder.advance(-1)
    if depth >= config.max_depth:
        return Failure(Reason.NESTING_TOO_DEEP, start, f"at most {config.max_depth} nested lists", committed=True)

    children = many0(lambda c: _element(c, config, depth + 1))(opened.remainder)
    if not children:
        return children

    closed = close_paren(children.remainder)
    if not closed:
        if closed.reason is Reason.EMPTY_INPUT:
            return Failure(Reason.UNMATCHED_OPEN_PAREN, start, "')'", committed=True)
        return Failure(Reason.UNEXPECTED_TOKEN, closed.cursor, "')'", committed=True)
    return Success(Sexpr(children.value), closed.remainder)
