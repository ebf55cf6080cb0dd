from sexpr.combinators import (
    all_consuming,
    alt,
    many0,
    map_value,
    multispace0,
    preceded,
    tag,
    take_while1,
    terminated,
)
from sexpr.errors import Reason
from sexpr.types import Cursor, Failure, Success

letters = take_while1(str.isalpha, "letter")


def stuck(cur):
    cur = Cursor.of(cur)
    return Failure(Reason.UNEXPECTED_TOKEN, cur, "'b'", committed=True)


def test_tag_match():
    r = tag("(")("(x")
    assert r.value == "("
    assert r.rest == "x"


def test_tag_miss_reasons():
    assert tag("(")("x").reason is Reason.UNEXPECTED_TOKEN
    assert tag("(")("").reason is Reason.EMPTY_INPUT


def test_multispace0_always_succeeds():
    assert multispace0("abc").rest == "abc"
    r = multispace0(" \t\r\nabc")
    assert r.value == " \t\r\n"
    assert r.rest == "abc"


def test_multispace0_ignores_other_whitespace():
    assert multispace0("\x0bx").rest == "\x0bx"


def test_alt_first_success_wins():
    p = alt(tag("ab"), tag("a"))
    assert p("abc").value == "ab"
    assert p("ac").value == "a"


def test_alt_merges_expected():
    r = alt(tag("a"), tag("b"))("c")
    assert not r
    assert r.expected == "'a' or 'b'"


def test_alt_does_not_retry_committed_branch():
    p = alt(stuck, tag("b"))
    r = p("b")
    assert not r
    assert r.committed
    assert r.expected == "'b'"


def test_many0_zero_matches():
    r = many0(tag("a"))("bbb")
    assert r.value == []
    assert r.rest == "bbb"


def test_many0_collects_in_order():
    r = many0(preceded(multispace0, letters))("ab cd  ef)")
    assert r.value == ["ab", "cd", "ef"]
    assert r.rest == ")"


def test_many0_stops_on_zero_width_success():
    r = many0(multispace0)("abc")
    assert r.value == []
    assert r.rest == "abc"


def test_many0_propagates_committed_failure():
    p = many0(alt(tag("a"), preceded(tag("!"), stuck)))
    r = p("aa!c")
    assert not r
    assert r.committed
    assert r.offset == 3


def test_map_value():
    r = map_value(letters, str.upper)("abc1")
    assert r.value == "ABC"
    assert r.rest == "1"


def test_terminated_and_preceded():
    assert terminated(letters, tag(";"))("ab;").value == "ab"
    assert not terminated(letters, tag(";"))("ab")
    r = preceded(tag("["), terminated(letters, tag("]")))("[xy]z")
    assert r.value == "xy"
    assert r.rest == "z"


def test_all_consuming():
    assert all_consuming(letters)("abc")
    r = all_consuming(letters)("abc1")
    assert r.reason is Reason.TRAILING_INPUT
    assert r.offset == 3


def test_accepts_cursor_or_str():
    cur = Cursor("xx ab", 3)
    r = letters(cur)
    assert r == Success("ab", Cursor("xx ab", 5))


def test_cursor_line_and_column():
    cur = Cursor("ab\ncd\nef", 7)
    assert (cur.line, cur.column) == (3, 2)
    assert Cursor("abc").column == 1
