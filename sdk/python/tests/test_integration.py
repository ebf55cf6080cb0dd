import runpy
from pathlib import Path

import pytest
from sexpr import parse, parse_document, to_native, unparse
from sexpr.errors import ParseError, Reason

EXAMPLES_DIR = Path(__file__).resolve().parent.parent.parent.parent / "examples"


def read_document(name):
    path = EXAMPLES_DIR / "documents" / name
    if not path.exists():
        pytest.skip("example files not found")
    return path.read_text()


@pytest.fixture
def service_ast():
    return parse(read_document("service.sexp"))


def test_nested_document():
    assert to_native(parse(read_document("nested.sexp"))) == ["a", ["b", "c"], 12]


def test_service_document(service_ast):
    native = to_native(service_ast)
    assert native[:2] == ["service", "web"]
    assert ["listen", 8080] in native
    routes = next(x for x in native if isinstance(x, list) and x[0] == "routes")
    assert routes[1:] == [["get", "index"], ["post", "submit"], ["get", "health"]]


def test_service_document_canonical_form(service_ast):
    assert unparse(service_ast).startswith("(service web (listen 8080) (workers 4) (routes (get index)")
    assert parse(unparse(service_ast)) == service_ast


def test_unmatched_document():
    src = read_document("unmatched.sexp")
    r = parse_document(src)
    assert r.reason is Reason.UNMATCHED_OPEN_PAREN
    with pytest.raises(ParseError) as exc:
        parse(src)
    assert (exc.value.line, exc.value.column) == (3, 3)


def test_e2e_walkthrough(capsys):
    script = EXAMPLES_DIR / "e2e" / "e2e.py"
    if not script.exists():
        pytest.skip("example files not found")
    runpy.run_path(str(script), run_name="__main__")
    out = capsys.readouterr().out
    assert "UNMATCHED_OPEN_PAREN" in out
    assert "TRAILING_INPUT" in out
    assert "NUMERIC_OVERFLOW" in out
    assert "NESTING_TOO_DEEP" in out
    assert "All checks passed" in out
