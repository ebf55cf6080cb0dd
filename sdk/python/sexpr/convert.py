"""Tree walkers over parsed ASTs: native Python values and canonical text."""

from typing import Any

from .errors import DepthExceeded
from .parser import recursion_budget
from .types import DEFAULT_MAX_DEPTH, Atom, Element, Nat, Scalar, Sexpr


class _WalkState:
    __slots__ = ("depth", "max_depth")

    def __init__(self, max_depth: int):
        self.depth = 0
        self.max_depth = max_depth

    def enter(self) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            self.depth -= 1
            raise DepthExceeded("max nesting depth exceeded")


def to_native(node: Element, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Convert an AST into plain Python values.

    Nat -> int, Atom -> str, Sexpr -> list.
    """
    with recursion_budget(max_depth):
        return _native(node, _WalkState(max_depth))


def _native(node: Element, st: _WalkState) -> Any:
    if isinstance(node, Scalar):
        return _leaf(node)
    if not isinstance(node, Sexpr):
        raise TypeError(f"not an AST node: {node!r}")
    st.enter()
    try:
        out = []
        for child in node.children:
            out.append(_native(child, st))
        return out
    finally:
        st.depth -= 1


def _leaf(node: Scalar) -> Any:
    v = node.value
    if isinstance(v, Nat):
        return v.value
    if isinstance(v, Atom):
        return v.name
    raise TypeError(f"not a scalar value: {v!r}")


def unparse(node: Element, max_depth: int = DEFAULT_MAX_DEPTH) -> str:
    """Render an AST as canonical source text, one space between children."""
    with recursion_budget(max_depth):
        return _text(node, _WalkState(max_depth))


def _text(node: Element, st: _WalkState) -> str:
    if isinstance(node, Scalar):
        return str(_leaf(node))
    if not isinstance(node, Sexpr):
        raise TypeError(f"not an AST node: {node!r}")
    st.enter()
    try:
        parts = []
        for child in node.children:
            parts.append(_text(child, st))
        return "(" + " ".join(parts) + ")"
    finally:
        st.depth -= 1
