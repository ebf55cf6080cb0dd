from dataclasses import dataclass
from typing import Any, Generic, Iterable, Optional, TypeVar, Union

from .errors import Reason

DEFAULT_MAX_NAT = 2**32 - 1
DEFAULT_MAX_DEPTH = 4096

T = TypeVar("T")


# --- AST ---

@dataclass(frozen=True)
class Nat:
    value: int


@dataclass(frozen=True)
class Atom:
    name: str


Leaf = Union[Nat, Atom]


@dataclass(frozen=True)
class Scalar:
    value: Leaf


@dataclass(frozen=True)
class Sexpr:
    children: tuple = ()

    def __init__(self, children: Iterable["Element"] = ()):
        object.__setattr__(self, "children", tuple(children))

    def __len__(self) -> int:
        return len(self.children)

    # A node is always truthy, even when empty.
    def __bool__(self) -> bool:
        return True

    def __iter__(self):
        return iter(self.children)

    def __getitem__(self, idx):
        return self.children[idx]


Element = Union[Scalar, Sexpr]


# --- Input view ---

@dataclass(frozen=True)
class Cursor:
    """Immutable position in the original input text."""

    text: str
    offset: int = 0

    @classmethod
    def of(cls, i: "str | Cursor") -> "Cursor":
        return i if isinstance(i, Cursor) else cls(i)

    @property
    def rest(self) -> str:
        return self.text[self.offset:]

    @property
    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self) -> str:
        return self.text[self.offset] if self.offset < len(self.text) else ""

    def advance(self, n: int) -> "Cursor":
        return Cursor(self.text, self.offset + n)

    @property
    def line(self) -> int:
        return self.text.count("\n", 0, self.offset) + 1

    @property
    def column(self) -> int:
        return self.offset - (self.text.rfind("\n", 0, self.offset) + 1) + 1


# --- Results ---

@dataclass(frozen=True)
class Success(Generic[T]):
    value: T
    remainder: Cursor

    @property
    def rest(self) -> str:
        return self.remainder.rest

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    reason: Reason
    cursor: Cursor
    expected: str = ""
    # A committed failure is not retried by alt() nor swallowed by many0().
    committed: bool = False

    @property
    def offset(self) -> int:
        return self.cursor.offset

    def __bool__(self) -> bool:
        return False


Result = Union[Success[Any], Failure]


# --- Configuration ---

@dataclass(frozen=True)
class ParserConfig:
    max_nat: int = DEFAULT_MAX_NAT
    max_depth: int = DEFAULT_MAX_DEPTH

    @classmethod
    def coerce(cls, config: Optional[Any]) -> "ParserConfig":
        """Accept a ParserConfig, a dict of overrides, or None."""
        if config is None:
            return DEFAULT_CONFIG
        if isinstance(config, ParserConfig):
            return config
        if isinstance(config, dict):
            known = {k: config[k] for k in ("max_nat", "max_depth") if config.get(k) is not None}
            return cls(**known)
        raise TypeError(f"config must be a ParserConfig or dict, not {type(config).__name__}")


DEFAULT_CONFIG = ParserConfig()
