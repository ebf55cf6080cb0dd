"""Top-level parse API for complete S-expression documents."""

import logging
from typing import Any, Optional

from .combinators import all_consuming, multispace0, terminated
from .errors import ParseError
from .parser import parse_element
from .types import Cursor, Element, ParserConfig, Result

log = logging.getLogger(__name__)


def parse_document(src: str, config: Optional[Any] = None) -> Result:
    """Parse exactly one element spanning the whole of `src`.

    Surrounding whitespace is allowed; any other leftover text is a
    TRAILING_INPUT failure.

    Args:
        src: S-expression source text
        config: ParserConfig, a dict with max_nat/max_depth keys, or None

    Returns:
        Success(element, remainder) or Failure(reason, cursor, expected)
    """
    cfg = ParserConfig.coerce(config)
    log.debug("parsing %d chars (max_depth=%d, max_nat=%d)", len(src), cfg.max_depth, cfg.max_nat)
    root = all_consuming(terminated(lambda c: parse_element(c, cfg), multispace0))
    result = root(Cursor(src))
    if not result:
        cur = result.cursor
        log.info("rejected document: %s at line %d, column %d", result.reason.value, cur.line, cur.column)
    return result


def parse(src: str, config: Optional[Any] = None) -> Element:
    """Parse an S-expression string into an AST, raising ParseError on failure."""
    result = parse_document(src, config)
    if not result:
        raise ParseError.from_failure(result)
    return result.value
