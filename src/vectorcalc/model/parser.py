"""
Vector Text Format
==================
Conversion between user-typed text and vectors.

Accepted input looks like ``(x; y; z; ...)``. The parser is lenient:

1. Whitespace anywhere in the text is ignored.
2. Parentheses are optional.
3. Both ``.`` and ``,`` are accepted as the decimal separator.

Exports:
    Vector: Type alias for an immutable vector (tuple of floats).
    ParseResult: Outcome of a parse (vector or error message, never both).
    parse_vector: Text -> ParseResult.
    vector_to_string: Vector -> ``(x; y; z)`` text.
"""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from vectorcalc.model.errors import ParseError

logger = logging.getLogger(__name__)

Vector = Tuple[float, ...]

COMPONENT_SEPARATOR = ";"
DISPLAY_SEPARATOR = "; "

_WHITESPACE_RE = re.compile(r"\s+")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


@dataclass(frozen=True)
class ParseResult:
    """
    Result of reading a vector from text.

    Exactly one of ``vector`` and ``error`` is set.
    """
    vector: Optional[Vector] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self, text: str = "") -> Vector:
        """Return the vector or raise ParseError."""
        if self.error is not None or self.vector is None:
            raise ParseError(text, self.error or "no vector")
        return self.vector


def _normalize(text: str) -> str:
    text = _WHITESPACE_RE.sub("", text)
    text = text.replace("(", "").replace(")", "")
    return text.replace(",", ".")


def parse_vector(text: str, max_components: Optional[int] = None) -> ParseResult:
    """
    Parse a vector written as ``(x; y; z; ...)``.

    Args:
        text: Raw user input.
        max_components: Optional upper bound on the number of components.

    Returns:
        A ParseResult. Text that is empty after stripping whitespace and
        parentheses yields the empty vector.
    """
    cleaned = _normalize(text)
    if not cleaned:
        return ParseResult(vector=())

    components = []
    for token in cleaned.split(COMPONENT_SEPARATOR):
        if not _NUMBER_RE.fullmatch(token):
            reason = "empty component" if not token else f"{token!r} is not a number"
            logger.debug("Parse failed for %r: %s", text, reason)
            return ParseResult(error=reason)
        value = float(token)
        if not math.isfinite(value):
            reason = f"{token!r} is out of range"
            logger.debug("Parse failed for %r: %s", text, reason)
            return ParseResult(error=reason)
        components.append(value)

    if max_components is not None and len(components) > max_components:
        reason = f"more than {max_components} components"
        logger.debug("Parse failed for %r: %s", text, reason)
        return ParseResult(error=reason)

    return ParseResult(vector=tuple(components))


def number_to_string(value: float) -> str:
    return repr(float(value))


def vector_to_string(v: Sequence[float]) -> str:
    """Format a vector as ``(x; y; z)``. The output parses back to the same values."""
    return "(" + DISPLAY_SEPARATOR.join(number_to_string(x) for x in v) + ")"
