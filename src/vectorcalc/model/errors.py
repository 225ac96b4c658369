"""
Exception hierarchy for the calculator core.
"""


class VectorCalcError(Exception):
    """Base class for all calculator errors."""


class ParseError(VectorCalcError, ValueError):
    """Raised when a text cannot be read as a vector."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"Cannot parse {text!r} as a vector: {reason}")
        self.text = text
        self.reason = reason


class DimensionError(VectorCalcError, ValueError):
    """Raised when an operation is called on vectors of the wrong dimension."""
