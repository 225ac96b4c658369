"""
Vector calculator.

The pure arithmetic lives in :mod:`vectorcalc.model`; the Qt window and the
console front end are thin layers over it.
"""
from vectorcalc.model.errors import DimensionError, ParseError, VectorCalcError
from vectorcalc.model.parser import ParseResult, Vector, parse_vector, vector_to_string
from vectorcalc.model.vector_math import (
    angle,
    angle_degrees,
    approx_equal,
    cross,
    difference,
    distance,
    dot,
    length,
    lerp,
    lerp_clamped,
    normalized,
    scale,
    vector_sum,
)

__version__ = "1.0.0"

__all__ = [
    "DimensionError",
    "ParseError",
    "ParseResult",
    "Vector",
    "VectorCalcError",
    "angle",
    "angle_degrees",
    "approx_equal",
    "cross",
    "difference",
    "distance",
    "dot",
    "length",
    "lerp",
    "lerp_clamped",
    "normalized",
    "parse_vector",
    "scale",
    "vector_sum",
    "vector_to_string",
]
