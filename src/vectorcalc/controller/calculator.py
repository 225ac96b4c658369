"""
Calculator Controller
=====================
Turns the two text inputs of the calculator into a display line.

Why is this file needed?
------------------------
Both front ends (the Qt window and the console) need the same behaviour:
parse A and B, validate them, run one operation and format the answer or a
user-facing error. Keeping it here means the views only collect text and
show the returned line.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Callable, Dict, Optional, Union

from vectorcalc import config
from vectorcalc.model import vector_math
from vectorcalc.model.errors import DimensionError
from vectorcalc.model.parser import Vector, number_to_string, parse_vector, vector_to_string

logger = logging.getLogger(__name__)

FORMAT_ERROR_MESSAGE = "Invalid vectors! Make sure they are in the format (x; y; z; ...)"
CROSS_DIMENSION_ERROR_MESSAGE = "Invalid vectors! The cross product only exists for 3D vectors."


class Operation(StrEnum):
    """Operations offered by the calculator."""
    LENGTH_A = "|A|"
    LENGTH_B = "|B|"
    SUM = "A + B"
    DIFFERENCE = "A - B"
    DOT = "A . B"
    CROSS = "A X B"
    DISTANCE = "Distance"
    ANGLE = "Angle"
    NORMALIZE_A = "A / |A|"
    NORMALIZE_B = "B / |B|"
    SCALE = "A * B"


@dataclass(frozen=True)
class CalculationResult:
    text: str
    is_error: bool = False
    value: Optional[Union[float, Vector]] = None


def _scalar(label: str, value: float) -> CalculationResult:
    return CalculationResult(text=f"{label} = {number_to_string(value)}", value=value)


def _vector(label: str, value: Vector) -> CalculationResult:
    return CalculationResult(text=f"{label} = {vector_to_string(value)}", value=value)


def _angle(a: Vector, b: Vector) -> CalculationResult:
    rad = vector_math.angle(a, b)
    deg = vector_math.rad_to_deg(rad)
    return CalculationResult(
        text=f"Angle between A and B = {number_to_string(rad)} rad or {number_to_string(deg)}°",
        value=rad,
    )


_HANDLERS: Dict[Operation, Callable[[Vector, Vector], CalculationResult]] = {
    Operation.LENGTH_A: lambda a, b: _scalar("|A|", vector_math.length(a)),
    Operation.LENGTH_B: lambda a, b: _scalar("|B|", vector_math.length(b)),
    Operation.SUM: lambda a, b: _vector("A + B", vector_math.vector_sum(a, b)),
    Operation.DIFFERENCE: lambda a, b: _vector("A - B", vector_math.difference(a, b)),
    Operation.DOT: lambda a, b: _scalar("A . B", vector_math.dot(a, b)),
    Operation.CROSS: lambda a, b: _vector("A X B", vector_math.cross(a, b)),
    Operation.DISTANCE: lambda a, b: _scalar("Distance between A and B", vector_math.distance(a, b)),
    Operation.ANGLE: _angle,
    Operation.NORMALIZE_A: lambda a, b: _vector("A / |A|", vector_math.normalized(a)),
    Operation.NORMALIZE_B: lambda a, b: _vector("B / |B|", vector_math.normalized(b)),
    Operation.SCALE: lambda a, b: _vector("A * B", vector_math.scale(a, b)),
}


def evaluate(
    operation: Operation,
    text_a: str,
    text_b: str,
    *,
    max_components: Optional[int] = config.MAX_COMPONENTS,
) -> CalculationResult:
    """
    Run one operation on two vectors given as text.

    Both inputs are always validated, even for operations that only use one
    of them. Errors are returned as results with ``is_error`` set; nothing
    is raised.
    """
    parsed_a = parse_vector(text_a, max_components)
    parsed_b = parse_vector(text_b, max_components)
    if not (parsed_a.ok and parsed_b.ok):
        logger.info("Rejected input for %s: A=%r B=%r", operation.name, text_a, text_b)
        return CalculationResult(text=FORMAT_ERROR_MESSAGE, is_error=True)

    a, b = parsed_a.unwrap(text_a), parsed_b.unwrap(text_b)

    if operation is Operation.CROSS:
        try:
            vector_math.require_3d(a, b)
        except DimensionError as e:
            logger.info("Cross product rejected: %s", e)
            return CalculationResult(text=CROSS_DIMENSION_ERROR_MESSAGE, is_error=True)

    result = _HANDLERS[operation](a, b)
    logger.debug("%s -> %s", operation.name, result.text)
    return result
