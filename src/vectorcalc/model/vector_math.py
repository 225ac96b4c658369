"""
Vector Arithmetic
=================
Pure functions over vectors of arbitrary dimension.

All functions accept any sequence of numbers and return new tuples of
Python floats; inputs are never modified.

Dimension rules:
    - vector_sum, scale, lerp and approx_equal treat the shorter operand as
      if it were padded with zeros.
    - difference subtracts over the shared components and copies the extra
      components of the longer operand unchanged, whichever side it is.
    - dot only covers the components both operands have; the extra
      components of the longer operand are ignored.
    - cross is defined for 3D operands only.
"""
from __future__ import annotations

import math
from typing import Sequence, Tuple, TYPE_CHECKING

import numpy as np

from vectorcalc.model.errors import DimensionError
from vectorcalc.model.parser import Vector

if TYPE_CHECKING:
    import numpy.typing as npt

RAD_TO_DEG = 180.0 / math.pi
DEG_TO_RAD = math.pi / 180.0

CROSS_DIMENSION = 3


def _as_array(v: Sequence[float]) -> npt.NDArray[np.float64]:
    return np.asarray(v, dtype=np.float64).reshape(-1)


def _as_vector(arr: npt.NDArray[np.float64]) -> Vector:
    return tuple(float(x) for x in arr)


def _padded(a: Sequence[float], b: Sequence[float]) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Return both operands zero-padded to the longer length."""
    arr_a, arr_b = _as_array(a), _as_array(b)
    size = max(arr_a.size, arr_b.size)
    padded_a = np.zeros(size, dtype=np.float64)
    padded_b = np.zeros(size, dtype=np.float64)
    padded_a[:arr_a.size] = arr_a
    padded_b[:arr_b.size] = arr_b
    return padded_a, padded_b


def rad_to_deg(radians: float) -> float:
    return radians * RAD_TO_DEG


def deg_to_rad(degrees: float) -> float:
    return degrees * DEG_TO_RAD


def length(v: Sequence[float]) -> float:
    """Euclidean norm. The empty vector has length 0."""
    arr = _as_array(v)
    return math.hypot(*arr.tolist())


def vector_sum(a: Sequence[float], b: Sequence[float]) -> Vector:
    arr_a, arr_b = _padded(a, b)
    return _as_vector(arr_a + arr_b)


def difference(a: Sequence[float], b: Sequence[float]) -> Vector:
    """``a - b``; components only ``b`` has are carried through as they are."""
    arr_a, arr_b = _padded(a, b)
    result = arr_a - arr_b
    n = len(a)
    result[n:] = arr_b[n:]
    return _as_vector(result)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product over the components shared by both vectors."""
    arr_a, arr_b = _as_array(a), _as_array(b)
    n = min(arr_a.size, arr_b.size)
    return float(np.dot(arr_a[:n], arr_b[:n]))


def is_3d(v: Sequence[float]) -> bool:
    return len(v) == CROSS_DIMENSION


def require_3d(a: Sequence[float], b: Sequence[float]) -> None:
    """Raise DimensionError unless both vectors have exactly 3 components."""
    if not (is_3d(a) and is_3d(b)):
        raise DimensionError("cross product requires 3D vectors")


def cross(a: Sequence[float], b: Sequence[float]) -> Vector:
    """
    Cross product of two 3D vectors.

    Raises:
        DimensionError: If either operand does not have exactly 3 components.
    """
    require_3d(a, b)
    ax, ay, az = (float(x) for x in a)
    bx, by, bz = (float(x) for x in b)
    return (
        ay * bz - az * by,
        az * bx - ax * bz,
        ax * by - ay * bx,
    )


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return length(difference(a, b))


def angle(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Angle between two vectors in radians.

    If either vector has zero length the angle is 0.0.

    A cosine that rounds above 1 is wrapped with ``cos % 1`` before the
    arccos, so nearly parallel vectors can report an angle near pi/2.
    A cosine below -1 is clamped to -1.
    """
    len_a, len_b = length(a), length(b)
    if len_a == 0.0 or len_b == 0.0:
        return 0.0

    # Unit vectors first, so large components do not overflow the product
    cos = dot(_as_array(a) / len_a, _as_array(b) / len_b)
    if cos > 1.0:
        cos = cos % 1.0
    elif cos < -1.0:
        cos = -1.0

    return math.acos(cos)


def angle_degrees(a: Sequence[float], b: Sequence[float]) -> float:
    return rad_to_deg(angle(a, b))


def normalized(v: Sequence[float]) -> Vector:
    """Unit vector in the direction of v. The zero vector is returned unchanged."""
    arr = _as_array(v)
    mag = length(arr)
    if mag == 0.0:
        return _as_vector(arr)
    return _as_vector(arr / mag)


def scale(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Component-wise product."""
    arr_a, arr_b = _padded(a, b)
    return _as_vector(arr_a * arr_b)


def lerp(t: float, a: Sequence[float], b: Sequence[float]) -> Vector:
    """Linear interpolation, ``a`` at t=0 and ``b`` at t=1."""
    arr_a, arr_b = _padded(a, b)
    return _as_vector(arr_a + (arr_b - arr_a) * t)


def lerp_clamped(t: float, a: Sequence[float], b: Sequence[float]) -> Vector:
    return lerp(min(max(t, 0.0), 1.0), a, b)


def approx_equal(a: Sequence[float], b: Sequence[float], max_diff: float = 1e-9) -> bool:
    """True if every component differs by at most ``max_diff`` (missing components count as 0)."""
    arr_a, arr_b = _padded(a, b)
    return bool(np.all(np.abs(arr_a - arr_b) <= max_diff))
