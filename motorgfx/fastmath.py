"""Scalar math helpers used by the vector and matrix types."""

from __future__ import annotations

import math

F_PI = math.pi
F_DEG2RAD = F_PI / 180.0
F_RAD2DEG = 180.0 / F_PI
F_EPSILON = 0.00001

_UINT32_MASK = 0xFFFFFFFF


def to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * F_DEG2RAD


def to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * F_RAD2DEG


def tan(value: float) -> float:
    """Tangent computed as sine over cosine."""
    return math.sin(value) / math.cos(value)


def clamp(value, low, high):
    """Limit ``value`` to the closed range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def lerp(a: float, b: float, p: float) -> float:
    """Linear interpolation between ``a`` and ``b`` by factor ``p``."""
    return a * (1.0 - p) + b * p


def inv_sqrt(value: float) -> float:
    """Return ``1 / sqrt(value)``.

    Raises ValueError for negative input and ZeroDivisionError for zero.
    """
    return 1.0 / math.sqrt(value)


def floor_int(value: float) -> int:
    """Largest integer not greater than ``value``."""
    truncated = int(value)
    if value < 0 and value != truncated:
        return truncated - 1
    return truncated


def ceil_int(value: float) -> int:
    """Integer ceiling computed as ``floor(value + 1)``.

    Whole numbers therefore map to the next integer up.
    """
    return floor_int(value + 1.0)


def round_int(value: float) -> int:
    """Round half up to an integer."""
    return floor_int(value + 0.5)


def safe_acos(value: float) -> float:
    """Arc cosine that saturates outside ``(-1, 1)`` instead of failing."""
    if -1.0 < value:
        if value < 1.0:
            return math.acos(value)
        return 0.0
    return F_PI


def count_bits_set(value: int) -> int:
    """Number of set bits in the 32-bit unsigned form of ``value``."""
    return bin(value & _UINT32_MASK).count("1")