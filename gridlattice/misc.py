from __future__ import annotations

import math
from enum import Enum

SQRT_3 = math.sqrt(3.0)


class Axes3D(int, Enum):
    X = 0
    Y = 1
    Z = 2


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from ``a`` to ``b`` along ``t``."""

    return a + (b - a) * t


def round_half_away(value: float) -> int:
    """Round to the nearest integer, sending exact halves away from zero.

    ``round`` uses banker's rounding, which breaks the hex rounding tie-break
    for inputs such as ``(2.5, 1.5)``.
    """

    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def div_toward_zero(value: int, divisor: int) -> int:
    """Integer division that truncates toward zero instead of flooring."""

    quotient = abs(value) // abs(divisor)
    if (value < 0) != (divisor < 0):
        return -quotient
    return quotient


__all__ = ["Axes3D", "SQRT_3", "div_toward_zero", "lerp", "round_half_away"]
