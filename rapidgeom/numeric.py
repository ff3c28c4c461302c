"""
Numeric policy shared by every figure.

All coordinates are float64. Helpers here replace division, comparison and
angle folding wherever a degenerate input could otherwise produce an infinite
or NaN value: such results are reported as ``None`` instead.
"""

import math
from typing import Optional

import numpy as np

from rapidgeom.constants import PRECISION, TWO_PI


def is_finite(value: Optional[float]) -> bool:
    return value is not None and bool(np.isfinite(value))


def safe_div(numerator: float, denominator: float) -> Optional[float]:
    """
    Divide two floats, returning None when the quotient is not finite.

    Args:
        numerator: Dividend
        denominator: Divisor

    Returns:
        The quotient, or None for a zero divisor, an overflow or NaN operands.
    """
    if denominator == 0:
        return None
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        quotient = np.float64(numerator) / np.float64(denominator)
    if not np.isfinite(quotient):
        return None
    return float(quotient)


def is_close(a: float, b: float, tolerance: float = PRECISION) -> bool:
    return math.isclose(a, b, rel_tol=tolerance, abs_tol=tolerance)


def is_zero(value: float, scale: float = 1.0, tolerance: float = PRECISION) -> bool:
    """True if |value| is negligible next to max(1, |scale|)."""
    return abs(value) <= tolerance * max(1.0, abs(scale))


def normalize_angle(theta: float) -> float:
    """Fold an angle in radians into [0, 2π)."""
    folded = math.fmod(theta, TWO_PI)
    if folded < 0:
        folded += TWO_PI
    # fmod of a tiny negative value can round up to exactly 2π
    if folded >= TWO_PI:
        folded = 0.0
    return folded


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def radians_to_degrees(radians: float) -> float:
    return radians * 180 / math.pi


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
