"""Numeric helpers shared by scoring, calibration and signal ingest.

The engine never raises on malformed numeric input:
- to_float() coerces None, garbage strings, NaN and infinities to a fallback.
- clamp() bounds a value; callers clamp every output into a declared range.
- round_half_up() rounds .5 away from zero for positives (banker's rounding
  would shift signal adjustments by one point on exact halves).
"""

from __future__ import annotations

import math
from typing import Any


def clamp(value: float, min_value: float, max_value: float) -> float:
    """Bound value into [min_value, max_value]."""
    return max(min_value, min(max_value, value))


def to_float(value: Any, default: float = 0.0) -> float:
    """Coerce value to a finite float, returning default when that fails.

    Booleans are treated as numbers (True -> 1.0).
    """
    if value is None:
        return default
    try:
        f = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(f):
        return default
    return f


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward +inf."""
    return int(math.floor(value + 0.5))


def sigmoid(z: float) -> float:
    """Logistic function 1 / (1 + e^-z)."""
    # math.exp overflows past ~709
    if -z > 700.0:
        return 0.0
    return 1.0 / (1.0 + math.exp(-z))


__all__ = ["clamp", "to_float", "round_half_up", "sigmoid"]
