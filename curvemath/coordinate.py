"""Distance constants and helpers shared by scalar and vector coordinates."""

from __future__ import annotations

from numbers import Real
from typing import Any

SMALL_DISTANCE = 0.001
"""Points closer than this are considered to be the same point."""

CLOSE_DISTANCE = 0.01
"""Precision we may round to, or below which points may be dropped."""

SMALL_T_DISTANCE = 0.000001
"""Difference between curve parameters that are considered the same."""


def magnitude(value: Any) -> float:
    """Return the length of a coordinate (absolute value for scalars)."""
    if isinstance(value, Real):
        return abs(float(value))
    return value.magnitude()


def distance(a: Any, b: Any) -> float:
    """Return the distance between two coordinates of the same kind."""
    if isinstance(a, Real) and isinstance(b, Real):
        return abs(float(a) - float(b))
    return a.distance(b)


def lerp(a: Any, b: Any, t: float) -> Any:
    """Linearly interpolate from ``a`` (t=0) to ``b`` (t=1)."""
    if isinstance(a, Real) and isinstance(b, Real):
        return (1.0 - t) * a + t * b
    return a.lerp(b, t)