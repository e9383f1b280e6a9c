"""Scalar interpolation between a start and a finish value."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from .evaluate import Evaluable
from .rect import Rect
from .vector import Vector

_Curve = Callable[[float, float, float], float]


class InterpolationType(Enum):
    """How a value changes between two handles."""

    NULL = "null"
    LINEAR = "linear"


def _hold(start: float, finish: float, t: float) -> float:
    return start


def _linear(start: float, finish: float, t: float) -> float:
    return (1.0 - t) * start + t * finish


def _exponential(start: float, finish: float, t: float) -> float:
    return start + (finish - start) * t * t


class Interpolator(Evaluable):
    """Evaluates to a float between ``start`` and ``finish`` following a fixed curve."""

    def __init__(self, start: float, finish: float, curve: _Curve = _linear) -> None:
        self.start = start
        self.finish = finish
        self._curve = curve

    def __repr__(self) -> str:
        return f"Interpolator(start={self.start!r}, finish={self.finish!r}, curve={self._curve.__name__})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interpolator):
            return NotImplemented
        return (self.start, self.finish, self._curve) == (other.start, other.finish, other._curve)

    @classmethod
    def none(cls, start: float, finish: float) -> "Interpolator":
        """Always yields ``start``."""
        return cls(start, finish, _hold)

    @classmethod
    def linear(cls, start: float, finish: float) -> "Interpolator":
        return cls(start, finish, _linear)

    @classmethod
    def exponential(cls, start: float, finish: float) -> "Interpolator":
        """Quadratic ease-in from ``start`` to ``finish``."""
        return cls(start, finish, _exponential)

    @classmethod
    def of_kind(cls, start: float, finish: float, kind: InterpolationType) -> "Interpolator":
        if kind is InterpolationType.NULL:
            return cls.none(start, finish)
        if kind is InterpolationType.LINEAR:
            return cls.linear(start, finish)
        raise ValueError(f"unknown interpolation type: {kind!r}")

    def at(self, t: float) -> float:
        return self._curve(self.start, self.finish, t)

    def tangent_at(self, t: float) -> float:
        return 0.0

    def bounds(self) -> Rect:
        return Rect.from_points([Vector(self.start, self.finish)])

    def apply_transform(self, transform: Callable[[float], float]) -> "Interpolator":
        return Interpolator(transform(self.start), transform(self.finish), self._curve)

    def start_point(self) -> float:
        return self.start

    def end_point(self) -> float:
        return self.finish