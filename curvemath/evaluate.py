"""Common interface for curve pieces that can be evaluated along a parameter."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Callable

from .vector import Vector


class Evaluable(ABC):
    """Something that maps a parameter ``t`` in 0..1 to a coordinate.

    The coordinate is either a :class:`Vector` or a plain float. Subclasses
    supply evaluation, a derivative, bounds and point-wise transformation;
    translation, scaling and rotation are built on top of the latter.
    """

    @abstractmethod
    def at(self, t: float) -> Any:
        """Coordinate at parameter ``t``."""

    @abstractmethod
    def tangent_at(self, t: float) -> Any:
        """Derivative at parameter ``t``."""

    @abstractmethod
    def bounds(self):
        """Axis-aligned rectangle containing every point of the object."""

    @abstractmethod
    def apply_transform(self, transform: Callable[[Any], Any]) -> "Evaluable":
        """Return a copy whose defining coordinates have been passed through ``transform``."""

    @abstractmethod
    def start_point(self) -> Any:
        """Coordinate at the start."""

    @abstractmethod
    def end_point(self) -> Any:
        """Coordinate at the end."""

    def translate(self, offset: Any) -> "Evaluable":
        """Return a copy moved by ``offset``."""
        return self.apply_transform(lambda v: v + offset)

    def scale(self, factor: Any) -> "Evaluable":
        """Return a copy with every coordinate multiplied by ``factor``."""
        return self.apply_transform(lambda v: v * factor)

    def rotate(self, angle: float) -> "Evaluable":
        """Return a copy rotated about the origin by ``angle`` radians."""
        c = math.cos(angle)
        s = math.sin(angle)
        return self.apply_transform(lambda v: Vector(v.x * c - v.y * s, v.x * s + v.y * c))