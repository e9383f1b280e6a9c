"""Axis-aligned rectangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .vector import Vector


@dataclass
class Rect:
    """An axis-aligned rectangle; ``bottom`` is the low y and ``top`` the high y."""

    left: float
    bottom: float
    right: float
    top: float

    @classmethod
    def from_points(cls, points: Iterable[Vector]) -> "Rect":
        """Smallest rectangle holding all points; infinite bounds when empty."""
        lx = ly = math.inf
        hx = hy = -math.inf
        for p in points:
            hx = max(hx, p.x)
            hy = max(hy, p.y)
            lx = min(lx, p.x)
            ly = min(ly, p.y)
        return cls(left=lx, bottom=ly, right=hx, top=hy)

    def encapsulate(self, point: Vector) -> "Rect":
        """Return the smallest rectangle holding this one and ``point``."""
        return Rect(
            left=min(self.left, point.x),
            bottom=min(self.bottom, point.y),
            right=max(self.right, point.x),
            top=max(self.top, point.y),
        )

    def encapsulate_rect(self, other: "Rect") -> "Rect":
        return self.encapsulate(Vector(other.left, other.bottom)).encapsulate(
            Vector(other.right, other.top)
        )

    def area(self) -> float:
        return (self.right - self.left) * (self.top - self.bottom)

    def overlaps(self, other: "Rect") -> bool:
        return (
            self.bottom < other.top
            and self.top > other.bottom
            and self.left < other.right
            and self.right > other.left
        )

    def overlap_rect(self, other: "Rect") -> "Rect":
        """Intersection of the two rectangles."""
        return Rect(
            left=max(self.left, other.left),
            bottom=max(self.bottom, other.bottom),
            right=min(self.right, other.right),
            top=min(self.top, other.top),
        )

    def width(self) -> float:
        return abs(self.left - self.right)

    def height(self) -> float:
        return abs(self.top - self.bottom)

    def center(self) -> Vector:
        return Vector(self.left, self.bottom).lerp(Vector(self.right, self.top), 0.5)