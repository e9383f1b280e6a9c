"""Two-dimensional vector used for points, handles and directions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator, Tuple

from .glif import Handle, Point, PointType, WhichHandle


@dataclass
class Vector:
    """A 2D vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_components(cls, x: float, y: float) -> "Vector":
        return cls(float(x), float(y))

    @classmethod
    def origin(cls) -> "Vector":
        return cls(0.0, 0.0)

    def is_near(self, other: "Vector", eps: float) -> bool:
        dx = self.x - other.x
        dy = self.y - other.y
        return -eps <= dx <= eps and -eps <= dy <= eps

    def magnitude(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2)

    def distance(self, other: "Vector") -> float:
        return math.sqrt((other.x - self.x) ** 2 + (other.y - self.y) ** 2)

    def normalize(self) -> "Vector":
        """Return a unit vector in the same direction (NaN components for zero)."""
        length = self.magnitude()
        if length == 0:
            return Vector(math.nan, math.nan)
        return Vector(self.x / length, self.y / length)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def lerp(self, other: "Vector", t: float) -> "Vector":
        return Vector((1.0 - t) * self.x + t * other.x, (1.0 - t) * self.y + t * other.y)

    def angle(self, other: "Vector") -> float:
        """Signed angle from this vector's direction to ``other``'s."""
        return math.atan2(other.y, other.x) - math.atan2(self.y, self.x)

    def rotate(self, pivot: "Vector", angle: float) -> "Vector":
        s = math.sin(angle)
        c = math.cos(angle)
        moved = self - pivot
        turned = Vector(moved.x * c - moved.y * s, moved.x * s + moved.y * c)
        return turned + pivot

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_point(cls, point: Point) -> "Vector":
        return cls(float(point.x), float(point.y))

    def to_point(self, handle_a: Handle, handle_b: Handle, ptype: PointType) -> Point:
        return Point(self.x, self.y, a=handle_a, b=handle_b, ptype=ptype)

    @classmethod
    def from_handle(cls, point: Point, which: WhichHandle) -> "Vector":
        """Position of a point's handle, or of the point when colocated."""
        x, y = point.handle_or_position(which)
        return cls(float(x), float(y))

    def to_handle(self) -> Handle:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("can only index Vector by 0 or 1")

    def __setitem__(self, index: int, value: float) -> None:
        if index == 0:
            self.x = value
        elif index == 1:
            self.y = value
        else:
            raise IndexError("can only index Vector by 0 or 1")

    def __add__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector") -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x * other.x, self.y * other.y)
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vector(self.x * other, self.y * other)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Vector):
            return Vector(self.x / other.x, self.y / other.y)
        if isinstance(other, Real):
            return Vector(self.x / other, self.y / other)
        return NotImplemented

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)