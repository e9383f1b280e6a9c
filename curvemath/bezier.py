"""Cubic Bézier curve segments."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .evaluate import Evaluable
from .glif import Point, WhichHandle
from .rect import Rect
from .vector import Vector


def _de_casteljau3(t: float, w1: Vector, w2: Vector, w3: Vector) -> Vector:
    return w1.lerp(w2, t).lerp(w2.lerp(w3, t), t)


def _de_casteljau4(t: float, w1: Vector, w2: Vector, w3: Vector, w4: Vector) -> Vector:
    a = w1.lerp(w2, t)
    b = w2.lerp(w3, t)
    c = w3.lerp(w4, t)
    return a.lerp(b, t).lerp(b.lerp(c, t), t)


@dataclass
class Bezier(Evaluable):
    """A cubic Bézier from ``w1`` to ``w4`` with control points ``w2`` and ``w3``."""

    w1: Vector
    w2: Vector
    w3: Vector
    w4: Vector

    @classmethod
    def from_points(cls, p0: Vector, p1: Vector, p2: Vector, p3: Vector) -> "Bezier":
        return cls(p0, p1, p2, p3)

    @classmethod
    def from_glif_points(cls, point: Point, next_point: Point) -> "Bezier":
        """Segment from ``point`` to ``next_point`` using their a and b handles."""
        return cls(
            Vector.from_point(point),
            Vector.from_handle(point, WhichHandle.A),
            Vector.from_handle(next_point, WhichHandle.B),
            Vector.from_point(next_point),
        )

    def control_points(self) -> Tuple[Vector, Vector, Vector, Vector]:
        return (self.w1, self.w2, self.w3, self.w4)

    def reverse(self) -> "Bezier":
        """The same curve traversed from end to start."""
        return Bezier(*(Vector(p.x, p.y) for p in reversed(self.control_points())))

    def at(self, t: float) -> Vector:
        return _de_casteljau4(t, self.w1, self.w2, self.w3, self.w4)

    def tangent_at(self, t: float) -> Vector:
        # Avoid the degenerate tangent at the exact ends when handles are colocated.
        if t == 0.0:
            t = sys.float_info.epsilon
        if t == 1.0:
            t = 1.0 - sys.float_info.epsilon
        d1 = (self.w2 - self.w1) * 3.0
        d2 = (self.w3 - self.w2) * 3.0
        d3 = (self.w4 - self.w3) * 3.0
        return _de_casteljau3(t, d1, d2, d3)

    def bounds(self) -> Rect:
        """Bounding box of the control polygon."""
        return Rect.from_points(self.control_points())

    def apply_transform(self, transform: Callable[[Vector], Vector]) -> "Bezier":
        return Bezier(*(transform(p) for p in self.control_points()))

    def start_point(self) -> Vector:
        return self.w1

    def end_point(self) -> Vector:
        return self.w4

    def subdivide(self, t: float) -> Optional[Tuple["Bezier", "Bezier"]]:
        """Split at ``t`` into the parts before and after; ``None`` at t=0 or t=1."""
        if t == 0.0 or t == 1.0:
            return None
        p0, p1, p2, p3 = self.control_points()
        q0 = p0.lerp(p1, t)
        q1 = p1.lerp(p2, t)
        q2 = p2.lerp(p3, t)
        r0 = q0.lerp(q1, t)
        r1 = q1.lerp(q2, t)
        s0 = r0.lerp(r1, t)
        return Bezier(p0, q0, r0, s0), Bezier(s0, r1, q2, p3)