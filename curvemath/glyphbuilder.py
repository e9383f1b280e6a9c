"""Incremental construction of outlines from Bézier segments, lines, joins and caps."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from .bezier import Bezier
from .coordinate import SMALL_DISTANCE
from .glif import Point
from .piecewise import Piecewise
from .vector import Vector

Line = Tuple[Vector, Vector]

_RIGHT_ANGLE = math.radians(90.0)


def normalize_angle(angle: float) -> float:
    """Bring ``angle`` (radians) into the range 0..2π."""
    while angle < 0.0:
        angle += math.tau
    while angle > math.tau:
        angle -= math.tau
    return angle


def line_intersects_line(line1: Line, line2: Line) -> Optional[Vector]:
    """Point where two line segments cross, or ``None`` if they don't."""
    (p1, p2), (p3, p4) = line1, line2
    factor = (p4.x - p3.x) * (p1.y - p2.y) - (p1.x - p2.x) * (p4.y - p3.y)
    if factor == 0.0:
        return None
    ta = ((p3.y - p4.y) * (p1.x - p3.x) + (p4.x - p3.x) * (p1.y - p3.y)) / factor
    tb = ((p1.y - p2.y) * (p1.x - p3.x) + (p2.x - p1.x) * (p1.y - p3.y)) / factor
    if 0.0 <= ta <= 1.0 and 0.0 <= tb <= 1.0:
        return p1 * (1.0 - ta) + p2 * ta
    return None


def _right_of(tangent: Vector) -> Vector:
    return Vector(tangent.y, -tangent.x).normalize()


def _handle_factor(n: float) -> float:
    return (4.0 / 3.0) * math.tan(math.pi / (2.0 * n))


@dataclass
class GlyphBuilder:
    """A growing list of Bézier segments with helpers for joins and caps."""

    beziers: List[Bezier] = field(default_factory=list)

    def _last_end(self) -> Vector:
        if not self.beziers:
            raise ValueError("the builder has no segment to continue from")
        end = self.beziers[-1].end_point()
        return Vector(end.x, end.y)

    def append(self, other: "GlyphBuilder") -> None:
        """Add every segment of ``other``."""
        self.append_beziers(other.beziers)

    def append_beziers(self, beziers: Iterable[Bezier]) -> None:
        for bezier in beziers:
            self.bezier_to(bezier)

    def bezier_to(self, bezier: Bezier) -> None:
        self.beziers.append(bezier)

    def line_to(self, to: Vector) -> None:
        """Add a straight segment from the current end to ``to``."""
        start = self._last_end()
        self.bezier_to(Bezier(start, Vector(start.x, start.y), Vector(to.x, to.y), Vector(to.x, to.y)))

    def bevel_to(self, to: Vector, tangent1: Vector, tangent2: Vector) -> None:
        self.line_to(to)

    def miter_to(self, to: Vector, tangent1: Vector, tangent2: Vector) -> None:
        """Extend both tangents to their meeting point; fall back to a bevel."""
        start = self._last_end()
        ray1 = (start, start + tangent1 * 200.0)
        ray2 = (to, to + (-tangent2) * 200.0)
        intersection = line_intersects_line(ray1, ray2)
        if intersection is not None and start.distance(intersection) < start.distance(to):
            self.line_to(intersection)
        self.line_to(to)

    def _arc_center(self, start: Vector, to: Vector, tangent1: Vector, tangent2: Vector,
                    reject_same_direction: bool) -> Vector:
        ray1 = (start, start + _right_of(tangent1) * 2048.0)
        ray2 = (to, to + _right_of(tangent2) * 2048.0)
        intersection = line_intersects_line(ray1, ray2)
        if intersection is None or tangent1.distance(-tangent2) < SMALL_DISTANCE:
            return start.lerp(to, 0.5)
        if reject_same_direction and tangent1.distance(tangent2) < SMALL_DISTANCE:
            return start.lerp(to, 0.5)
        return intersection

    def arc_to(self, to: Vector, tangent1: Vector, tangent2: Vector) -> None:
        """Join to ``to`` with a rounded arc split into two segments."""
        start = self._last_end()
        angle = math.acos(min(1.0, max(-1.0, tangent1.dot(tangent2))))
        n = abs(math.tau / angle) if angle else math.inf

        center = self._arc_center(start, to, tangent1, tangent2, reject_same_direction=True)
        radius = start.distance(center)
        along = radius * _handle_factor(n)

        arc = Bezier(start, start + tangent1 * along, to + (-tangent2) * along, Vector(to.x, to.y))
        parts = arc.subdivide(0.5)
        self.append_beziers(parts if parts is not None else (arc,))

    def circle_arc_to(self, to: Vector, tangent1: Vector, tangent2: Vector) -> None:
        """Join to ``to`` along a circle built from quarter-circle segments."""
        start = self._last_end()
        center = self._arc_center(start, to, tangent1, tangent2, reject_same_direction=False)
        radius = start.distance(center)

        right1 = _right_of(tangent1)
        right2 = _right_of(tangent2)
        starting_angle = normalize_angle(math.atan2(right1.y, right1.x))
        ending_angle = normalize_angle(math.atan2(right2.y, right2.x))

        repetitions = math.floor(abs(starting_angle - ending_angle) / _RIGHT_ANGLE)
        quarter = _handle_factor(4.0)

        for k in range(int(repetitions)):
            cur_angle = starting_angle + _RIGHT_ANGLE * k
            next_angle = cur_angle + _RIGHT_ANGLE
            cp1 = Vector(math.cos(cur_angle), math.sin(cur_angle)) * radius + center
            if k == 0:
                last = self.beziers.pop()
                self.beziers.append(Bezier(last.w1, last.w2, last.w3, cp1))
            cp2 = Vector(math.cos(next_angle), math.sin(next_angle)) * radius + center

            circle_tangent1 = -Vector(math.sin(cur_angle), -math.cos(cur_angle)).normalize()
            circle_tangent2 = Vector(math.sin(next_angle), -math.cos(next_angle)).normalize()
            h1 = cp1 + circle_tangent1 * radius * quarter
            h2 = cp2 + circle_tangent2 * radius * quarter
            self.bezier_to(Bezier(cp1, h1, h2, cp2))

        last_angle = starting_angle + _RIGHT_ANGLE * repetitions
        difference = math.atan2(
            math.sin(last_angle - ending_angle), math.cos(last_angle - ending_angle)
        )
        n = abs(math.tau / difference) if difference else math.inf

        if abs(difference) < 0.1:
            last = self.beziers.pop()
            self.bezier_to(Bezier(last.w1, last.w2, last.w3, Vector(to.x, to.y)))

        cp1 = Vector(math.cos(last_angle), math.sin(last_angle)) * radius + center
        cp2 = Vector(to.x, to.y)
        factor = _handle_factor(n)
        circle_tangent1 = -Vector(math.sin(last_angle), -math.cos(last_angle)).normalize()
        circle_tangent2 = Vector(math.sin(ending_angle), -math.cos(ending_angle)).normalize()
        h1 = cp1 + circle_tangent1 * radius * factor
        h2 = cp2 + circle_tangent2 * radius * factor
        self.bezier_to(Bezier(cp1, h1, h2, cp2))

    def cap_to(self, to: Vector, cap_outline: Sequence[Sequence[Point]]) -> None:
        """Fit the first contour of ``cap_outline`` between the current end and ``to``."""
        if not cap_outline or not cap_outline[0]:
            raise ValueError("the cap outline has no contour")
        cap = Piecewise.from_contour(list(cap_outline[0]))
        if not cap.segs:
            raise ValueError("the cap contour has no segments")
        start = self._last_end()
        join_mid_point = start.lerp(to, 0.5)

        goal_size = start.distance(to)
        cur_size = cap.start_point().distance(cap.end_point())
        ratio = goal_size / cur_size
        scaled = cap.scale(Vector(ratio, ratio))

        s_first = scaled.start_point()
        s_last = scaled.end_point()
        cap_mid_point = s_first.lerp(s_last, 0.5)
        centered = scaled.translate(Vector(-cap_mid_point.x, -cap_mid_point.y))

        tangent = start - to
        cap_tangent = s_first - s_last
        normal = Vector(tangent.y, -tangent.x).normalize()
        cap_normal = Vector(cap_tangent.y, -cap_tangent.x).normalize()

        angle = math.acos(normal.dot(-cap_normal))
        if math.copysign(1.0, normal.y) < 0:
            angle = -angle

        final_cap = centered.rotate(angle).translate(join_mid_point)
        for bezier in reversed(final_cap.segs):
            self.bezier_to(bezier.reverse())

    def fuse_nearby_ends(self, distance: float) -> "GlyphBuilder":
        """Snap each segment's end onto the next start when they are within ``distance``."""
        fused: List[Bezier] = []
        for bez, following in zip(self.beziers, self.beziers[1:]):
            start = following.start_point()
            if bez.end_point().distance(start) <= distance:
                fused.append(Bezier(bez.w1, bez.w2, bez.w3, Vector(start.x, start.y)))
            else:
                fused.append(bez)
        if self.beziers:
            fused.append(self.beziers[-1])
        return GlyphBuilder(fused)