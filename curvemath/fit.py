"""Fit smooth cubic curves through runs of on-curve points."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence, Tuple

from .glif import Point, PointType

Pair = Tuple[float, float]


def _first_control_points(rhs: Sequence[float]) -> List[float]:
    """Solve the tridiagonal system for one coordinate of the first control points."""
    n = len(rhs)
    b = 2.0
    x = [rhs[0] / b]
    tmp = [0.0]
    for i in range(1, n):
        tmp.append(1.0 / b)
        b = (4.0 if i < n - 1 else 3.5) - tmp[i]
        x.append((rhs[i] - x[i - 1]) / b)
    for i in range(1, n):
        x[n - i - 1] -= tmp[n - i] * x[n - i]
    return x


def _rhs(values: Sequence[float]) -> List[float]:
    n = len(values) - 1
    rhs = [values[0] + 2.0 * values[1]]
    rhs.extend(4.0 * values[i] + 2.0 * values[i + 1] for i in range(1, n - 1))
    rhs.append((8.0 * values[n - 1] + values[n]) / 2.0)
    return rhs


def curve_control_points(knots: Sequence[Point]) -> Tuple[List[Pair], List[Pair]]:
    """Control points of a smooth cubic spline through ``knots``.

    Returns the first and second control point of each of the ``len(knots) - 1``
    segments.
    """
    if len(knots) < 2:
        raise ValueError("at least two knots are needed to fit a curve")
    n = len(knots) - 1

    if n == 1:
        k0, k1 = knots
        first = ((2.0 * k0.x + k1.x) / 3.0, (2.0 * k0.y + k1.y) / 3.0)
        second = (2.0 * first[0] - k0.x, 2.0 * first[1] - k0.y)
        return [first], [second]

    xs = _first_control_points(_rhs([k.x for k in knots]))
    ys = _first_control_points(_rhs([k.y for k in knots]))

    first_points = list(zip(xs, ys))
    second_points: List[Pair] = []
    for i in range(n):
        if i < n - 1:
            second_points.append((2.0 * knots[i + 1].x - xs[i + 1], 2.0 * knots[i + 1].y - ys[i + 1]))
        else:
            second_points.append(((knots[n].x + xs[n - 1]) / 2.0, (knots[n].y + ys[n - 1]) / 2.0))
    return first_points, second_points


def _solve(contour: List[Point]) -> List[Point]:
    points = [replace(p) for p in contour]
    if len(points) == 1:
        return points
    first, second = curve_control_points(points)
    for point, following, a, b in zip(points, points[1:], first, second):
        point.a = a
        following.b = b
    return points


def fit(outline: Sequence[Sequence[Point]]) -> List[List[Point]]:
    """Return a copy of ``outline`` with smooth handles fitted through its curve runs."""
    result: List[List[Point]] = []
    for contour in outline:
        final: List[Point] = []
        run: List[Point] = []
        last_ptype = PointType.UNDEFINED
        for point in contour:
            if point.ptype is PointType.CURVE:
                if last_ptype is not PointType.CURVE:
                    run = []
                run.append(replace(point))
            else:
                if last_ptype is PointType.CURVE and run:
                    run.append(replace(point))
                    final.extend(_solve(run))
                    run = []
                final.append(replace(point))
                run.append(replace(point))
            last_ptype = point.ptype

        if not final:
            final = _solve(list(contour))
        elif len(final) != len(contour):
            final.extend(_solve(run))
        result.append(final)
    return result