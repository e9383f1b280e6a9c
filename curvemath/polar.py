"""Polar coordinates of point handles, relative to their point."""

from __future__ import annotations

import math
from functools import singledispatch
from typing import Tuple

from .bezier import Bezier
from .glif import Point, PointType, WhichHandle
from .vector import Vector


@singledispatch
def cartesian(obj, which: WhichHandle) -> Tuple[float, float]:
    """Offset from the chosen handle to its point (point minus handle)."""
    raise TypeError(f"no polar coordinates for {type(obj).__name__}")


@singledispatch
def polar(obj, which: WhichHandle) -> Tuple[float, float]:
    """Radius and angle (radians) of :func:`cartesian`."""
    raise TypeError(f"no polar coordinates for {type(obj).__name__}")


@singledispatch
def set_polar(obj, which: WhichHandle, coords: Tuple[float, float]) -> None:
    """Place the chosen handle (or the point itself) at radius and angle (degrees) from the point."""
    raise TypeError(f"no polar coordinates for {type(obj).__name__}")


def _to_polar(x: float, y: float) -> Tuple[float, float]:
    return math.sqrt(x ** 2 + y ** 2), math.atan2(y, x)


@cartesian.register(Point)
def _point_cartesian(obj: Point, which: WhichHandle) -> Tuple[float, float]:
    x, y = obj.position if which is WhichHandle.NEITHER else obj.handle_or_position(which)
    return obj.x - x, obj.y - y


@polar.register(Point)
def _point_polar(obj: Point, which: WhichHandle) -> Tuple[float, float]:
    return _to_polar(*cartesian(obj, which))


@set_polar.register(Point)
def _point_set_polar(obj: Point, which: WhichHandle, coords: Tuple[float, float]) -> None:
    r, theta = coords
    angle = math.radians(theta)
    x = obj.x + r * math.cos(angle)
    y = obj.y + r * math.sin(angle)
    if which is WhichHandle.NEITHER:
        obj.x, obj.y = x, y
    elif which is WhichHandle.A:
        obj.a = (x, y)
    else:
        obj.b = (x, y)


def _bezier_point(bez: Bezier, which: WhichHandle) -> Point:
    """The end point of ``bez`` that owns the chosen handle, as a glyph point."""
    if which is WhichHandle.A:
        anchor, handle = bez.w1, bez.w2
    elif which is WhichHandle.B:
        anchor, handle = bez.w4, bez.w3
    else:
        raise ValueError("a Bezier handle must be A or B")
    point = anchor.to_point(None, None, PointType.LINE)
    if which is WhichHandle.A:
        point.a = handle.to_handle()
    else:
        point.b = handle.to_handle()
    return point


@cartesian.register(Bezier)
def _bezier_cartesian(obj: Bezier, which: WhichHandle) -> Tuple[float, float]:
    return cartesian(_bezier_point(obj, which), which)


@polar.register(Bezier)
def _bezier_polar(obj: Bezier, which: WhichHandle) -> Tuple[float, float]:
    return polar(_bezier_point(obj, which), which)


@set_polar.register(Bezier)
def _bezier_set_polar(obj: Bezier, which: WhichHandle, coords: Tuple[float, float]) -> None:
    point = _bezier_point(obj, which)
    set_polar(point, WhichHandle.NEITHER, coords)
    moved = Vector(float(point.x), float(point.y))
    if which is WhichHandle.A:
        obj.w2 = moved
    else:
        obj.w3 = moved