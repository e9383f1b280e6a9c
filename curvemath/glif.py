"""Glyph outline points and handles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Handle = Optional[Tuple[float, float]]
"""A handle position, or ``None`` when the handle is colocated with its point."""


class PointType(Enum):
    """Kind of an on-curve or off-curve point in a contour."""

    UNDEFINED = "undefined"
    MOVE = "move"
    CURVE = "curve"
    QCURVE = "qcurve"
    QCLOSE = "qclose"
    LINE = "line"
    OFFCURVE = "offcurve"


class WhichHandle(Enum):
    """Selects one of the two handles of a point, or the point itself."""

    NEITHER = "neither"
    A = "a"
    B = "b"


@dataclass
class Point:
    """A contour point with an outgoing handle ``a`` and an incoming handle ``b``."""

    x: float = 0.0
    y: float = 0.0
    a: Handle = None
    b: Handle = None
    ptype: PointType = PointType.UNDEFINED

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def handle(self, which: WhichHandle) -> Handle:
        """Return the chosen handle; ``None`` means colocated."""
        if which is WhichHandle.A:
            return self.a
        if which is WhichHandle.B:
            return self.b
        return None

    def handle_or_position(self, which: WhichHandle) -> Tuple[float, float]:
        """Return the chosen handle's position, or the point's own if colocated."""
        found = self.handle(which)
        return self.position if found is None else found


Contour = list
Outline = list


def _near(handle: Handle, x: float, y: float, within: float) -> bool:
    return handle is not None and abs(handle[0] - x) < within and abs(handle[1] - y) < within


def assert_colocated(outline: list, within: float = 0.0000001) -> None:
    """Mark every handle lying within ``within`` of its point as colocated, in place."""
    for contour in outline:
        for point in contour:
            if _near(point.a, point.x, point.y, within):
                point.a = None
            if _near(point.b, point.x, point.y, within):
                point.b = None