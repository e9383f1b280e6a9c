"""Piecewise curves: sequences of evaluable segments mapped onto 0..1."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional, Tuple

from .arclen import ArcLengthParameterization
from .bezier import Bezier
from .coordinate import SMALL_DISTANCE
from .evaluate import Evaluable
from .glif import Point, PointType
from .rect import Rect


def _even_cuts(count: int) -> List[float]:
    return [0.0] + [(i + 1) / count for i in range(count)]


@dataclass
class Piecewise(Evaluable):
    """A chain of segments where t=0 is the start of the first and t=1 the end of the last.

    ``cuts`` holds the parameter at which each segment starts, followed by the
    end parameter of the last one. When omitted the segments share 0..1 evenly.
    Segments are Béziers for a contour, or Piecewise contours for an outline.
    """

    segs: list = field(default_factory=list)
    cuts: Optional[List[float]] = None

    def __post_init__(self) -> None:
        self.segs = list(self.segs)
        if self.cuts is None:
            self.cuts = _even_cuts(len(self.segs))
        else:
            self.cuts = list(self.cuts)

    # -- conversion from and to glyph outlines --------------------------------

    @classmethod
    def from_contour(cls, contour: List[Point]) -> "Piecewise":
        """Build Béziers between consecutive points; closed unless the first point is a move."""
        segs = [Bezier.from_glif_points(p, q) for p, q in zip(contour, contour[1:])]
        if contour and contour[0].ptype is not PointType.MOVE:
            segs.append(Bezier.from_glif_points(contour[-1], contour[0]))
        return cls(segs)

    @classmethod
    def from_outline(cls, outline: List[List[Point]]) -> "Piecewise":
        """One Piecewise contour per contour of ``outline``."""
        return cls([cls.from_contour(contour) for contour in outline])

    def to_contour(self) -> List[Point]:
        """Convert a Piecewise of Béziers back into a list of glyph points."""
        output: List[Point] = []
        last_curve = None
        for curve in self.segs:
            cps = curve.control_points()
            if last_curve is None and not self.is_closed():
                ptype = PointType.MOVE
            else:
                ptype = PointType.CURVE
            point = cps[0].to_point(cps[1].to_handle(), None, ptype)
            if last_curve is not None:
                point.b = last_curve[2].to_handle()
            output.append(point)
            last_curve = cps

        if len(output) <= 1:
            return output

        if self.is_closed():
            output[0].b = last_curve[2].to_handle()
        else:
            output.append(last_curve[3].to_point(last_curve[2].to_handle(), None, PointType.CURVE))
        return output

    def to_outline(self) -> List[List[Point]]:
        """Convert a Piecewise of Piecewise contours into an outline."""
        return [contour.to_contour() for contour in self.segs]

    # -- parameter lookup -----------------------------------------------------

    def seg_n(self, t: float) -> int:
        """Index of the segment that covers parameter ``t``."""
        left = 0
        right = len(self.cuts) - 1
        while left < right:
            middle = (left + right) // 2
            if left == middle:
                return middle
            if right == middle:
                return left
            if self.cuts[middle] == t:
                return middle
            if self.cuts[middle] < t:
                left = middle
            else:
                right = middle
        raise ValueError("couldn't find the target segment")

    def seg_t(self, t: float) -> float:
        """Parameter ``t`` expressed in the local parameter of its segment."""
        i = self.seg_n(t)
        return (t - self.cuts[i]) / (self.cuts[i + 1] - self.cuts[i])

    def segments(self) -> Iterator[Tuple[Any, float, float]]:
        """Yield each segment with the start and end parameter it covers."""
        yield from zip(self.segs, self.cuts, self.cuts[1:])

    # -- evaluation -----------------------------------------------------------

    def at(self, t: float) -> Any:
        return self.segs[self.seg_n(t)].at(self.seg_t(t))

    def tangent_at(self, t: float) -> Any:
        return self.segs[self.seg_n(t)].tangent_at(self.seg_t(t))

    def bounds(self) -> Rect:
        if not self.segs:
            raise ValueError("an empty piecewise has no bounds")
        output = Rect(left=math.inf, bottom=math.inf, right=-math.inf, top=-math.inf)
        for seg in self.segs:
            output = output.encapsulate_rect(seg.bounds())
        return output

    def apply_transform(self, transform: Callable[[Any], Any]) -> "Piecewise":
        return Piecewise([seg.apply_transform(transform) for seg in self.segs], self.cuts)

    def start_point(self) -> Any:
        if not self.segs:
            raise ValueError("an empty piecewise has no start point")
        return self.segs[0].start_point()

    def end_point(self) -> Any:
        if not self.segs:
            raise ValueError("an empty piecewise has no end point")
        return self.segs[-1].end_point()

    def is_closed(self) -> bool:
        """True when the start and end points coincide within SMALL_DISTANCE."""
        return self.start_point().is_near(self.end_point(), SMALL_DISTANCE)

    # -- editing --------------------------------------------------------------

    def subdivide(self, t: float) -> "Piecewise":
        """Split every primitive at its local ``t``; for an outline, every contour.

        The cuts are kept as they were.
        """
        if any(isinstance(seg, Piecewise) for seg in self.segs):
            return Piecewise([contour.subdivide(t) for contour in self.segs], self.cuts)

        new_segs = []
        for primitive in self.segs:
            parts = primitive.subdivide(t)
            new_segs.extend(parts if parts is not None else (primitive,))
        return Piecewise(new_segs, self.cuts)

    def cut_at_t(self, t: float) -> "Piecewise":
        """Split the segment covering global parameter ``t`` and add ``t`` to the cuts."""
        seg_num = self.seg_n(t)
        seg_time = self.seg_t(t)

        new_segs = []
        for i, seg in enumerate(self.segs):
            parts = seg.subdivide(seg_time) if i == seg_num else None
            new_segs.extend(parts if parts is not None else (seg,))

        new_cuts: List[float] = []
        last_cut: Optional[float] = None
        for cut in self.cuts:
            if last_cut is not None and last_cut < t < cut:
                new_cuts.append(t)
                last_cut = t
            else:
                last_cut = cut
            new_cuts.append(cut)

        return Piecewise(new_segs, new_cuts)

    def fuse_nearby_ends(self, distance: float) -> "Piecewise":
        """Snap each segment's end onto the next segment's start when within ``distance``.

        Only segments that have a successor are kept.
        """
        new_segs = []
        for seg, following in zip(self.segs, self.segs[1:]):
            if seg.end_point().distance(following.start_point()) <= distance:
                new_segs.append(Bezier(seg.w1, seg.w2, seg.w3, following.start_point()))
            else:
                new_segs.append(seg)
        return Piecewise(new_segs, self.cuts)

    def remove_short_segs(self, length: float, accuracy: int) -> "Piecewise":
        """Drop segments whose arc length is not above ``length``; cuts are regenerated."""
        kept = [
            bez
            for bez in self.segs
            if ArcLengthParameterization.from_evaluable(bez, accuracy).total_arclen() > length
        ]
        return Piecewise(kept)

    def split_at_discontinuities(self, distance: float) -> "Piecewise":
        """Break into runs of segments whose ends meet closer than ``distance``."""
        runs: List[Piecewise] = []
        current: list = []
        last = None
        for bez in self.segs:
            if last is not None and last.end_point().distance(bez.start_point()) >= distance:
                runs.append(Piecewise(current))
                current = []
            current.append(bez)
            last = bez
        if current:
            runs.append(Piecewise(current))
        return Piecewise(runs)