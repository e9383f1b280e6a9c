"""Repeat a pattern outline along a path, bending it to follow the curve."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Sequence

from .arclen import ArcLengthParameterization
from .glif import Point
from .piecewise import Piecewise
from .rect import Rect
from .vector import Vector


class PatternCopies(Enum):
    """How many copies of the pattern are laid along the path."""

    SINGLE = "single"
    REPEATED = "repeated"
    FIXED = "fixed"


class PatternStretch(Enum):
    """How left-over path length is used up."""

    OFF = "off"
    ON = "on"
    SPACING = "spacing"


@dataclass
class PatternSettings:
    """Options controlling how a pattern is laid along a path.

    ``subdivide`` is the number of times every pattern segment is split in half
    before bending, which makes the result follow the path more closely.
    ``cull_overlap`` is the fraction of overlap above which a copy is dropped;
    1.0 disables culling.
    """

    copies: PatternCopies = PatternCopies.SINGLE
    subdivide: int = 0
    stretch: PatternStretch = PatternStretch.OFF
    spacing: float = 0.0
    normal_offset: float = 0.0
    tangent_offset: float = 0.0
    pattern_scale: Vector = field(default_factory=lambda: Vector(1.0, 1.0))
    center_pattern: bool = True
    cull_overlap: float = 1.0
    two_pass_culling: bool = False
    reverse_culling: bool = False
    reverse_path: bool = False


def prepare_pattern(
    pattern: Piecewise, arclen: ArcLengthParameterization, settings: PatternSettings
) -> List[Piecewise]:
    """Lay out the copies of ``pattern`` in curve space.

    In curve space x is the distance travelled along the path and y the offset
    from it. The returned copies only need bending onto the path.
    """
    output: List[Piecewise] = []

    working = pattern.translate(Vector(1.0, 1.0))
    bounds = pattern.bounds()
    pattern_width = abs(bounds.left - bounds.right) * settings.pattern_scale.x
    pattern_height = abs(bounds.bottom - bounds.top)

    if settings.center_pattern:
        offset_x = -bounds.left - 1.0
        offset_y = -bounds.bottom - 1.0
        working = working.translate(Vector(offset_x, offset_y - pattern_height / 2.0))
        working = working.scale(Vector(settings.pattern_scale.x, settings.pattern_scale.y))

    for _ in range(settings.subdivide):
        working = working.subdivide(0.5)

    total_arclen = arclen.total_arclen()
    total_width = pattern_width + settings.spacing

    if settings.copies is PatternCopies.SINGLE:
        single_width = pattern_width if settings.stretch is PatternStretch.ON else total_width
        if math.floor(total_arclen / single_width) > 0:
            single = working
            if settings.stretch is PatternStretch.ON:
                stretch_len = total_arclen - single_width
                single = single.scale(Vector(1.0 + stretch_len / pattern_width, 1.0))
            output.append(single)

    elif settings.copies is PatternCopies.REPEATED:
        ratio = total_arclen / pattern_width
        spacing_ratio = settings.spacing / pattern_width
        copies = int(ratio)
        left_over = ratio - copies
        while left_over < spacing_ratio * (copies - 1):
            copies -= 1
            left_over = ratio - copies
        left_over -= spacing_ratio * (copies - 1)

        if copies <= 0:
            return output

        stretch_len = 0.0
        additional_spacing = 0.0
        if settings.stretch is PatternStretch.ON:
            stretch_len = left_over / copies
            working = working.scale(Vector(1.0 + stretch_len, 1.0))
        elif settings.stretch is PatternStretch.SPACING:
            additional_spacing = left_over / copies * pattern_width

        step = total_width + stretch_len * pattern_width + additional_spacing
        output.extend(working.translate(Vector(n * step, 0.0)) for n in range(copies))

    # A fixed number of copies is not laid out: no copies are produced.
    return output


def pattern_along_path(path: Piecewise, pattern: Piecewise, settings: PatternSettings) -> Piecewise:
    """Bend copies of ``pattern`` (an outline Piecewise) along ``path`` (a contour Piecewise)."""
    if not pattern.segs or settings.pattern_scale.x == 0.0 or settings.pattern_scale.y == 0.0:
        return Piecewise([])

    arclen = ArcLengthParameterization.from_evaluable(path, 1000)
    total_arclen = arclen.total_arclen()

    prepared = prepare_pattern(pattern, arclen, settings)
    bounds = pattern.bounds()
    pattern_width = abs(bounds.left - bounds.right) * settings.pattern_scale.x

    def transform(point: Vector) -> Vector:
        u = point.x / total_arclen
        if settings.reverse_path:
            u = 1.0 - u
        t = arclen.parameterize(u)
        path_point = path.at(t)
        d = path.tangent_at(t)
        normal = Vector(d.y, -d.x).normalize()
        offset = normal * point.y
        offset = offset + d.normalize() * settings.tangent_offset
        offset = offset + normal * settings.normal_offset
        return offset + path_point

    cuts: List[float] = []
    clipping_rects: List[Rect] = []
    output_segments: List[Piecewise] = []

    if settings.reverse_culling:
        prepared.reverse()

    for copy in prepared:
        transformed = copy.apply_transform(transform)

        if settings.cull_overlap != 1.0:
            this_rect = transformed.bounds()

            greatest_overlap = 0.0
            overlap_index = 0
            overlapping: Optional[Rect] = None
            for i, rect in enumerate(clipping_rects):
                if this_rect.overlaps(rect):
                    area = this_rect.overlap_rect(rect).area()
                    if area > greatest_overlap:
                        greatest_overlap = area
                        overlapping = rect
                        overlap_index = i

            if overlapping is not None:
                area_of_overlap = this_rect.overlap_rect(overlapping).area()
                total_area = this_rect.area() + overlapping.area()
                fractional_overlap = (area_of_overlap * 2.0) / total_area
                nudging = (
                    settings.spacing / math.sqrt(total_area)
                    if overlap_index == len(clipping_rects) - 1
                    else 0.0
                )
                if fractional_overlap - nudging > settings.cull_overlap:
                    copy_bounds = copy.bounds()
                    cuts.append(arclen.parameterize(copy_bounds.left / total_arclen))
                    cuts.append(arclen.parameterize(copy_bounds.right / total_arclen))
                    continue

            clipping_rects.append(
                Rect(
                    left=this_rect.left - settings.spacing,
                    bottom=this_rect.bottom - settings.spacing,
                    right=this_rect.right + settings.spacing,
                    top=this_rect.top + settings.spacing,
                )
            )

        output_segments.extend(transformed.segs)

    if cuts and settings.two_pass_culling:
        second_settings = replace(settings, cull_overlap=1.0, two_pass_culling=False)
        cut_path = path
        for cut in cuts:
            cut_path = cut_path.cut_at_t(cut)
        trimmed = cut_path.remove_short_segs(pattern_width * 2.0 + settings.spacing, 100)
        output: List[Piecewise] = []
        for sub_path in trimmed.split_at_discontinuities(0.01).segs:
            output.extend(pattern_along_path(sub_path, pattern, second_settings).segs)
        return Piecewise(output)

    return Piecewise(output_segments)


def pattern_along_outline(
    path: Sequence[Sequence[Point]],
    pattern: Sequence[Sequence[Point]],
    settings: PatternSettings,
    marked_contour: Optional[int] = None,
) -> List[List[Point]]:
    """Lay ``pattern`` along every contour of ``path``, or only along ``marked_contour``.

    Contours other than the marked one are copied through unchanged.
    """
    piece_path = Piecewise.from_outline([list(contour) for contour in path])
    piece_pattern = Piecewise.from_outline([list(contour) for contour in pattern])

    output: List[List[Point]] = []
    for idx, contour in enumerate(piece_path.segs):
        if marked_contour is not None and idx != marked_contour:
            output.append(contour.to_contour())
            continue
        output.extend(pattern_along_path(contour, piece_pattern, settings).to_outline())
    return output