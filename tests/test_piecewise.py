import pytest
from hypothesis import given, strategies as st

from curvemath.bezier import Bezier
from curvemath.glif import Point, PointType
from curvemath.piecewise import Piecewise
from curvemath.rect import Rect
from curvemath.vector import Vector


def line(a, b):
    start = Vector(*a)
    end = Vector(*b)
    return Bezier(Vector(*a), start, end, Vector(*b))


def square():
    return Piecewise(
        [
            line((0, 0), (10, 0)),
            line((10, 0), (10, 10)),
            line((10, 10), (0, 10)),
            line((0, 10), (0, 0)),
        ]
    )


def square_points():
    return [
        Point(0, 0, ptype=PointType.LINE),
        Point(10, 0, ptype=PointType.LINE),
        Point(10, 10, ptype=PointType.LINE),
        Point(0, 10, ptype=PointType.LINE),
    ]


def handled_contour():
    return [
        Point(0, 0, a=(3, -1), b=(-1, 3), ptype=PointType.CURVE),
        Point(10, 0, a=(11, 3), b=(7, -1), ptype=PointType.CURVE),
        Point(10, 10, a=(7, 11), b=(11, 7), ptype=PointType.CURVE),
        Point(0, 10, a=(-1, 7), b=(3, 11), ptype=PointType.CURVE),
    ]


def test_generated_cuts_span_unit_interval_evenly():
    pw = square()
    assert pw.cuts[0] == 0.0
    assert pw.cuts[-1] == 1.0
    assert len(pw.cuts) == len(pw.segs) + 1
    steps = {round(b - a, 12) for a, b in zip(pw.cuts, pw.cuts[1:])}
    assert len(steps) == 1


def test_empty_piecewise_has_single_cut():
    assert Piecewise([]).cuts == [0.0]


def test_explicit_cuts_are_kept():
    pw = Piecewise([line((0, 0), (1, 0))], [0.0, 1.0])
    assert pw.cuts == [0.0, 1.0]


def test_at_ends_of_square():
    pw = square()
    assert pw.at(0.0) == Vector(0, 0)
    assert pw.at(1.0) == Vector(0, 0)


def test_at_cut_is_start_of_next_segment():
    pw = square()
    for seg, cut in zip(pw.segs[1:], pw.cuts[1:-1]):
        assert pw.at(cut) == seg.start_point()


@given(st.floats(min_value=0.0, max_value=1.0))
def test_seg_n_and_seg_t_stay_in_range(t):
    pw = square()
    n = pw.seg_n(t)
    assert 0 <= n < len(pw.segs)
    assert pw.cuts[n] <= t <= pw.cuts[n + 1]
    assert -1e-12 <= pw.seg_t(t) <= 1.0 + 1e-12


def test_tangent_follows_direction_of_travel():
    tangent = square().tangent_at(0.1)
    assert tangent.y == 0
    assert tangent.x > 0


def test_empty_piecewise_raises():
    pw = Piecewise([])
    with pytest.raises(ValueError):
        pw.bounds()
    with pytest.raises(ValueError):
        pw.start_point()
    with pytest.raises(ValueError):
        pw.end_point()
    with pytest.raises(ValueError):
        pw.at(0.5)


def test_bounds_of_square():
    assert square().bounds() == Rect(left=0, bottom=0, right=10, top=10)


def test_is_closed():
    assert square().is_closed()
    assert not Piecewise([line((0, 0), (10, 0)), line((10, 0), (10, 10))]).is_closed()


def test_from_contour_closed_matches_square():
    assert Piecewise.from_contour(square_points()) == square()


def test_from_contour_open_when_first_point_moves():
    points = square_points()
    points[0].ptype = PointType.MOVE
    pw = Piecewise.from_contour(points)
    assert len(pw.segs) == len(points) - 1
    assert pw.start_point() == Vector(0, 0)
    assert pw.end_point() == Vector(0, 10)


def test_closed_contour_round_trip():
    assert Piecewise.from_contour(handled_contour()).to_contour() == handled_contour()


def test_open_contour_to_contour():
    points = handled_contour()[:3]
    points[0].ptype = PointType.MOVE
    back = Piecewise.from_contour(points).to_contour()
    assert [p.position for p in back] == [p.position for p in points]
    assert back[0].ptype is PointType.MOVE
    assert all(p.ptype is PointType.CURVE for p in back[1:])


def test_empty_to_contour():
    assert Piecewise([]).to_contour() == []


def test_outline_round_trip():
    outline = [handled_contour(), handled_contour()]
    assert Piecewise.from_outline(outline).to_outline() == outline


def test_subdivide_splits_every_primitive():
    pw = square()
    sub = pw.subdivide(0.5)
    assert len(sub.segs) == 2 * len(pw.segs)
    assert sub.cuts == pw.cuts
    for original, first, second in zip(pw.segs, sub.segs[::2], sub.segs[1::2]):
        assert first.start_point() == original.start_point()
        assert second.end_point() == original.end_point()
        assert first.end_point() == second.start_point()


def test_subdivide_at_zero_keeps_segments():
    pw = square()
    assert pw.subdivide(0.0).segs == pw.segs


def test_subdivide_outline_splits_each_contour():
    outline = Piecewise([square(), square()])
    sub = outline.subdivide(0.5)
    assert sub.cuts == outline.cuts
    assert [len(c.segs) for c in sub.segs] == [2 * len(square().segs)] * 2


def test_cut_at_t_inserts_cut_and_splits():
    pw = Piecewise([line((0, 0), (10, 0)), line((10, 0), (20, 0))])
    cut = pw.cut_at_t(0.25)
    assert len(cut.segs) == 3
    assert len(cut.cuts) == 4
    assert 0.25 in cut.cuts
    assert cut.cuts == sorted(cut.cuts)
    assert cut.segs[0].start_point() == Vector(0, 0)
    assert cut.segs[0].end_point() == cut.segs[1].start_point()
    assert cut.segs[1].end_point() == Vector(10, 0)
    assert cut.segs[2] == pw.segs[1]


def test_cut_at_existing_cut_changes_nothing():
    pw = Piecewise([line((0, 0), (10, 0)), line((10, 0), (20, 0))])
    cut = pw.cut_at_t(0.5)
    assert cut.segs == pw.segs
    assert cut.cuts == pw.cuts


def test_fuse_nearby_ends_snaps_and_drops_last():
    pw = Piecewise(
        [line((0, 0), (10, 0.0005)), line((10, 0), (20, 0)), line((20, 0), (30, 0))]
    )
    fused = pw.fuse_nearby_ends(0.01)
    assert len(fused.segs) == len(pw.segs) - 1
    assert fused.segs[0].end_point() == Vector(10, 0)
    assert fused.segs[1] == pw.segs[1]
    assert fused.cuts == pw.cuts


def test_fuse_nearby_ends_leaves_far_ends():
    pw = Piecewise([line((0, 0), (10, 0.0005)), line((10, 0), (20, 0))])
    fused = pw.fuse_nearby_ends(0.0)
    assert fused.segs == [pw.segs[0]]


def test_remove_short_segs():
    long_seg = line((1, 0), (101, 0))
    pw = Piecewise([line((0, 0), (1, 0)), long_seg])
    trimmed = pw.remove_short_segs(5, 10)
    assert trimmed.segs == [long_seg]
    assert len(trimmed.cuts) == 2


def test_split_at_discontinuities():
    far = line((50, 0), (60, 0))
    pw = Piecewise([line((0, 0), (10, 0)), line((10, 0), (20, 0)), far])
    parts = pw.split_at_discontinuities(0.01)
    assert [len(p.segs) for p in parts.segs] == [2, 1]
    assert parts.segs[1].segs[0] == far


def test_split_empty():
    assert Piecewise([]).split_at_discontinuities(0.01).segs == []


def test_segments_yield_ranges():
    pw = square()
    items = list(pw.segments())
    assert [seg for seg, _, _ in items] == pw.segs
    assert [start for _, start, _ in items] == pw.cuts[:-1]
    assert [end for _, _, end in items] == pw.cuts[1:]


def test_translate_moves_every_segment():
    pw = square()
    moved = pw.translate(Vector(1, 2))
    assert moved.start_point() == pw.start_point() + Vector(1, 2)
    assert moved.cuts == pw.cuts
    assert moved.bounds().width() == pw.bounds().width()
    assert moved.bounds().height() == pw.bounds().height()