import pytest
from hypothesis import given
from hypothesis import strategies as st

from curvemath.interpolator import InterpolationType, Interpolator


def test_none_holds_start():
    interp = Interpolator.none(3.0, 9.0)
    assert interp.at(0.0) == 3.0
    assert interp.at(0.7) == 3.0
    assert interp.at(1.0) == 3.0


@given(st.floats(-100, 100), st.floats(-100, 100))
def test_linear_ends(start, finish):
    interp = Interpolator.linear(start, finish)
    assert interp.at(0.0) == pytest.approx(start)
    assert interp.at(1.0) == pytest.approx(finish)


def test_linear_midpoint():
    assert Interpolator.linear(2.0, 6.0).at(0.5) == pytest.approx(4.0)


def test_exponential():
    interp = Interpolator.exponential(0.0, 8.0)
    assert interp.at(0.0) == 0.0
    assert interp.at(1.0) == 8.0
    assert interp.at(0.5) == pytest.approx(2.0)


def test_of_kind_matches_constructors():
    assert Interpolator.of_kind(1.0, 2.0, InterpolationType.NULL) == Interpolator.none(1.0, 2.0)
    assert Interpolator.of_kind(1.0, 2.0, InterpolationType.LINEAR) == Interpolator.linear(1.0, 2.0)


def test_of_kind_rejects_unknown():
    with pytest.raises(ValueError):
        Interpolator.of_kind(1.0, 2.0, "cubic")


def test_tangent_is_zero():
    assert Interpolator.linear(1.0, 5.0).tangent_at(0.3) == 0.0


def test_start_and_end_points():
    interp = Interpolator.exponential(1.5, -2.5)
    assert interp.start_point() == 1.5
    assert interp.end_point() == -2.5


def test_bounds_pack_start_and_finish():
    rect = Interpolator.linear(1.0, 4.0).bounds()
    assert (rect.left, rect.right, rect.bottom, rect.top) == (1.0, 1.0, 4.0, 4.0)


def test_apply_transform_keeps_curve():
    interp = Interpolator.exponential(1.0, 3.0)
    doubled = interp.apply_transform(lambda v: v * 2)
    assert doubled == Interpolator.exponential(2.0, 6.0)
    assert doubled.at(0.5) == pytest.approx(2 * interp.at(0.5))


def test_translate_and_scale_scalars():
    interp = Interpolator.linear(1.0, 3.0)
    assert interp.translate(1.0) == Interpolator.linear(2.0, 4.0)
    assert interp.scale(3.0) == Interpolator.linear(3.0, 9.0)