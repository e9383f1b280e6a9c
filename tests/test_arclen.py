import pytest
from hypothesis import given
from hypothesis import strategies as st

from curvemath.arclen import ArcLengthParameterization
from curvemath.bezier import Bezier
from curvemath.interpolator import Interpolator
from curvemath.vector import Vector


def _uniform_line():
    return Bezier.from_points(
        Vector(0.0, 0.0), Vector(10.0 / 3.0, 0.0), Vector(20.0 / 3.0, 0.0), Vector(10.0, 0.0)
    )


def _curve():
    return Bezier.from_points(
        Vector(0.0, 0.0), Vector(0.0, 8.0), Vector(1.0, 8.0), Vector(9.0, 0.0)
    )


def test_table_size_and_start():
    param = ArcLengthParameterization.from_evaluable(_curve(), 50)
    assert len(param.arclens) == 51
    assert param.arclens[0] == 0.0


def test_table_is_nondecreasing():
    lengths = ArcLengthParameterization.from_evaluable(_curve(), 100).arclens
    assert all(a <= b for a, b in zip(lengths, lengths[1:]))


def test_total_length_of_straight_line():
    param = ArcLengthParameterization.from_evaluable(_uniform_line(), 20)
    assert param.total_arclen() == pytest.approx(10.0)


def test_total_length_of_scalar_evaluable():
    param = ArcLengthParameterization.from_evaluable(Interpolator.linear(2.0, 7.0), 10)
    assert param.total_arclen() == pytest.approx(5.0)


def test_parameterize_ends():
    param = ArcLengthParameterization.from_evaluable(_curve(), 100)
    assert param.parameterize(0.0) == 0.0
    assert param.parameterize(1.0) == pytest.approx(1.0)


@given(st.floats(0.0, 1.0))
def test_uniform_line_maps_identity(u):
    param = ArcLengthParameterization.from_evaluable(_uniform_line(), 50)
    assert param.parameterize(u) == pytest.approx(u, abs=1e-9)


@given(st.floats(0.0, 1.0), st.floats(0.0, 1.0))
def test_parameterize_is_monotonic(u1, u2):
    param = ArcLengthParameterization.from_evaluable(_curve(), 100)
    lo, hi = sorted((u1, u2))
    assert param.parameterize(lo) <= param.parameterize(hi) + 1e-12


def test_parameterize_reaches_requested_length():
    curve = _curve()
    param = ArcLengthParameterization.from_evaluable(curve, 200)
    t = param.parameterize(0.5)
    half = ArcLengthParameterization.from_evaluable(
        Bezier(*curve.subdivide(t)[0].control_points()), 200
    )
    assert half.total_arclen() == pytest.approx(param.total_arclen() / 2, rel=1e-3)


def test_arclen_from_t_at_start():
    param = ArcLengthParameterization.from_evaluable(_curve(), 10)
    assert param.arclen_from_t(0.0) == 0.0


def test_single_entry_table_cannot_be_searched():
    param = ArcLengthParameterization.from_evaluable(_curve(), 0)
    assert param.arclens == [0.0]
    with pytest.raises(ValueError):
        param.parameterize(0.5)