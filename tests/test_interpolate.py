import pytest

from caesar.interpolate import (
    hard_stair,
    inner_interpolation_on_segment,
    interpolation_by_3_points,
    linear_interpolation,
)

XS = [-10.0, 0.0, 5.0, 20.0]
YS = [3.0, -1.0, 4.0, 4.5]


def test_hard_stair_outside_segment():
    assert hard_stair(-5.0, 0.0, 1.0, 2.0, 8.0) == 2.0
    assert hard_stair(0.0, 0.0, 1.0, 2.0, 8.0) == 2.0
    assert hard_stair(1.0, 0.0, 1.0, 2.0, 8.0) == 8.0
    assert hard_stair(7.0, 0.0, 1.0, 2.0, 8.0) == 8.0


def test_hard_stair_midpoint_is_average():
    assert hard_stair(0.5, 0.0, 1.0, 2.0, 8.0) == pytest.approx((2.0 + 8.0) / 2)


def test_hard_stair_bad_segment():
    with pytest.raises(ValueError):
        hard_stair(0.0, 1.0, 1.0, 0.0, 1.0)


def test_inner_interpolation_endpoints():
    assert inner_interpolation_on_segment(1.0, 3.0, 10.0, 20.0, 1.0) == pytest.approx(10.0)
    assert inner_interpolation_on_segment(1.0, 3.0, 10.0, 20.0, 3.0) == pytest.approx(20.0)


def test_inner_interpolation_out_of_segment():
    with pytest.raises(ValueError):
        inner_interpolation_on_segment(1.0, 3.0, 10.0, 20.0, 3.5)


def test_interpolation_by_3_points_nodes_and_outside():
    args = (0.0, 1.0, 3.0, 5.0, 9.0, -1.0)
    assert interpolation_by_3_points(*args, -2.0) == 5.0
    assert interpolation_by_3_points(*args, 4.0) == -1.0
    assert interpolation_by_3_points(*args, 1.0) == pytest.approx(9.0)
    low = interpolation_by_3_points(*args, 0.5)
    high = interpolation_by_3_points(*args, 2.0)
    assert 5.0 < low < 9.0
    assert -1.0 < high < 9.0


@pytest.mark.parametrize("k", range(len(XS)))
def test_linear_interpolation_hits_nodes(k):
    assert linear_interpolation(XS, YS, XS[k]) == pytest.approx(YS[k])


def test_linear_interpolation_between_nodes_is_between_values():
    for a, b, ya, yb in zip(XS, XS[1:], YS, YS[1:]):
        value = linear_interpolation(XS, YS, (a + b) / 2)
        assert value == pytest.approx((ya + yb) / 2)
        assert min(ya, yb) <= value <= max(ya, yb)


def test_linear_interpolation_errors():
    with pytest.raises(ValueError):
        linear_interpolation([1.0], [1.0], 1.0)
    with pytest.raises(ValueError):
        linear_interpolation([1.0, 2.0], [1.0], 1.5)
    with pytest.raises(ValueError):
        linear_interpolation(XS, YS, 21.0)
    with pytest.raises(ValueError):
        linear_interpolation(XS, YS, -11.0)