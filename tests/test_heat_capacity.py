import pytest

from caesar.heat_capacity import cp_a, cp_i, cp_w
from caesar.physics import KILOCALORIE_JOULES, TEMP_HI_GUARD, TEMP_LO_GUARD


def test_cp_w_table_point():
    assert cp_w(0.0) == pytest.approx(KILOCALORIE_JOULES * 1.01)


def test_cp_i_table_point():
    assert cp_i(-10.0) == pytest.approx(KILOCALORIE_JOULES * 0.485)


def test_cp_a_table_point():
    assert cp_a(20.0) == pytest.approx(1005.0)


def test_cp_w_constant_outside_table():
    assert cp_w(-100.0) == pytest.approx(cp_w(-9.0))
    assert cp_w(500.0) == pytest.approx(cp_w(29.0))


def test_cp_i_constant_outside_table():
    assert cp_i(-200.0) == pytest.approx(cp_i(-28.0))
    assert cp_i(0.0) == pytest.approx(cp_i(-10.0))


def test_cp_a_constant_outside_table():
    assert cp_a(-100.0) == pytest.approx(cp_a(-50.0))
    assert cp_a(800.0) == pytest.approx(cp_a(550.0))


@pytest.mark.parametrize(
    "func, lo, hi",
    [(cp_w, -3.0, -2.0), (cp_i, -20.0, -19.0), (cp_a, 300.0, 350.0)],
)
def test_midpoint_is_mean_of_neighbours(func, lo, hi):
    assert func(0.5 * (lo + hi)) == pytest.approx(0.5 * (func(lo) + func(hi)))


def test_cp_w_non_increasing():
    temps = [-9.0, -5.0, 0.0, 5.0, 10.0, 20.0, 29.0]
    values = [cp_w(t) for t in temps]
    assert values == sorted(values, reverse=True)


def test_cp_i_increasing():
    values = [cp_i(t) for t in (-28.0, -24.0, -18.0, -12.0, -10.0)]
    assert values == sorted(values)


def test_guards_are_accepted():
    for func in (cp_w, cp_i, cp_a):
        assert func(TEMP_LO_GUARD) > 0.0
        assert func(TEMP_HI_GUARD) > 0.0


@pytest.mark.parametrize("func", [cp_w, cp_i, cp_a])
@pytest.mark.parametrize("t", [TEMP_LO_GUARD - 0.5, TEMP_HI_GUARD + 0.5])
def test_out_of_range_raises(func, t):
    with pytest.raises(ValueError):
        func(t)