import pytest

from caesar.phase_transition_heat import l_ev, l_su
from caesar.physics import KILOCALORIE_JOULES


def test_l_ev_table_points():
    assert l_ev(0.0) == pytest.approx(2.5e6)
    assert l_ev(100.0) == pytest.approx(2.26e6)
    assert l_ev(374.15) == pytest.approx(0.0)


def test_l_ev_constant_below_zero():
    assert l_ev(-50.0) == pytest.approx(l_ev(0.0))


def test_l_ev_zero_above_critical_point():
    assert l_ev(500.0) == pytest.approx(0.0)


def test_l_ev_linear_between_points():
    assert l_ev(5.0) == pytest.approx(0.5 * (l_ev(0.0) + l_ev(10.0)))


def test_l_ev_non_increasing():
    values = [l_ev(float(t)) for t in range(0, 400, 5)]
    assert all(a >= b for a, b in zip(values, values[1:]))


def test_l_su_table_points():
    assert l_su(0.0) == pytest.approx(KILOCALORIE_JOULES * 676.9)
    assert l_su(-39.0) == pytest.approx(KILOCALORIE_JOULES * 698.4)


def test_l_su_midpoint():
    assert l_su(-0.5) == pytest.approx(0.5 * (l_su(-1.0) + l_su(0.0)))


def test_l_su_greater_than_l_ev_at_zero():
    assert l_su(0.0) > l_ev(0.0)


@pytest.mark.parametrize("func", [l_ev, l_su])
@pytest.mark.parametrize("t", [-300.0, 1500.0])
def test_out_of_guards_raises(func, t):
    with pytest.raises(ValueError):
        func(t)