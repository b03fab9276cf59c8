import pytest

from caesar.sle import SingularSystemError, solve_system_2, solve_tridiagonal_system


def test_solve_system_2_satisfies_equations():
    a1, b1, c1, a2, b2, c2 = 2.0, 1.0, -5.0, 1.0, -3.0, 1.0
    x, y = solve_system_2(a1, b1, c1, a2, b2, c2)
    assert a1 * x + b1 * y + c1 == pytest.approx(0.0)
    assert a2 * x + b2 * y + c2 == pytest.approx(0.0)


def test_solve_system_2_simple_values():
    x, y = solve_system_2(1.0, 0.0, -3.0, 0.0, 1.0, 4.0)
    assert (x, y) == pytest.approx((3.0, -4.0))


def test_solve_system_2_singular():
    with pytest.raises(SingularSystemError):
        solve_system_2(1.0, 2.0, 3.0, 2.0, 4.0, 5.0)


def test_tridiagonal_boundaries_kept():
    n = 5
    ones = [1.0] * n
    x = solve_tridiagonal_system(n, 1.5, -2.5, ones, [-2.0] * n, ones, [0.5] * n)
    assert len(x) == n + 1
    assert x[0] == pytest.approx(1.5)
    assert x[n] == -2.5


def test_tridiagonal_residuals_vanish():
    n = 6
    a = [0.0, 1.0, 2.0, 1.0, 0.5, 1.0]
    c = [0.0, -4.0, -5.0, -4.0, -3.0, -4.0]
    b = [0.0, 1.0, 1.0, 2.0, 1.0, 1.0]
    f = [0.0, 1.0, -2.0, 3.0, 0.0, 1.0]
    x = solve_tridiagonal_system(n, 1.0, 2.0, a, c, b, f)
    for i in range(1, n):
        assert a[i] * x[i - 1] + c[i] * x[i] + b[i] * x[i + 1] == pytest.approx(f[i])


def test_tridiagonal_linear_profile():
    n = 4
    ones = [1.0] * n
    x = solve_tridiagonal_system(n, 0.0, 4.0, ones, [-2.0] * n, ones, [0.0] * n)
    assert x == pytest.approx([0.0, 1.0, 2.0, 3.0, 4.0])


def test_tridiagonal_zero_divisor():
    n = 3
    zeros = [0.0] * n
    with pytest.raises(SingularSystemError):
        solve_tridiagonal_system(n, 0.0, 1.0, zeros, zeros, zeros, zeros)