"""Solving small systems of linear equations."""

from __future__ import annotations

from collections.abc import Sequence

from caesar.basics import is_zero

__all__ = ["SingularSystemError", "solve_system_2", "solve_tridiagonal_system"]


class SingularSystemError(ArithmeticError):
    """Raised when a system cannot be solved because of a zero divisor."""


def solve_system_2(
    a1: float, b1: float, c1: float, a2: float, b2: float, c2: float
) -> tuple[float, float]:
    """Solve ``a1 x + b1 y + c1 = 0``, ``a2 x + b2 y + c2 = 0``.

    Returns ``(x, y)``; raises SingularSystemError if the determinant is zero.
    """
    d = a1 * b2 - a2 * b1
    if is_zero(d):
        raise SingularSystemError("system of two equations is degenerate")
    x = -(c1 * b2 - c2 * b1) / d
    y = -(c1 * a2 - c2 * a1) / (-d)
    return x, y


def solve_tridiagonal_system(
    n: int,
    q0: float,
    qn: float,
    a: Sequence[float],
    c: Sequence[float],
    b: Sequence[float],
    f: Sequence[float],
) -> list[float]:
    """Solve ``a[i] x[i-1] + c[i] x[i] + b[i] x[i+1] = f[i]`` for ``i = 1..n-1``.

    The boundary values are ``x[0] = q0`` and ``x[n] = qn``. Coefficient
    sequences are indexed by equation number, so they need at least ``n``
    elements and element 0 is not used. Returns ``x[0..n]``; raises
    SingularSystemError on division by zero.
    """
    alfa = [0.0] * (n + 1)
    beta = [0.0] * (n + 1)
    beta[1] = q0

    for i in range(1, n):
        d = a[i] * alfa[i] + c[i]
        if is_zero(d):
            raise SingularSystemError("division by zero in tridiagonal system")
        alfa[i + 1] = -b[i] / d
        beta[i + 1] = (f[i] - a[i] * beta[i]) / d

    x = [0.0] * (n + 1)
    x[n] = qn
    for i in reversed(range(n)):
        x[i] = alfa[i + 1] * x[i + 1] + beta[i + 1]
    return x