"""Real roots of quadratic and cubic equations, nearest-root selection."""

from __future__ import annotations

import cmath
import math
from collections.abc import Sequence

from caesar.basics import is_zero

__all__ = [
    "find_real_roots_eq2",
    "find_real_roots_eq3",
    "nearest_root",
    "directed_nearest_root",
]


def find_real_roots_eq2(a: float, b: float, c: float) -> list[float]:
    """Real roots of ``a x^2 + b x + c = 0``.

    Returns no roots for a degenerate (``a == 0``) equation or a negative
    discriminant, otherwise two roots (possibly equal).
    """
    if is_zero(a):
        return []
    d = b * b - 4.0 * a * c
    if d < 0.0:
        return []
    sd = math.sqrt(d)
    return [(-b + sd) / (2.0 * a), (-b - sd) / (2.0 * a)]


def find_real_roots_eq3(
    a: float,
    b: float,
    c: float,
    d: float,
    eps_ai_bi_zero: float,
    eps_image: float,
) -> list[float]:
    """Real roots of ``a x^3 + b x^2 + c x + d = 0`` by Cardano's formula.

    ``eps_ai_bi_zero`` is the tolerance for pairing the cube roots and
    ``eps_image`` the largest imaginary part still treated as real.
    Returns up to three roots, possibly equal.
    """
    if is_zero(a):
        return find_real_roots_eq2(b, c, d)

    p = (3.0 * a * c - b * b) / (3.0 * a * a)
    q = (2.0 * b * b * b - 9.0 * a * b * c + 27.0 * a * a * d) / (27.0 * a * a * a)

    s_q = cmath.sqrt(complex(p * p * p / 27.0 + q * q / 4.0, 0.0))
    s = complex(0.0, math.sqrt(3.0))
    w1 = (-1.0 + s) / 2.0
    w2 = (-1.0 - s) / 2.0

    alfa = (-q / 2.0 + s_q) ** (1.0 / 3.0)
    beta = (-q / 2.0 - s_q) ** (1.0 / 3.0)
    alfas = (alfa, alfa * w1, alfa * w2)
    betas = (beta, beta * w1, beta * w2)

    shift = b / (3.0 * a)
    roots: list[float] = []
    for ai in alfas:
        for bj in betas:
            if abs(ai * bj + p / 3.0) < eps_ai_bi_zero:
                x = ai + bj - shift
                if abs(x.imag) < eps_image:
                    roots.append(x.real)
                break
    return roots


def nearest_root(x: float, roots: Sequence[float]) -> float:
    """Return the root closest to ``x``, or ``x`` itself if there are none."""
    best = x
    best_diff = math.inf
    for r in roots:
        diff = abs(r - x)
        if diff < best_diff:
            best, best_diff = r, diff
    return best


def directed_nearest_root(
    x: float,
    roots: Sequence[float],
    direction: float,
    max_possible_diff: float,
) -> float:
    """Nearest root to ``x``, preferring the given direction.

    With ``direction > 0`` the closest root above ``x`` (within
    ``max_possible_diff``) wins, with ``direction < 0`` the closest below;
    otherwise, or when no such root exists, the plain nearest root is used.
    """
    best = nearest_root(x, roots)
    if direction > 0.0:
        candidates = [r for r in roots if r > x]
    elif direction < 0.0:
        candidates = [r for r in roots if r < x]
    else:
        return best

    best_diff = math.inf
    for r in candidates:
        diff = abs(r - x)
        if diff < best_diff and diff < max_possible_diff:
            best, best_diff = r, diff
    return best