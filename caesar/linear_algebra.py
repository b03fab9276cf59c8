"""Small dense linear algebra on lists of rows."""

from __future__ import annotations

from collections.abc import Sequence

from caesar.poly_eqn import find_real_roots_eq3

__all__ = [
    "transpose",
    "dot_matrix_vector",
    "dot_matrices",
    "promote_leader",
    "mul_and_add_line",
    "det_3x3",
    "find_matrix_3x3_real_eigenvalues",
]

Matrix = list[list[float]]


def transpose(m: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of a matrix given as a sequence of rows."""
    return [list(column) for column in zip(*m)]


def dot_matrix_vector(m: Sequence[Sequence[float]], v: Sequence[float]) -> list[float]:
    """Return the product of matrix ``m`` and vector ``v``."""
    if m and len(m[0]) != len(v):
        raise ValueError("wrong matrices sizes for dot")
    return [sum((mij * vj for mij, vj in zip(row, v)), 0.0) for row in m]


def dot_matrices(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix product ``a * b``."""
    if a and len(a[0]) != len(b):
        raise ValueError("wrong matrices sizes for dot")
    columns = transpose(b)
    return [
        [sum((aik * bkj for aik, bkj in zip(row, col)), 0.0) for col in columns]
        for row in a
    ]


def promote_leader(m: list[list[float]], pos: int) -> None:
    """Swap into row ``pos`` the row with the largest ``|m[i][pos]|`` for ``i >= pos``.

    The matrix is changed in place.
    """
    n = len(m)
    if pos >= n - 1:
        return
    max_pos = pos
    max_val = abs(m[pos][pos])
    for i in range(pos + 1, n):
        cur_val = abs(m[i][pos])
        if cur_val > max_val:
            max_pos, max_val = i, cur_val
    if max_pos != pos:
        m[pos], m[max_pos] = m[max_pos], m[pos]


def mul_and_add_line(m: list[list[float]], i: int, f: float, j: int) -> None:
    """Add row ``i`` multiplied by ``f`` to row ``j``, in place."""
    m[j] = [dst + src * f for dst, src in zip(m[j], m[i])]


def det_3x3(m: Sequence[Sequence[float]]) -> float:
    """Return the determinant of a 3x3 matrix."""
    (a, b, c), (d, e, f), (g, h, i) = m
    return (a * e * i) + (b * f * g) + (c * d * h) - (c * e * g) - (b * d * i) - (a * f * h)


def find_matrix_3x3_real_eigenvalues(m: Sequence[Sequence[float]]) -> list[float]:
    """Return the real eigenvalues of a 3x3 matrix, largest first.

    The eigenvalues are the real roots of the characteristic cubic.
    """
    (a, b, c), (d, e, f), (g, h, i) = m

    coef_a = -1.0
    coef_b = a + e + i
    coef_c = -(a * e) - (a * i) - (e * i) + (c * g) + (f * h) + (b * d)
    coef_d = (a * e * i) + (c * d * h) + (b * f * g) - (e * c * g) - (a * f * h) - (i * b * d)

    roots = find_real_roots_eq3(coef_a, coef_b, coef_c, coef_d, 1.0e-15, 1.0e-15)
    return sorted(roots, reverse=True)