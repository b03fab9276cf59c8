"""Eigenvalues and eigenvectors of 3x3 matrices."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

__all__ = ["calc_eigenvalues_and_eigenvectors"]


def calc_eigenvalues_and_eigenvectors(
    m: Sequence[Sequence[float]],
) -> tuple[list[float], list[list[float]]]:
    """Return ``(values, vectors)`` for a 3x3 matrix.

    Values are the real parts of the eigenvalues in ascending order;
    ``vectors[i]`` is the (real part of the) unit eigenvector for
    ``values[i]``.
    """
    a = np.asarray(m, dtype=float)
    if a.shape != (3, 3):
        raise ValueError("we work only with 3x3 matrix")

    vals, vecs = np.linalg.eig(a)
    values = [float(v) for v in np.real(vals)]
    vectors = [[float(x) for x in np.real(vecs[:, i])] for i in range(3)]

    order = sorted(range(3), key=lambda i: values[i])
    return [values[i] for i in order], [vectors[i] for i in order]