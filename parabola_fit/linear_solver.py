from __future__ import annotations

from typing import Sequence

import numpy as np

from parabola_fit.errors import DegenerateSystemError, InvalidInputError
from parabola_fit.models import FloatArray


def solve(matrix: Sequence[Sequence[float]] | FloatArray,
          rhs: Sequence[float] | FloatArray) -> FloatArray:
    """Solve ``matrix @ s = rhs`` by Gaussian elimination with partial pivoting.

    A pivot whose magnitude does not exceed ``n * eps * max|matrix|`` is
    treated as zero and the system is reported as singular.
    """
    a = np.array(matrix, dtype=np.float64)
    v = np.array(rhs, dtype=np.float64)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise InvalidInputError(f"matrix must be square, got shape {a.shape}")
    n = a.shape[0]
    if v.shape != (n,):
        raise InvalidInputError(f"rhs must have length {n}, got shape {v.shape}")
    if not (np.all(np.isfinite(a)) and np.all(np.isfinite(v))):
        raise InvalidInputError("matrix and rhs must be finite")

    aug: FloatArray = np.column_stack((a, v))
    scale = float(np.max(np.abs(a))) if n else 0.0
    tol = n * float(np.finfo(np.float64).eps) * scale

    # Forward elimination
    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(aug[i:, i])))
        if pivot_row != i:
            aug[[i, pivot_row]] = aug[[pivot_row, i]]
        pivot = float(aug[i, i])
        if abs(pivot) <= tol:
            raise DegenerateSystemError(
                f"matrix is singular: pivot {pivot:.3e} in column {i}"
            )
        for k in range(i + 1, n):
            factor = aug[k, i] / pivot
            aug[k, i:] -= factor * aug[i, i:]

    # Back substitution
    solution = np.zeros(n, dtype=np.float64)
    for i in range(n - 1, -1, -1):
        acc = aug[i, n] - float(np.dot(aug[i, i + 1:n], solution[i + 1:]))
        solution[i] = acc / aug[i, i]

    if not np.all(np.isfinite(solution)):
        raise DegenerateSystemError("solution is not finite")
    return solution
