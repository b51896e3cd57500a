from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from parabola_fit.errors import DegenerateSystemError, DegenerateVarianceError
from parabola_fit.linear_solver import solve
from parabola_fit.models import Coefficients, FitResult, FloatArray
from parabola_fit.preprocessing import as_samples, validate_samples

# When every y is identical, a residual RMSE below this fraction of max|y|
# still counts as a perfect fit.
FLAT_RESIDUAL_RTOL: float = 1e-9


def compute_rmse(y_true: FloatArray, y_pred: FloatArray) -> float:
    return float(np.sqrt(np.mean((y_true - y_pred) ** 2)))


def compute_r_squared(y_true: FloatArray, y_pred: FloatArray) -> float:
    """Coefficient of determination, ``1 - SS_res / SS_tot``.

    With no variance to explain (``SS_tot`` is 0, including when it
    underflows) the result is 1.0 when the prediction reproduces ``y_true``
    and ``DegenerateVarianceError`` otherwise.
    """
    with np.errstate(over="ignore", under="ignore"):
        residual_ss = float(np.sum((y_true - y_pred) ** 2))
        total_ss = float(np.sum((y_true - np.mean(y_true)) ** 2))
    if not (math.isfinite(residual_ss) and math.isfinite(total_ss)):
        raise DegenerateSystemError("sums of squares overflow; rescale the samples")
    if total_ss == 0.0 or float(np.ptp(y_true)) == 0.0:
        limit = FLAT_RESIDUAL_RTOL * max(1.0, float(np.max(np.abs(y_true))))
        if compute_rmse(y_true, y_pred) <= limit:
            return 1.0
        raise DegenerateVarianceError(
            f"y-values have no variance but the residual sum of squares is {residual_ss:.3e}"
        )
    return 1.0 - residual_ss / total_ss


def power_sums(x: FloatArray, y: FloatArray) -> dict[str, float]:
    with np.errstate(over="ignore", invalid="ignore"):
        x2 = x * x
        sums = {
            "n": float(len(x)),
            "sx": float(np.sum(x)),
            "sx2": float(np.sum(x2)),
            "sx3": float(np.sum(x2 * x)),
            "sx4": float(np.sum(x2 * x2)),
            "sy": float(np.sum(y)),
            "sxy": float(np.sum(x * y)),
            "sx2y": float(np.sum(x2 * y)),
        }
    return sums


def normal_equations(x: FloatArray, y: FloatArray) -> tuple[FloatArray, FloatArray]:
    """Normal-equations system for the unknowns ordered (c, b, a)."""
    s = power_sums(x, y)
    matrix = np.array([
        [s["n"], s["sx"], s["sx2"]],
        [s["sx"], s["sx2"], s["sx3"]],
        [s["sx2"], s["sx3"], s["sx4"]],
    ], dtype=np.float64)
    rhs = np.array([s["sy"], s["sxy"], s["sx2y"]], dtype=np.float64)
    return matrix, rhs


class QuadraticFitter:
    """Ordinary least-squares fit of y = a·x² + b·x + c.

    Holds no state between calls; every ``fit`` returns a new FitResult
    computed from the samples it was given.
    """

    def fit(self, samples: Iterable[object]) -> FitResult:
        points = as_samples(samples)
        validate_samples(points)

        x = np.array([p.x for p in points], dtype=np.float64)
        y = np.array([p.y for p in points], dtype=np.float64)

        matrix, rhs = normal_equations(x, y)
        if not (np.all(np.isfinite(matrix)) and np.all(np.isfinite(rhs))):
            raise DegenerateSystemError(
                "normal equations overflow; sample values are too large in magnitude"
            )
        c, b, a = (float(v) for v in solve(matrix, rhs))
        coefficients = Coefficients(a=a, b=b, c=c)

        y_pred = self._predict(coefficients, x)
        return FitResult(
            coefficients=coefficients,
            r_squared=compute_r_squared(y, y_pred),
            samples=points,
            rmse=compute_rmse(y, y_pred),
        )

    @staticmethod
    def _predict(coefficients: Coefficients, x: FloatArray) -> FloatArray:
        a, b, c = coefficients.as_tuple()
        return a * x * x + b * x + c


_default_fitter = QuadraticFitter()


def fit(samples: Iterable[object]) -> FitResult:
    return _default_fitter.fit(samples)
