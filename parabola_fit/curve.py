from __future__ import annotations

import math

import numpy as np

from parabola_fit.errors import InvalidInputError
from parabola_fit.models import Coefficients, CurvePoint


def _finite(name: str, value: float) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a real number, got {value!r}") from exc
    if not math.isfinite(v):
        raise InvalidInputError(f"{name} must be finite, got {v}")
    return v


def evaluate(coefficients: Coefficients, x: float) -> float:
    x = _finite("x", x)
    a, b, c = coefficients.as_tuple()
    return a * x * x + b * x + c


def derivative(coefficients: Coefficients, x: float) -> float:
    x = _finite("x", x)
    return 2.0 * coefficients.a * x + coefficients.b


def sample_curve(coefficients: Coefficients, x_min: float, x_max: float,
                 steps: int = 100) -> list[CurvePoint]:
    """Evenly spaced curve points from ``x_min`` to ``x_max`` inclusive.

    ``x_i = x_min + i * (x_max - x_min) / (steps - 1)``; a single step
    yields just the point at ``x_min``.
    """
    x_min = _finite("x_min", x_min)
    x_max = _finite("x_max", x_max)
    if isinstance(steps, bool) or not isinstance(steps, (int, np.integer)) or steps < 1:
        raise InvalidInputError(f"steps must be a positive integer, got {steps!r}")
    steps = int(steps)

    if steps == 1:
        xs = np.array([x_min], dtype=np.float64)
    else:
        step = (x_max - x_min) / (steps - 1)
        xs = x_min + np.arange(steps, dtype=np.float64) * step
    a, b, c = coefficients.as_tuple()
    ys = a * xs * xs + b * xs + c
    return [CurvePoint(float(x), float(y)) for x, y in zip(xs, ys)]
