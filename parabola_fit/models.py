from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Optional

import numpy as np
from numpy.typing import NDArray

from parabola_fit.errors import InvalidInputError

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------

FloatArray = NDArray[np.floating[Any]]

# Tolerance above 1.0 accepted for R² before a FitResult is rejected.
R_SQUARED_SLACK: float = 1e-12


def _require_finite(name: str, value: float) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must be a real number, got {value!r}") from exc
    if not math.isfinite(v):
        raise InvalidInputError(f"{name} must be finite, got {v}")
    return v


# ===========================================================================
# Data-classes
# ===========================================================================

@dataclass(frozen=True, slots=True)
class Sample:
    """One (x, y) observation.

    ``index`` is the row the sample came from, when the caller tracks it.
    It plays no part in the math.
    """

    x: float
    y: float
    index: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _require_finite("sample x", self.x))
        object.__setattr__(self, "y", _require_finite("sample y", self.y))


@dataclass(frozen=True, slots=True)
class Coefficients:
    """y = a·x² + b·x + c"""

    a: float
    b: float
    c: float

    def __post_init__(self) -> None:
        for name in ("a", "b", "c"):
            object.__setattr__(self, name, _require_finite(f"coefficient {name}",
                                                           getattr(self, name)))

    def as_tuple(self) -> tuple[float, float, float]:
        return self.a, self.b, self.c


@dataclass(frozen=True, slots=True)
class CurvePoint:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class FitResult:
    coefficients: Coefficients
    r_squared: float
    samples: tuple[Sample, ...]
    rmse: float = 0.0

    def __post_init__(self) -> None:
        if len(self.samples) < 3:
            raise ValueError(f"a fit needs at least 3 samples, got {len(self.samples)}")
        if math.isnan(self.r_squared) or self.r_squared > 1.0 + R_SQUARED_SLACK:
            raise ValueError(f"R² must lie in (-inf, 1], got {self.r_squared}")
        if self.rmse < 0:
            raise ValueError(f"RMSE cannot be negative: {self.rmse}")

    @property
    def n(self) -> int:
        return len(self.samples)

    @property
    def x(self) -> FloatArray:
        return np.array([s.x for s in self.samples], dtype=np.float64)

    @property
    def y(self) -> FloatArray:
        return np.array([s.y for s in self.samples], dtype=np.float64)


@dataclass(frozen=True, slots=True)
class TangentDescriptor:
    point: CurvePoint
    slope: float
    equation: str
    segment: tuple[CurvePoint, CurvePoint]
    angle: float

    def __post_init__(self) -> None:
        if not isinstance(self.equation, str):
            raise ValueError("equation must be a string")
        if len(self.segment) != 2:
            raise ValueError(f"segment needs exactly 2 endpoints, got {len(self.segment)}")
