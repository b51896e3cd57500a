from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, TypeVar

from parabola_fit.config import AnalysisSettings
from parabola_fit.curve import sample_curve
from parabola_fit.equations import format_number, format_quadratic, quadratic_to_latex
from parabola_fit.errors import ParabolaFitError
from parabola_fit.fitting import QuadraticFitter
from parabola_fit.models import Coefficients, CurvePoint, FitResult, TangentDescriptor
from parabola_fit.preprocessing import as_samples, padded_range, validate_samples
from parabola_fit.tangent import critical_point, tangent_at

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Either a value or the ParabolaFitError that prevented it."""

    value: Optional[T] = None
    error: Optional[ParabolaFitError] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def _attempt(label: str, func: Callable[[], T]) -> Outcome[T]:
    try:
        return Outcome(value=func())
    except ParabolaFitError as exc:
        logger.warning(f"{label} failed ({exc.kind.value}): {exc.message}")
        return Outcome(error=exc)


# ===========================================================================
# Analysis service
# ===========================================================================

class ParabolaAnalysisService:
    """Library boundary: every call returns an Outcome instead of raising.

    The service holds settings only. Fit results are returned to the
    caller, who decides when to refit.
    """

    def __init__(self, settings: Optional[AnalysisSettings] = None,
                 strict_unique_x: bool = False) -> None:
        self.settings = settings or AnalysisSettings()
        self.strict_unique_x = strict_unique_x
        self._fitter = QuadraticFitter()

    def fit(self, samples: Iterable[object]) -> Outcome[FitResult]:
        def run() -> FitResult:
            points = as_samples(samples)
            logger.debug(f"Fitting quadratic to {len(points)} samples")
            validate_samples(points, strict_unique_x=self.strict_unique_x)
            result = self._fitter.fit(points)
            logger.info(
                f"Fit {self.format_equation(result.coefficients)}, "
                f"R² = {format_number(result.r_squared, self.settings.r_squared_precision)}"
            )
            return result

        return _attempt("Quadratic fit", run)

    def format_equation(self, coefficients: Coefficients) -> str:
        return format_quadratic(coefficients, self.settings.precision)

    def latex(self, coefficients: Coefficients, approx: bool = True) -> str:
        return quadratic_to_latex(coefficients, approx, self.settings.precision)

    def curve(self, result: FitResult) -> Outcome[list[CurvePoint]]:
        """Curve over the sample x-range widened by ``curve_padding`` per side."""
        x_min, x_max = padded_range(result.x, self.settings.curve_padding)
        return _attempt("Curve sampling", lambda: sample_curve(
            result.coefficients, x_min, x_max, self.settings.curve_steps))

    def tangent_at(self, coefficients: Coefficients, x0: float,
                   span: float) -> Outcome[TangentDescriptor]:
        return _attempt("Tangent", lambda: tangent_at(
            coefficients, x0, span, self.settings.precision))

    def critical_point(self, coefficients: Coefficients) -> Outcome[float]:
        return _attempt("Critical point", lambda: critical_point(coefficients))


# ===========================================================================
# Explorer session
# ===========================================================================

class ParabolaSession:
    """Caller-owned state for exploring one fit with a movable tangent.

    ``load`` replaces the current fit wholesale; the explorer range is the
    sample x-range widened by ``explorer_padding`` and starts at its centre.
    """

    def __init__(self, service: Optional[ParabolaAnalysisService] = None) -> None:
        self.service = service or ParabolaAnalysisService()
        self.result: Optional[FitResult] = None
        self.x_min = 0.0
        self.x_max = 1.0
        self.step = 0.01
        self.current_x = 0.5

    @property
    def settings(self) -> AnalysisSettings:
        return self.service.settings

    @property
    def span(self) -> float:
        return (self.x_max - self.x_min) * self.settings.tangent_span_fraction

    def load(self, samples: Iterable[object]) -> Outcome[FitResult]:
        outcome = self.service.fit(samples)
        if not outcome.ok:
            return outcome
        self.result = outcome.value
        self.x_min, self.x_max = padded_range(self.result.x, self.settings.explorer_padding)
        self.step = (self.x_max - self.x_min) / self.settings.explorer_divisions
        self.current_x = (self.x_min + self.x_max) / 2
        logger.debug(
            f"Explorer range [{self.x_min:g}, {self.x_max:g}], step {self.step:g}"
        )
        return outcome

    def _require_fit(self) -> FitResult:
        if self.result is None:
            raise RuntimeError("no fit loaded; call load() first")
        return self.result

    def equation(self) -> str:
        return self.service.format_equation(self._require_fit().coefficients)

    def curve(self) -> Outcome[list[CurvePoint]]:
        return self.service.curve(self._require_fit())

    def tangent(self) -> Outcome[TangentDescriptor]:
        return self.service.tangent_at(self._require_fit().coefficients,
                                       self.current_x, self.span)

    def move_to(self, x: float) -> Outcome[TangentDescriptor]:
        self.current_x = float(x)
        return self.tangent()

    def jump_to_vertex(self) -> Outcome[TangentDescriptor]:
        found = self.service.critical_point(self._require_fit().coefficients)
        if not found.ok:
            return Outcome(error=found.error)
        return self.move_to(found.unwrap())

    def reset_to_center(self) -> Outcome[TangentDescriptor]:
        return self.move_to((self.x_min + self.x_max) / 2)
