"""Quadratic least-squares regression with tangent-line exploration."""

from parabola_fit.curve import derivative, evaluate, sample_curve
from parabola_fit.equations import (
    format_number,
    format_quadratic,
    format_tangent,
    quadratic_to_latex,
)
from parabola_fit.errors import ErrorKind, ParabolaFitError
from parabola_fit.fitting import QuadraticFitter, fit
from parabola_fit.models import (
    Coefficients,
    CurvePoint,
    FitResult,
    Sample,
    TangentDescriptor,
)
from parabola_fit.service import Outcome, ParabolaAnalysisService, ParabolaSession
from parabola_fit.tangent import critical_point, tangent_at, tangent_segment, vertex

__all__ = [
    "Coefficients",
    "CurvePoint",
    "ErrorKind",
    "FitResult",
    "Outcome",
    "ParabolaAnalysisService",
    "ParabolaFitError",
    "ParabolaSession",
    "QuadraticFitter",
    "Sample",
    "TangentDescriptor",
    "critical_point",
    "derivative",
    "evaluate",
    "fit",
    "format_number",
    "format_quadratic",
    "format_tangent",
    "quadratic_to_latex",
    "sample_curve",
    "tangent_at",
    "tangent_segment",
    "vertex",
]
