from __future__ import annotations

import math

from parabola_fit.curve import derivative, evaluate
from parabola_fit.equations import format_tangent
from parabola_fit.errors import InvalidInputError, NoCriticalPointError
from parabola_fit.models import Coefficients, CurvePoint, TangentDescriptor


def tangent_segment(x0: float, y0: float, slope: float,
                    span: float) -> tuple[CurvePoint, CurvePoint]:
    """Endpoints of the tangent line at x0 - span/2 and x0 + span/2 (point-slope form)."""
    for name, v in (("x0", x0), ("y0", y0), ("slope", slope), ("span", span)):
        if not math.isfinite(v):
            raise InvalidInputError(f"{name} must be finite, got {v}")
    x_start = x0 - span / 2
    x_end = x0 + span / 2
    return (
        CurvePoint(x_start, y0 + slope * (x_start - x0)),
        CurvePoint(x_end, y0 + slope * (x_end - x0)),
    )


def critical_point(coefficients: Coefficients) -> float:
    a, b, _ = coefficients.as_tuple()
    if a == 0:
        raise NoCriticalPointError("a = 0: the curve is a line and has no critical point")
    return -b / (2 * a)


def vertex(coefficients: Coefficients) -> CurvePoint:
    x = critical_point(coefficients)
    return CurvePoint(x, evaluate(coefficients, x))


def tangent_angle(slope: float) -> float:
    """Inclination of a line with *slope*, in degrees."""
    return math.degrees(math.atan(slope))


def tangent_at(coefficients: Coefficients, x0: float, span: float,
               precision: int = 3) -> TangentDescriptor:
    y0 = evaluate(coefficients, x0)
    slope = derivative(coefficients, x0)
    return TangentDescriptor(
        point=CurvePoint(float(x0), y0),
        slope=slope,
        equation=format_tangent(x0, y0, slope, precision),
        segment=tangent_segment(x0, y0, slope, span),
        angle=tangent_angle(slope),
    )
