from __future__ import annotations

import dataclasses
import math

import pytest

from parabola_fit.config import SAMPLE_POINTS, AnalysisSettings
from parabola_fit.errors import InvalidInputError
from parabola_fit.models import Coefficients, CurvePoint, FitResult, Sample, TangentDescriptor

SAMPLES = (Sample(0.0, 0.0), Sample(1.0, 1.0), Sample(2.0, 4.0))


def test_sample_coerces_to_float() -> None:
    s = Sample(1, 2, index=4)
    assert (s.x, s.y, s.index) == (1.0, 2.0, 4)
    assert isinstance(s.x, float)


@pytest.mark.parametrize("x, y", [(math.nan, 0.0), (0.0, math.inf), ("x", 1.0)])
def test_sample_rejects_non_finite(x: object, y: object) -> None:
    with pytest.raises(InvalidInputError):
        Sample(x, y)  # type: ignore[arg-type]


def test_records_are_immutable() -> None:
    c = Coefficients(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        c.a = 5.0  # type: ignore[misc]


def test_fit_result_invariants() -> None:
    coeffs = Coefficients(1.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        FitResult(coeffs, 1.5, SAMPLES)
    with pytest.raises(ValueError):
        FitResult(coeffs, math.nan, SAMPLES)
    with pytest.raises(ValueError):
        FitResult(coeffs, 1.0, SAMPLES[:2])
    with pytest.raises(ValueError):
        FitResult(coeffs, 1.0, SAMPLES, rmse=-1.0)


def test_fit_result_arrays() -> None:
    result = FitResult(Coefficients(1.0, 0.0, 0.0), -0.3, SAMPLES)
    assert result.x.tolist() == [0.0, 1.0, 2.0]
    assert result.y.tolist() == [0.0, 1.0, 4.0]


def test_tangent_descriptor_needs_two_endpoints() -> None:
    p = CurvePoint(0.0, 0.0)
    with pytest.raises(ValueError):
        TangentDescriptor(p, 0.0, "y = 0", (p,), 0.0)  # type: ignore[arg-type]


def test_default_settings() -> None:
    settings = AnalysisSettings()
    assert settings.precision == 3
    assert settings.curve_steps == 100
    assert settings.tangent_span_fraction == pytest.approx(0.4)
    assert len(SAMPLE_POINTS) == 6


@pytest.mark.parametrize("field, value", [
    ("precision", -1),
    ("precision", 11),
    ("curve_steps", 1),
    ("curve_padding", -0.1),
    ("explorer_divisions", 0),
    ("tangent_span_fraction", 0.0),
])
def test_settings_validation(field: str, value: float) -> None:
    with pytest.raises(ValueError):
        AnalysisSettings(**{field: value})
