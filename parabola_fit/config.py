from __future__ import annotations

from dataclasses import dataclass

# Demonstration data set: points on y = x².
SAMPLE_POINTS: tuple[tuple[float, float], ...] = (
    (-2.0, 4.0),
    (-1.0, 1.0),
    (0.0, 0.0),
    (1.0, 1.0),
    (2.0, 4.0),
    (3.0, 9.0),
)


@dataclass(frozen=True, slots=True)
class AnalysisSettings:
    precision: int = 3               # digits after the decimal point in equations
    r_squared_precision: int = 4
    curve_steps: int = 100
    curve_padding: float = 0.2       # chart range = data range widened by 20 % per side
    explorer_padding: float = 0.1
    explorer_divisions: int = 100    # explorer step = explorer range / divisions
    tangent_span_fraction: float = 0.4

    def __post_init__(self) -> None:
        if not (0 <= self.precision <= 10):
            raise ValueError(f"precision must be in [0, 10], got {self.precision}")
        if not (0 <= self.r_squared_precision <= 10):
            raise ValueError(
                f"r_squared_precision must be in [0, 10], got {self.r_squared_precision}"
            )
        if self.curve_steps < 2:
            raise ValueError(f"curve_steps must be at least 2, got {self.curve_steps}")
        if self.curve_padding < 0:
            raise ValueError(f"curve_padding cannot be negative, got {self.curve_padding}")
        if self.explorer_padding < 0:
            raise ValueError(
                f"explorer_padding cannot be negative, got {self.explorer_padding}"
            )
        if self.explorer_divisions < 1:
            raise ValueError(
                f"explorer_divisions must be positive, got {self.explorer_divisions}"
            )
        if self.tangent_span_fraction <= 0:
            raise ValueError(
                f"tangent_span_fraction must be positive, got {self.tangent_span_fraction}"
            )
