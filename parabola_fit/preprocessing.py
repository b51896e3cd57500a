from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Iterable, Optional, Sequence

import numpy as np

from parabola_fit.errors import (
    DuplicateOrDegenerateXError,
    InsufficientDataError,
    InvalidInputError,
)
from parabola_fit.models import Sample

MIN_SAMPLES: int = 3
MIN_DISTINCT_X: int = 3


def as_samples(points: Iterable[object]) -> tuple[Sample, ...]:
    """Coerce Samples, ``{"x": .., "y": ..}`` mappings or ``(x, y)`` pairs to Samples."""
    result = []
    for i, p in enumerate(points):
        if isinstance(p, Sample):
            result.append(p)
        elif isinstance(p, Mapping):
            try:
                result.append(Sample(p["x"], p["y"], p.get("index")))
            except KeyError as exc:
                raise InvalidInputError(f"point {i + 1} is missing {exc.args[0]!r}") from exc
        else:
            try:
                x, y = p  # type: ignore[misc]
            except (TypeError, ValueError) as exc:
                raise InvalidInputError(f"point {i + 1} is not an (x, y) pair: {p!r}") from exc
            result.append(Sample(x, y))
    return tuple(result)


def _parse_cell(text: object) -> Optional[float]:
    s = str(text).strip() if text is not None else ""
    if not s:
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    return v if math.isfinite(v) else None


def parse_rows(rows: Iterable[Sequence[object]]) -> list[Sample]:
    """Build Samples from raw table rows, skipping blank or non-numeric rows.

    Each Sample keeps the index of the row it was read from.
    """
    samples = []
    for index, row in enumerate(rows):
        if len(row) < 2:
            continue
        x, y = _parse_cell(row[0]), _parse_cell(row[1])
        if x is None or y is None:
            continue
        samples.append(Sample(x, y, index))
    return samples


def validate_samples(samples: Sequence[Sample], strict_unique_x: bool = False) -> None:
    if len(samples) < MIN_SAMPLES:
        raise InsufficientDataError(
            f"At least {MIN_SAMPLES} data points are required for quadratic regression, "
            f"got {len(samples)}."
        )
    distinct = len({s.x for s in samples})
    if distinct == 1:
        raise DuplicateOrDegenerateXError(
            "All x-values are the same. Please provide different x-values."
        )
    if strict_unique_x and distinct != len(samples):
        raise DuplicateOrDegenerateXError(
            "Duplicate x-values found. Each x-value must be unique."
        )
    if distinct < MIN_DISTINCT_X:
        raise DuplicateOrDegenerateXError(
            f"Only {distinct} distinct x-values; a quadratic needs at least {MIN_DISTINCT_X}."
        )


def find_range(values: Iterable[float]) -> tuple[float, float]:
    arr = np.fromiter((float(v) for v in values), dtype=np.float64)
    if arr.size == 0:
        return 0.0, 1.0
    return float(np.min(arr)), float(np.max(arr))


def padded_range(values: Iterable[float], padding: float) -> tuple[float, float]:
    lo, hi = find_range(values)
    pad = (hi - lo) * padding
    return lo - pad, hi + pad
