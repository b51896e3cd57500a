from __future__ import annotations

import pytest

from parabola_fit.errors import (
    DuplicateOrDegenerateXError,
    InsufficientDataError,
    InvalidInputError,
)
from parabola_fit.models import Sample
from parabola_fit.preprocessing import (
    as_samples,
    find_range,
    padded_range,
    parse_rows,
    validate_samples,
)


def test_as_samples_accepts_mixed_records() -> None:
    samples = as_samples([Sample(1.0, 2.0), {"x": 3, "y": 4, "index": 7}, (5, 6)])
    assert samples == (Sample(1.0, 2.0), Sample(3.0, 4.0, 7), Sample(5.0, 6.0))


@pytest.mark.parametrize("points", [
    [{"x": 1.0}],
    [(1.0, 2.0, 3.0)],
    [42],
    [("a", 1.0)],
    [(float("nan"), 1.0)],
])
def test_as_samples_rejects_malformed_points(points: list[object]) -> None:
    with pytest.raises(InvalidInputError):
        as_samples(points)


def test_parse_rows_skips_blank_and_invalid_rows() -> None:
    rows = [("1", "2"), ("", "3"), ("abc", "1"), (" 4 ", "5.5"), ("inf", "1"), ("7",)]
    assert parse_rows(rows) == [Sample(1.0, 2.0, 0), Sample(4.0, 5.5, 3)]


def test_validate_accepts_distinct_x() -> None:
    validate_samples(as_samples([(0, 0), (1, 1), (2, 4)]), strict_unique_x=True)


def test_validate_too_few() -> None:
    with pytest.raises(InsufficientDataError):
        validate_samples(as_samples([(0, 0), (1, 1)]))


def test_validate_all_x_equal() -> None:
    with pytest.raises(DuplicateOrDegenerateXError, match="same"):
        validate_samples(as_samples([(2, 0), (2, 1), (2, 4)]))


def test_validate_strict_rejects_repeated_x() -> None:
    samples = as_samples([(0, 0), (1, 1), (1, 2), (2, 4)])
    validate_samples(samples)
    with pytest.raises(DuplicateOrDegenerateXError, match="Duplicate"):
        validate_samples(samples, strict_unique_x=True)


def test_find_range() -> None:
    assert find_range([3.0, -1.0, 2.0]) == (-1.0, 3.0)
    assert find_range([]) == (0.0, 1.0)


def test_padded_range() -> None:
    assert padded_range([0.0, 10.0], 0.1) == pytest.approx((-1.0, 11.0))
    assert padded_range([-2.0, 3.0], 0.2) == pytest.approx((-3.0, 4.0))
