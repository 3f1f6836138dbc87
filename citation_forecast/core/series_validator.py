"""
Series validation and normalization before fitting
"""

import math
import numbers
from typing import Any, Optional, Tuple

from .time_series import Observation, TimeSeries, as_time_series
from ..infrastructure.error_handling import DataError, DataErrorKind

MINIMUM_DATA_POINTS = 3


def check_year_range(year_range: Tuple[int, int]) -> Tuple[int, int]:
    """Return (low, high) or raise ValueError for an inverted or malformed range"""
    try:
        low, high = year_range
    except (TypeError, ValueError) as e:
        raise ValueError(f"year_range must be a (low, high) pair, got {year_range!r}") from e
    if low > high:
        raise ValueError(f"year_range low ({low}) is greater than high ({high})")
    return low, high


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _coerce(series: Any) -> TimeSeries:
    try:
        return as_time_series(series)
    except (TypeError, ValueError, KeyError) as e:
        raise DataError(
            DataErrorKind.INVALID_OBSERVATION,
            f"history is not a sequence of (year, citation_count) observations: {e}"
        ) from e


def _check_year(year: Any):
    if not _is_number(year):
        raise DataError(DataErrorKind.INVALID_OBSERVATION, f"year {year!r} is not a number")
    return year


def _check_observation(obs: Observation) -> Observation:
    year, count = obs
    if not float(year).is_integer():
        raise DataError(DataErrorKind.INVALID_OBSERVATION, f"year {year!r} is not an integer")
    if count is None:
        raise DataError(DataErrorKind.INVALID_OBSERVATION, f"missing citation count for {year}")
    if not _is_number(count):
        raise DataError(
            DataErrorKind.INVALID_OBSERVATION,
            f"citation count for {int(year)} is not a number: {count!r}"
        )
    count = float(count)
    if not math.isfinite(count) or count < 0:
        raise DataError(
            DataErrorKind.INVALID_OBSERVATION,
            f"citation count for {int(year)} must be finite and non-negative, got {count}"
        )
    return Observation(int(year), count)


def validate(series: Any, year_range: Tuple[int, int],
             minimum_data_points: Optional[int] = None) -> TimeSeries:
    """
    Filter a raw series to year_range and normalize it for fitting

    Observations outside [low, high] are dropped, duplicate years keep the
    last occurrence, and the result is sorted by ascending year.

    Raises:
        DataError(INSUFFICIENT_POINTS): fewer than minimum_data_points remain
        DataError(INVALID_OBSERVATION): the history cannot be read as
            observations, a year is not numeric, or a kept observation is
            malformed
        ValueError: year_range is inverted
    """
    low, high = check_year_range(year_range)
    minimum = MINIMUM_DATA_POINTS if minimum_data_points is None else minimum_data_points
    series = _coerce(series)

    by_year = {}
    for obs in series:
        if obs.year is None:
            continue
        if not (low <= _check_year(obs.year) <= high):
            continue
        checked = _check_observation(obs)
        # dict assignment keeps the last duplicate
        by_year[checked.year] = checked

    if len(by_year) < minimum:
        raise DataError(
            DataErrorKind.INSUFFICIENT_POINTS,
            f"{len(by_year)} observation(s) in [{low}, {high}], at least {minimum} required",
            n_points=len(by_year)
        )

    return TimeSeries(tuple(by_year[year] for year in sorted(by_year)))
