"""
Deterministic extrapolation of a selected growth model
"""

import numbers
from typing import List, NamedTuple

from ..fitting.fitter import FittedModel
from ..time_series import TimeSeries

DEFAULT_HORIZON = 10


class ForecastPoint(NamedTuple):
    year: int
    citation_count: float


def check_horizon(horizon) -> int:
    if isinstance(horizon, bool) or not isinstance(horizon, numbers.Integral) or horizon < 0:
        raise ValueError(f"horizon must be a non-negative integer, got {horizon!r}")
    return int(horizon)


def forecast_years(series: TimeSeries, horizon: int = DEFAULT_HORIZON) -> List[int]:
    """The horizon consecutive years following the last observation"""
    horizon = check_horizon(horizon)
    start = series.max_year + 1
    return list(range(start, start + horizon))


def forecast(series: TimeSeries, best_model: FittedModel,
             horizon: int = DEFAULT_HORIZON) -> List[ForecastPoint]:
    """
    Extrapolate best_model over the horizon years after max(series.year)

    Predictions are returned unrounded and unclamped.
    """
    return [ForecastPoint(year, best_model.predict(year)) for year in forecast_years(series, horizon)]
