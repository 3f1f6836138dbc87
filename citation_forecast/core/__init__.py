"""
Citation Forecast - Core

Pure, deterministic transformation from a citation history to a selected
growth model and its forecast. Nothing in this package performs I/O.

Modules:
    time_series: Observation / TimeSeries / ModelKind data model
    growth_models: Pure Linear, Exponential and Asymptotic model functions
    series_validator: Year-range filtering and normalization
    fitting: Model fitters, AIC quality metrics and selection
    forecasting: Extrapolation of the selected model
"""

from .growth_models import asymptotic_func, evaluate_model, exponential_func, linear_func
from .series_validator import MINIMUM_DATA_POINTS, validate
from .time_series import ModelKind, Observation, TimeSeries, as_time_series

__all__ = [
    'asymptotic_func',
    'evaluate_model',
    'exponential_func',
    'linear_func',
    'MINIMUM_DATA_POINTS',
    'validate',
    'ModelKind',
    'Observation',
    'TimeSeries',
    'as_time_series',
]
