"""
Citation Forecast

Fits Linear, Exponential and Asymptotic growth models to a researcher's
cumulative citation history, selects the minimum-AIC model and extrapolates
it over a fixed horizon.

Layers:
    core: pure data model, validation, fitting, selection and forecasting
    analysis: batch pipeline, comparison dataset and percentile ranks
    infrastructure: configuration, error types and logging setup
"""

from .analysis import (BatchResult, ComparisonDataset, ForecastResult, ResearcherMetrics,
                       aggregate, analyze, analyze_entities, analyze_entity,
                       percentile_rank, percentile_table)
from .core import ModelKind, Observation, TimeSeries, validate
from .core.fitting import FittedModel, fit_all, rank_models, select
from .core.forecasting import forecast
from .infrastructure.error_handling import (CitationForecastError, DataError, EntityFailure,
                                            FitError, RetrievalError, SelectionError)

__version__ = "1.0.0"

__all__ = [
    'BatchResult',
    'ComparisonDataset',
    'ForecastResult',
    'ResearcherMetrics',
    'aggregate',
    'analyze',
    'analyze_entities',
    'analyze_entity',
    'percentile_rank',
    'percentile_table',
    'ModelKind',
    'Observation',
    'TimeSeries',
    'validate',
    'FittedModel',
    'fit_all',
    'rank_models',
    'select',
    'forecast',
    'CitationForecastError',
    'DataError',
    'EntityFailure',
    'FitError',
    'RetrievalError',
    'SelectionError',
]
