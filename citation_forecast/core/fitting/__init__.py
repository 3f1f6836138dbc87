"""
Growth model fitting and selection

Main Components:
    - LinearFitter / ExponentialFitter / AsymptoticFitter: one fitter per growth form
    - fit_all: run the closed set of fitters, collecting failures
    - rank_models / select: AIC ranking with priority tie-break
"""

from .fitter import (
    AsymptoticFitter,
    ExponentialFitter,
    FittedModel,
    GrowthModelFitter,
    LinearFitter,
    NonlinearFitter,
    default_fitters,
    fit_all,
)
from .quality import calculate_fit_metrics
from .selection import ModelRanking, rank_models, select

__all__ = [
    'AsymptoticFitter',
    'ExponentialFitter',
    'FittedModel',
    'GrowthModelFitter',
    'LinearFitter',
    'NonlinearFitter',
    'default_fitters',
    'fit_all',
    'calculate_fit_metrics',
    'ModelRanking',
    'rank_models',
    'select',
]
