"""
AIC-based model selection

Candidates are ranked by ascending AIC; equal AIC values fall back to the
ModelKind priority (Linear, Exponential, Asymptotic). The ranking depends only
on the candidate set, never on the order in which candidates are supplied.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

import numpy as np

from .fitter import FittedModel
from ...infrastructure.error_handling import FitError, SelectionError, SelectionErrorKind


@dataclass(frozen=True)
class ModelRanking:
    """One ranked candidate"""
    rank: int
    model: FittedModel
    delta_aic: float
    akaike_weight: float

    def to_dict(self) -> Dict:
        return {
            'rank': self.rank,
            'model': self.model.kind.label,
            'aic': self.model.aic,
            'delta_aic': self.delta_aic,
            'akaike_weight': self.akaike_weight
        }


def _selection_key(fit: FittedModel):
    return (fit.aic, fit.kind.priority)


def rank_models(fits: Iterable[FittedModel],
                fit_errors: Sequence[FitError] = ()) -> List[ModelRanking]:
    """
    Rank successful fits by AIC with Akaike weights

    Raises:
        SelectionError(NO_VIABLE_MODEL): no successful fit was supplied
    """
    ordered = sorted(fits, key=_selection_key)
    if not ordered:
        raise SelectionError(
            SelectionErrorKind.NO_VIABLE_MODEL,
            "every growth model failed to fit",
            fit_errors=fit_errors
        )

    aic = np.array([fit.aic for fit in ordered], dtype=float)
    delta = aic - aic[0]
    relative_likelihood = np.exp(-0.5 * delta)
    weights = relative_likelihood / relative_likelihood.sum()

    return [
        ModelRanking(rank=i + 1, model=fit, delta_aic=float(d), akaike_weight=float(w))
        for i, (fit, d, w) in enumerate(zip(ordered, delta, weights))
    ]


def select(fits: Iterable[FittedModel], fit_errors: Sequence[FitError] = ()) -> FittedModel:
    """Return the minimum-AIC fit, ties broken by model priority"""
    return rank_models(fits, fit_errors)[0].model
