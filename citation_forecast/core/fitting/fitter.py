"""
Growth model fitters

Each fitter fits one functional form to a validated TimeSeries and returns an
immutable FittedModel, or raises FitError when no usable fit exists.
"""

import logging
import time
import warnings
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np
from scipy import stats
from scipy.optimize import OptimizeWarning, curve_fit

from ..growth_models import MODEL_FUNCTIONS, evaluate_model
from ..time_series import ModelKind, TimeSeries
from .quality import calculate_fit_metrics
from ...infrastructure.error_handling import FitError, FitErrorKind

logger = logging.getLogger(__name__)

DEFAULT_MAX_NFEV = 2000
DEFAULT_TIME_BUDGET_SECONDS = None
DEFAULT_INITIAL_RATE = 0.1


@dataclass(frozen=True)
class FittedModel:
    """Result of a successful fit"""
    kind: ModelKind
    parameters: Mapping[str, float]
    origin_year: int
    parameter_count: int
    n_observations: int
    rss: float
    log_likelihood: float
    aic: float
    r_squared: float
    rmse: float

    def __post_init__(self):
        object.__setattr__(self, 'parameters', MappingProxyType(dict(self.parameters)))

    def predict(self, year):
        """Predicted cumulative citations at one year (float) or many (ndarray)"""
        values = evaluate_model(self.kind, year, self.parameters, self.origin_year)
        if np.ndim(year) == 0:
            return float(values)
        return values

    def to_dict(self) -> Dict:
        """辞書形式に変換"""
        return {
            'model': self.kind.label,
            'parameters': dict(self.parameters),
            'origin_year': self.origin_year,
            'parameter_count': self.parameter_count,
            'n_observations': self.n_observations,
            'rss': self.rss,
            'log_likelihood': self.log_likelihood,
            'aic': self.aic,
            'r_squared': self.r_squared,
            'rmse': self.rmse
        }


class _FitBudgetExceeded(Exception):
    pass


class GrowthModelFitter:
    """Common interface of the three growth model fitters"""

    kind: ModelKind = None
    parameter_count: int = 2

    def fit(self, series: TimeSeries) -> FittedModel:
        raise NotImplementedError

    def _build_model(self, series: TimeSeries, parameters: Dict[str, float]) -> FittedModel:
        years = series.years
        counts = series.counts
        origin_year = series.min_year
        with np.errstate(over='ignore', invalid='ignore'):
            predicted = evaluate_model(self.kind, years, parameters, origin_year)

        if not np.all(np.isfinite(predicted)):
            raise FitError(
                FitErrorKind.NO_CONVERGENCE,
                f"{self.kind.label} fit produced non-finite predictions",
                model_kind=self.kind
            )

        metrics = calculate_fit_metrics(counts, predicted, self.parameter_count)
        return FittedModel(
            kind=self.kind,
            parameters={name: float(value) for name, value in parameters.items()},
            origin_year=origin_year,
            parameter_count=self.parameter_count,
            n_observations=len(series),
            **metrics
        )


class LinearFitter(GrowthModelFitter):
    """Ordinary least squares: citations = alpha + beta * year"""

    kind = ModelKind.LINEAR

    def fit(self, series: TimeSeries) -> FittedModel:
        years = series.years
        if len(np.unique(years)) < 2:
            raise FitError(
                FitErrorKind.NO_CONVERGENCE,
                "linear fit needs at least two distinct years",
                model_kind=self.kind
            )

        regression = stats.linregress(years, series.counts)
        return self._build_model(series, {'alpha': regression.intercept, 'beta': regression.slope})


class NonlinearFitter(GrowthModelFitter):
    """
    Nonlinear least squares on t = year - min(year)

    The optimizer is bounded by max_nfev model evaluations and, when set, by
    time_budget_seconds of wall-clock time. Exceeding either budget, an
    optimizer failure, or non-finite parameters raise FitError(NO_CONVERGENCE).

    The wall-clock budget is off by default. Unlike max_nfev it depends on
    host load, so with it set the same series may fit in one run and hit
    NO_CONVERGENCE in another.
    """

    def __init__(self, max_nfev: int = DEFAULT_MAX_NFEV,
                 time_budget_seconds: Optional[float] = DEFAULT_TIME_BUDGET_SECONDS):
        self.max_nfev = max_nfev
        self.time_budget_seconds = time_budget_seconds

    def initial_guess(self, series: TimeSeries) -> Tuple[float, float]:
        raise NotImplementedError

    def _budgeted(self, func):
        if self.time_budget_seconds is None:
            return func
        deadline = time.monotonic() + self.time_budget_seconds

        def budgeted_func(t, a, b):
            if time.monotonic() > deadline:
                raise _FitBudgetExceeded()
            return func(t, a, b)

        return budgeted_func

    def _no_convergence(self, reason: str) -> FitError:
        return FitError(
            FitErrorKind.NO_CONVERGENCE,
            f"{self.kind.label} fit did not converge: {reason}",
            model_kind=self.kind
        )

    def fit(self, series: TimeSeries) -> FittedModel:
        func, names, _ = MODEL_FUNCTIONS[self.kind]
        t = series.years - series.min_year
        y = series.counts
        p0 = self.initial_guess(series)

        if len(y) < len(p0):
            raise self._no_convergence(f"{len(y)} observation(s) for {len(p0)} parameters")

        try:
            with warnings.catch_warnings(), np.errstate(over='ignore', invalid='ignore',
                                                        divide='ignore', under='ignore'):
                warnings.simplefilter('ignore', OptimizeWarning)
                warnings.simplefilter('ignore', RuntimeWarning)
                popt, _ = curve_fit(
                    self._budgeted(func), t, y,
                    p0=p0,
                    method='lm',
                    maxfev=self.max_nfev
                )
        except _FitBudgetExceeded:
            raise self._no_convergence(f"time budget of {self.time_budget_seconds}s exceeded") from None
        except (RuntimeError, ValueError, FloatingPointError,
                OverflowError, np.linalg.LinAlgError) as e:
            raise self._no_convergence(str(e)) from e

        if not np.all(np.isfinite(popt)):
            raise self._no_convergence("non-finite parameters")

        return self._build_model(series, dict(zip(names, popt)))


class ExponentialFitter(NonlinearFitter):
    """citations = a * exp(b * t), initial guess a=1, b=0.1"""

    kind = ModelKind.EXPONENTIAL

    def initial_guess(self, series: TimeSeries) -> Tuple[float, float]:
        return 1.0, DEFAULT_INITIAL_RATE


class AsymptoticFitter(NonlinearFitter):
    """citations = a * (1 - exp(-b * t)), initial guess a=max(citations), b=0.1"""

    kind = ModelKind.ASYMPTOTIC

    def initial_guess(self, series: TimeSeries) -> Tuple[float, float]:
        return float(np.max(series.counts)), DEFAULT_INITIAL_RATE


def default_fitters(max_nfev: int = DEFAULT_MAX_NFEV,
                    time_budget_seconds: Optional[float] = DEFAULT_TIME_BUDGET_SECONDS
                    ) -> List[GrowthModelFitter]:
    """The closed set of fitters in priority order"""
    return [
        LinearFitter(),
        ExponentialFitter(max_nfev=max_nfev, time_budget_seconds=time_budget_seconds),
        AsymptoticFitter(max_nfev=max_nfev, time_budget_seconds=time_budget_seconds),
    ]


def fit_all(series: TimeSeries,
            fitters: Optional[Sequence[GrowthModelFitter]] = None
            ) -> Tuple[List[FittedModel], List[FitError]]:
    """
    Run every fitter on the series

    Returns:
        (successful fits, fit errors), each in fitter order
    """
    fitters = default_fitters() if fitters is None else fitters
    fits, errors = [], []

    for fitter in fitters:
        try:
            fits.append(fitter.fit(series))
        except FitError as e:
            logger.debug("%s excluded from selection: %s", fitter.kind.label, e,
                         extra={'model_kind': fitter.kind.label})
            errors.append(e)

    return fits, errors
