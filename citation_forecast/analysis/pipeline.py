"""
Batch citation forecast pipeline

analyze() runs validate -> fit -> select -> forecast for every entity of a
batch. Entity pipelines share no state and run one task per entity on a
thread pool; the batch waits for every entity before aggregating, and keeps
results and failures in input order.

Typical use:

    histories = {'A': [(2015, 10), (2016, 30), ...], 'B': {...}}
    batch = analyze(histories, year_range=(2010, 2024))
    frame = batch.dataset.to_frame()
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from .comparison import (SOURCE_ACTUAL, SOURCE_PREDICTED, ComparisonDataset, ForecastResult,
                         LabeledPoint, aggregate, best_model_labels)
from ..core.fitting.fitter import default_fitters, fit_all
from ..core.fitting.selection import rank_models
from ..core.forecasting.forecaster import check_horizon, forecast
from ..core.series_validator import check_year_range, validate
from ..infrastructure.config import get_forecast_settings
from ..infrastructure.error_handling import CitationForecastError, EntityFailure, ErrorCategory

logger = logging.getLogger(__name__)

FetchHistory = Callable[[str], Any]


@dataclass
class BatchResult:
    """Results and failures of one batch, both keyed by entity in input order"""
    results: Dict[str, ForecastResult] = field(default_factory=dict)
    failures: Dict[str, EntityFailure] = field(default_factory=dict)

    @property
    def succeeded(self) -> List[str]:
        return list(self.results)

    @property
    def failed(self) -> List[str]:
        return list(self.failures)

    @property
    def dataset(self) -> ComparisonDataset:
        return aggregate(self.results.values())

    @property
    def best_model_labels(self) -> Dict[str, str]:
        return best_model_labels(self.results.values())

    def summary(self) -> Dict[str, Any]:
        return {
            'total_entities': len(self.results) + len(self.failures),
            'succeeded': len(self.results),
            'failed': len(self.failures),
            'best_models': {entity: result.best_model.label for entity, result in self.results.items()},
            'failures': [failure.to_dict() for failure in self.failures.values()]
        }


def _resolve_settings(settings: Optional[Dict]) -> Dict:
    resolved = get_forecast_settings()
    if settings:
        resolved.update(settings)
    return resolved


def analyze_entity(entity_id: str, series: Any, year_range: Tuple[int, int],
                   horizon: Optional[int] = None, settings: Optional[Dict] = None,
                   entity_name: Optional[str] = None) -> ForecastResult:
    """
    Forecast one entity

    Raises:
        DataError: the series is unusable within year_range
        SelectionError: every growth model failed to fit
    """
    settings = _resolve_settings(settings)
    horizon = check_horizon(settings['horizon'] if horizon is None else horizon)

    clean = validate(series, year_range, minimum_data_points=settings['minimum_data_points'])
    fitters = default_fitters(
        max_nfev=settings['max_nfev'],
        time_budget_seconds=settings['fit_time_budget_seconds']
    )
    fits, fit_errors = fit_all(clean, fitters)
    rankings = rank_models(fits, fit_errors)
    best = rankings[0].model

    logger.debug("selected %s (AIC=%.3f) from %d candidate(s)",
                 best.kind.label, best.aic, len(fits),
                 extra={'entity_id': entity_id, 'model_kind': best.kind.label})

    return ForecastResult(
        entity_id=entity_id,
        best_model=best.kind,
        actual=tuple(LabeledPoint(obs.year, obs.citation_count, SOURCE_ACTUAL) for obs in clean),
        predicted=tuple(
            LabeledPoint(point.year, point.citation_count, SOURCE_PREDICTED)
            for point in forecast(clean, best, horizon)
        ),
        model=best,
        entity_name=entity_name,
        rankings=tuple(rankings),
        fit_errors=tuple(fit_errors)
    )


def _entity_items(histories: Any) -> List[Tuple[str, Any]]:
    if isinstance(histories, Mapping):
        return list(histories.items())
    return [(entity_id, series) for entity_id, series in histories]


def analyze(histories: Any, year_range: Tuple[int, int], horizon: Optional[int] = None,
            settings: Optional[Dict] = None, names: Optional[Mapping[str, str]] = None,
            max_workers: Optional[int] = None) -> BatchResult:
    """
    Forecast a batch of entities

    Args:
        histories: entity -> raw series mapping, or iterable of (entity, series) pairs
        year_range: (low, high) years shared by every entity
        horizon: forecast years per entity (settings['horizon'] when None)
        settings: forecast settings (get_forecast_settings() when None)
        names: optional entity -> display name used in best-model labels
        max_workers: thread pool size (settings['max_workers'] when None)

    Returns:
        BatchResult. Domain errors are recorded per entity and never abort
        the other entities.
    """
    year_range = check_year_range(year_range)
    settings = _resolve_settings(settings)
    horizon = check_horizon(settings['horizon'] if horizon is None else horizon)
    names = names or {}
    items = _entity_items(histories)

    batch = BatchResult()
    if not items:
        return batch

    workers = max_workers or settings.get('max_workers')
    logger.info("Analyzing %d entit%s over %s-%s (horizon=%d)",
                len(items), 'y' if len(items) == 1 else 'ies', year_range[0], year_range[1], horizon)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            (entity_id, executor.submit(analyze_entity, entity_id, series, year_range,
                                        horizon, settings, names.get(entity_id)))
            for entity_id, series in items
        ]

        for entity_id, future in futures:
            try:
                batch.results[entity_id] = future.result()
            except CitationForecastError as e:
                logger.info("skipped: %s", e, extra={'entity_id': entity_id})
                batch.failures[entity_id] = EntityFailure.from_exception(entity_id, e)

    return batch


def resolve_histories(entity_ids: Iterable[str], fetch_history: FetchHistory
                      ) -> Tuple[Dict[str, Any], Dict[str, EntityFailure]]:
    """
    Obtain each entity's history from the retrieval collaborator

    Whatever the collaborator raises is kept unchanged in a RETRIEVAL_ERROR
    failure and the entity is left out of the returned histories.
    """
    histories, failures = {}, {}
    for entity_id in entity_ids:
        try:
            histories[entity_id] = fetch_history(entity_id)
        except Exception as e:
            logger.info("history unavailable: %s", e, extra={'entity_id': entity_id})
            failures[entity_id] = EntityFailure.from_exception(
                entity_id, e, category=ErrorCategory.RETRIEVAL_ERROR
            )
    return histories, failures


def analyze_entities(entity_ids: Iterable[str], fetch_history: FetchHistory,
                     year_range: Tuple[int, int], horizon: Optional[int] = None,
                     settings: Optional[Dict] = None, names: Optional[Mapping[str, str]] = None,
                     max_workers: Optional[int] = None) -> BatchResult:
    """resolve_histories followed by analyze; retrieval failures join the batch failures"""
    entity_ids = list(entity_ids)
    histories, retrieval_failures = resolve_histories(entity_ids, fetch_history)
    batch = analyze(histories, year_range, horizon=horizon, settings=settings,
                    names=names, max_workers=max_workers)

    failures = dict(batch.failures)
    failures.update(retrieval_failures)
    batch.failures = {entity_id: failures[entity_id] for entity_id in entity_ids if entity_id in failures}
    return batch
