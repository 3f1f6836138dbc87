"""
Percentile ranks of externally supplied researcher metrics

percentile(entity) = count(entities with metric <= entity's metric) / total * 100

Each metric column is ranked independently. Entities whose value for a metric
is missing, None or NaN are left out of that column and of its total.
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional, Sequence

import numpy as np
import pandas as pd

METRIC_NAMES = ('total_papers', 'total_citations', 'h_index', 'research_diversity')


@dataclass(frozen=True)
class ResearcherMetrics:
    """Summary metrics sourced from the bibliometric service"""
    total_papers: Optional[float] = None
    total_citations: Optional[float] = None
    h_index: Optional[float] = None
    research_diversity: Optional[float] = None

    def to_dict(self) -> Dict[str, Optional[float]]:
        return asdict(self)


def _metric_value(record: Any, metric_name: str) -> Optional[float]:
    if isinstance(record, Mapping):
        value = record.get(metric_name)
    else:
        value = getattr(record, metric_name, None)
    if value is None:
        return None
    value = float(value)
    if math.isnan(value):
        return None
    return value


def percentile_rank(metrics_by_entity: Mapping[str, Any], metric_name: str) -> Dict[str, float]:
    """
    Percentile rank of every entity for one metric

    Args:
        metrics_by_entity: entity -> mapping or ResearcherMetrics
        metric_name: metric to rank (e.g. 'h_index')

    Returns:
        entity -> percentile in (0, 100], in input order
    """
    values = {}
    for entity, record in metrics_by_entity.items():
        value = _metric_value(record, metric_name)
        if value is not None:
            values[entity] = value

    if not values:
        return {}

    ordered = np.sort(np.fromiter(values.values(), dtype=float))
    total = len(ordered)
    return {
        entity: float(np.searchsorted(ordered, value, side='right')) / total * 100.0
        for entity, value in values.items()
    }


def percentile_table(metrics_by_entity: Mapping[str, Any],
                     metric_names: Sequence[str] = METRIC_NAMES) -> pd.DataFrame:
    """Percentile ranks for several metrics, one column per metric, indexed by entity"""
    table = pd.DataFrame(index=pd.Index(list(metrics_by_entity.keys()), name='entity_id'))
    for metric_name in metric_names:
        ranks = percentile_rank(metrics_by_entity, metric_name)
        table[metric_name] = pd.Series(ranks, dtype=float)
    return table
