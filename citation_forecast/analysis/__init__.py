"""
Analysis Layer - batch forecasting and comparison

Components:
    pipeline: analyze / analyze_entity / analyze_entities and BatchResult
    comparison: ForecastResult, ComparisonDataset and aggregate
    percentiles: percentile_rank / percentile_table of researcher metrics
"""

from .comparison import (ComparisonDataset, ComparisonRow, ForecastResult, LabeledPoint,
                         aggregate, best_model_labels)
from .percentiles import METRIC_NAMES, ResearcherMetrics, percentile_rank, percentile_table
from .pipeline import BatchResult, analyze, analyze_entities, analyze_entity, resolve_histories

__all__ = [
    'ComparisonDataset',
    'ComparisonRow',
    'ForecastResult',
    'LabeledPoint',
    'aggregate',
    'best_model_labels',
    'METRIC_NAMES',
    'ResearcherMetrics',
    'percentile_rank',
    'percentile_table',
    'BatchResult',
    'analyze',
    'analyze_entities',
    'analyze_entity',
    'resolve_histories',
]
