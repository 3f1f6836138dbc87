"""
Per-entity forecast results and the combined comparison dataset
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, NamedTuple, Optional, Tuple

import pandas as pd

from ..core.fitting.fitter import FittedModel
from ..core.fitting.selection import ModelRanking
from ..core.time_series import ModelKind
from ..infrastructure.error_handling import FitError

SOURCE_ACTUAL = "actual"
SOURCE_PREDICTED = "predicted"

COMPARISON_COLUMNS = ['entity_id', 'year', 'citation_count', 'source', 'best_model_label']


class LabeledPoint(NamedTuple):
    year: int
    citation_count: float
    source: str


class ComparisonRow(NamedTuple):
    entity_id: str
    year: int
    citation_count: float
    source: str
    best_model_label: str


@dataclass(frozen=True)
class ForecastResult:
    """Outcome of one entity's validate -> fit -> select -> forecast run"""
    entity_id: str
    best_model: ModelKind
    actual: Tuple[LabeledPoint, ...]
    predicted: Tuple[LabeledPoint, ...]
    model: Optional[FittedModel] = None
    entity_name: Optional[str] = None
    rankings: Tuple[ModelRanking, ...] = field(default=())
    fit_errors: Tuple[FitError, ...] = field(default=())

    @property
    def display_name(self) -> str:
        return self.entity_name or self.entity_id

    @property
    def best_model_label(self) -> str:
        return f"{self.display_name} ({self.best_model.label})"

    def rows(self) -> List[ComparisonRow]:
        """Actual rows by ascending year, then predicted rows by ascending year"""
        label = self.best_model_label
        actual = sorted(self.actual, key=lambda point: point.year)
        predicted = sorted(self.predicted, key=lambda point: point.year)
        return [
            ComparisonRow(self.entity_id, point.year, point.citation_count, point.source, label)
            for point in actual + predicted
        ]

    def model_comparison(self) -> pd.DataFrame:
        """AIC table of the candidate models, best first"""
        return pd.DataFrame([ranking.to_dict() for ranking in self.rankings])


@dataclass(frozen=True)
class ComparisonDataset:
    """Ordered, labeled rows of every entity's actual and predicted series"""
    rows: Tuple[ComparisonRow, ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[ComparisonRow]:
        return iter(self.rows)

    @property
    def entity_ids(self) -> List[str]:
        seen = []
        for row in self.rows:
            if row.entity_id not in seen:
                seen.append(row.entity_id)
        return seen

    def for_entity(self, entity_id: str) -> List[ComparisonRow]:
        return [row for row in self.rows if row.entity_id == entity_id]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(list(self.rows), columns=COMPARISON_COLUMNS)


def aggregate(results: Iterable[ForecastResult]) -> ComparisonDataset:
    """
    Concatenate entity results into one ComparisonDataset

    Entities keep their input order; each contributes its actual rows and then
    its predicted rows, both by ascending year.
    """
    rows: List[ComparisonRow] = []
    for result in results:
        rows.extend(result.rows())
    return ComparisonDataset(tuple(rows))


def best_model_labels(results: Iterable[ForecastResult]) -> Dict[str, str]:
    return {result.entity_id: result.best_model_label for result in results}
