"""
Citation history data model

Observation / TimeSeries hold the caller-supplied history of one researcher,
ModelKind enumerates the closed set of growth models that are fitted to it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, NamedTuple, Tuple

import numpy as np
import pandas as pd


class Observation(NamedTuple):
    """Cumulative citation count observed at the end of a year"""
    year: int
    citation_count: float


class ModelKind(Enum):
    """Growth model variants. Declaration order is the AIC tie-break priority."""
    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    ASYMPTOTIC = "asymptotic"

    @property
    def priority(self) -> int:
        return list(ModelKind).index(self)

    @property
    def label(self) -> str:
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class TimeSeries:
    """
    Ordered citation history of one entity

    Construction does not reorder or deduplicate; use
    core.series_validator.validate to obtain a normalized series.
    """
    observations: Tuple[Observation, ...]

    def __post_init__(self):
        object.__setattr__(
            self, 'observations',
            tuple(Observation(*obs) for obs in self.observations)
        )

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "TimeSeries":
        """
        Build a series from (year, count) pairs or from mappings with
        'year' and 'citations' / 'citation_count' keys.
        """
        observations = []
        for record in records:
            if isinstance(record, Mapping):
                count = record.get('citation_count', record.get('citations'))
                observations.append(Observation(record['year'], count))
            else:
                year, count = record
                observations.append(Observation(year, count))
        return cls(tuple(observations))

    @classmethod
    def from_mapping(cls, counts_by_year: Mapping[int, float]) -> "TimeSeries":
        return cls(tuple(Observation(year, count) for year, count in counts_by_year.items()))

    @classmethod
    def from_frame(cls, frame: pd.DataFrame, year_column: str = 'year',
                   count_column: str = 'citations') -> "TimeSeries":
        if count_column not in frame.columns and 'citation_count' in frame.columns:
            count_column = 'citation_count'
        return cls(tuple(
            Observation(year, count)
            for year, count in zip(frame[year_column].tolist(), frame[count_column].tolist())
        ))

    def __len__(self) -> int:
        return len(self.observations)

    def __iter__(self):
        return iter(self.observations)

    @property
    def years(self) -> np.ndarray:
        return np.array([obs.year for obs in self.observations], dtype=float)

    @property
    def counts(self) -> np.ndarray:
        return np.array([obs.citation_count for obs in self.observations], dtype=float)

    @property
    def min_year(self) -> int:
        return min(obs.year for obs in self.observations)

    @property
    def max_year(self) -> int:
        return max(obs.year for obs in self.observations)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {'year': [obs.year for obs in self.observations],
             'citation_count': [obs.citation_count for obs in self.observations]}
        )


def as_time_series(data: Any) -> TimeSeries:
    """Coerce the accepted raw history shapes into a TimeSeries"""
    if isinstance(data, TimeSeries):
        return data
    if isinstance(data, pd.DataFrame):
        return TimeSeries.from_frame(data)
    if isinstance(data, pd.Series):
        return TimeSeries.from_mapping(data.to_dict())
    if isinstance(data, Mapping):
        return TimeSeries.from_mapping(data)
    return TimeSeries.from_records(data)
