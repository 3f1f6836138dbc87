"""
Citation forecast error types

Every failure inside a single entity's pipeline is expressed as one of the
exceptions below. The batch layer converts them into EntityFailure records so
that one researcher's failure never invalidates another researcher's result.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(Enum):
    """Per-entity failure category"""
    DATA_ERROR = "data_error"             # series unusable after validation
    FIT_ERROR = "fit_error"               # a single model could not be fitted
    SELECTION_ERROR = "selection_error"   # no model survived fitting
    RETRIEVAL_ERROR = "retrieval_error"   # history could not be obtained upstream


class DataErrorKind(Enum):
    INSUFFICIENT_POINTS = "insufficient_points"
    INVALID_OBSERVATION = "invalid_observation"


class FitErrorKind(Enum):
    NO_CONVERGENCE = "no_convergence"


class SelectionErrorKind(Enum):
    NO_VIABLE_MODEL = "no_viable_model"


class CitationForecastError(Exception):
    """Base class for all domain errors raised by citation_forecast"""

    category: ErrorCategory = None

    def __init__(self, kind: Optional[Enum], message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        if self.kind is None:
            return self.message
        return f"{self.kind.value}: {self.message}"


class DataError(CitationForecastError):
    """Raised by the series validator"""

    category = ErrorCategory.DATA_ERROR

    def __init__(self, kind: DataErrorKind, message: str, n_points: Optional[int] = None):
        super().__init__(kind, message)
        self.n_points = n_points


class FitError(CitationForecastError):
    """Raised by a fitter that could not produce a usable model"""

    category = ErrorCategory.FIT_ERROR

    def __init__(self, kind: FitErrorKind, message: str, model_kind: Any = None):
        super().__init__(kind, message)
        self.model_kind = model_kind


class SelectionError(CitationForecastError):
    """Raised when every candidate fit failed"""

    category = ErrorCategory.SELECTION_ERROR

    def __init__(self, kind: SelectionErrorKind, message: str, fit_errors=()):
        super().__init__(kind, message)
        self.fit_errors = tuple(fit_errors)


class RetrievalError(CitationForecastError):
    """
    Raised by a data-retrieval collaborator when a citation history cannot be
    obtained. Collaborators may raise their own exception types instead; the
    batch layer records those unchanged under the same category.
    """

    category = ErrorCategory.RETRIEVAL_ERROR

    def __init__(self, message: str, entity_id: Optional[str] = None):
        super().__init__(None, message)
        self.entity_id = entity_id


@dataclass(frozen=True)
class EntityFailure:
    """Failure record for one entity of a batch"""
    entity_id: str
    category: ErrorCategory
    error: Exception
    message: str

    @classmethod
    def from_exception(cls, entity_id: str, error: Exception,
                       category: Optional[ErrorCategory] = None) -> "EntityFailure":
        if category is None:
            category = getattr(error, 'category', None) or ErrorCategory.RETRIEVAL_ERROR
        return cls(
            entity_id=entity_id,
            category=category,
            error=error,
            message=str(error)
        )

    @property
    def kind(self) -> Optional[Enum]:
        return getattr(self.error, 'kind', None)

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        kind = self.kind
        return {
            'entity_id': self.entity_id,
            'category': self.category.value,
            'kind': kind.value if kind is not None else None,
            'error_type': type(self.error).__name__,
            'message': self.message
        }
