from .errors import (
    CitationForecastError,
    DataError,
    DataErrorKind,
    EntityFailure,
    ErrorCategory,
    FitError,
    FitErrorKind,
    RetrievalError,
    SelectionError,
    SelectionErrorKind,
)

__all__ = [
    'CitationForecastError',
    'DataError',
    'DataErrorKind',
    'EntityFailure',
    'ErrorCategory',
    'FitError',
    'FitErrorKind',
    'RetrievalError',
    'SelectionError',
    'SelectionErrorKind',
]
