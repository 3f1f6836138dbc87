import unittest

from citation_forecast.core.time_series import ModelKind
from citation_forecast.infrastructure.error_handling import (CitationForecastError, DataError,
                                                             DataErrorKind, EntityFailure,
                                                             ErrorCategory, FitError,
                                                             FitErrorKind, RetrievalError)


class TestErrors(unittest.TestCase):
    def test_hierarchy(self):
        for error in (DataError(DataErrorKind.INSUFFICIENT_POINTS, "x"),
                      FitError(FitErrorKind.NO_CONVERGENCE, "y", ModelKind.ASYMPTOTIC),
                      RetrievalError("z")):
            self.assertIsInstance(error, CitationForecastError)

    def test_message_includes_kind(self):
        error = DataError(DataErrorKind.INSUFFICIENT_POINTS, "2 observation(s)")
        self.assertEqual(str(error), "insufficient_points: 2 observation(s)")
        self.assertEqual(str(RetrievalError("timeout")), "timeout")

    def test_entity_failure_from_domain_error(self):
        error = FitError(FitErrorKind.NO_CONVERGENCE, "budget", ModelKind.EXPONENTIAL)
        failure = EntityFailure.from_exception('A', error)
        self.assertEqual(failure.category, ErrorCategory.FIT_ERROR)
        self.assertIs(failure.error, error)
        self.assertEqual(failure.to_dict(), {
            'entity_id': 'A',
            'category': 'fit_error',
            'kind': 'no_convergence',
            'error_type': 'FitError',
            'message': 'no_convergence: budget'
        })

    def test_entity_failure_from_foreign_error(self):
        failure = EntityFailure.from_exception('B', KeyError('missing'))
        self.assertEqual(failure.category, ErrorCategory.RETRIEVAL_ERROR)
        self.assertIsNone(failure.to_dict()['kind'])


if __name__ == '__main__':
    unittest.main()
