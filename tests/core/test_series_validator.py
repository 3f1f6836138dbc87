import unittest

from citation_forecast.core.series_validator import validate
from citation_forecast.core.time_series import TimeSeries
from citation_forecast.infrastructure.error_handling import DataError, DataErrorKind


class TestSeriesValidator(unittest.TestCase):
    """Series validation and normalization"""

    def test_three_points_are_enough(self):
        series = validate([(2000, 1), (2001, 3), (2002, 6)], (2000, 2002))
        self.assertEqual(len(series), 3)

    def test_two_points_are_insufficient(self):
        with self.assertRaises(DataError) as ctx:
            validate([(2000, 1), (2001, 3)], (2000, 2010))
        self.assertEqual(ctx.exception.kind, DataErrorKind.INSUFFICIENT_POINTS)
        self.assertEqual(ctx.exception.n_points, 2)

    def test_filters_to_year_range(self):
        raw = [(1998, 0), (2000, 1), (2001, 3), (2002, 6), (2005, 20)]
        series = validate(raw, (2000, 2002))
        self.assertEqual([obs.year for obs in series], [2000, 2001, 2002])

    def test_filtering_can_leave_too_few_points(self):
        raw = [(1990, 0), (1991, 1), (2000, 2), (2001, 3)]
        with self.assertRaises(DataError):
            validate(raw, (2000, 2010))

    def test_sorts_and_keeps_last_duplicate(self):
        raw = [(2002, 6), (2000, 1), (2001, 3), (2000, 2)]
        series = validate(raw, (2000, 2002))
        self.assertEqual([obs.year for obs in series], [2000, 2001, 2002])
        self.assertEqual(series.observations[0].citation_count, 2.0)

    def test_duplicates_count_once(self):
        with self.assertRaises(DataError):
            validate([(2000, 1), (2000, 2), (2001, 3)], (2000, 2001))

    def test_normalization_is_deterministic(self):
        raw = [(2003, 9), (2001, 3), (2002, 6), (2001, 4)]
        self.assertEqual(validate(raw, (2000, 2005)), validate(raw, (2000, 2005)))

    def test_non_monotonic_counts_are_tolerated(self):
        series = validate([(2000, 5), (2001, 3), (2002, 8)], (2000, 2002))
        self.assertIsInstance(series, TimeSeries)

    def test_negative_count_is_invalid(self):
        with self.assertRaises(DataError) as ctx:
            validate([(2000, 1), (2001, -3), (2002, 6)], (2000, 2002))
        self.assertEqual(ctx.exception.kind, DataErrorKind.INVALID_OBSERVATION)

    def test_nan_count_is_invalid(self):
        with self.assertRaises(DataError):
            validate([(2000, 1), (2001, float('nan')), (2002, 6)], (2000, 2002))

    def test_non_numeric_count_is_invalid(self):
        with self.assertRaises(DataError) as ctx:
            validate([(2000, 1), (2001, 'n/a'), (2002, 6)], (2000, 2002))
        self.assertEqual(ctx.exception.kind, DataErrorKind.INVALID_OBSERVATION)

    def test_string_years_are_invalid(self):
        with self.assertRaises(DataError) as ctx:
            validate({'2000': 1, '2001': 3, '2002': 6}, (2000, 2002))
        self.assertEqual(ctx.exception.kind, DataErrorKind.INVALID_OBSERVATION)

    def test_malformed_records_are_invalid(self):
        for raw in ([(2000, 1, 'x'), (2001, 3), (2002, 6)], [2000, 2001, 2002], 42,
                    [{'citations': 1}]):
            with self.subTest(raw=raw):
                with self.assertRaises(DataError) as ctx:
                    validate(raw, (2000, 2002))
                self.assertEqual(ctx.exception.kind, DataErrorKind.INVALID_OBSERVATION)

    def test_invalid_observation_outside_range_is_ignored(self):
        series = validate([(1990, -1), (2000, 1), (2001, 3), (2002, 6)], (2000, 2002))
        self.assertEqual(len(series), 3)

    def test_inverted_year_range(self):
        with self.assertRaises(ValueError):
            validate([(2000, 1), (2001, 3), (2002, 6)], (2005, 2000))

    def test_custom_minimum(self):
        with self.assertRaises(DataError):
            validate([(2000, 1), (2001, 3), (2002, 6)], (2000, 2002), minimum_data_points=4)


if __name__ == '__main__':
    unittest.main()
