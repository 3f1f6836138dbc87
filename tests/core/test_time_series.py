import unittest

import numpy as np
import pandas as pd

from citation_forecast.core.time_series import (ModelKind, Observation, TimeSeries,
                                                as_time_series)


class TestModelKind(unittest.TestCase):
    def test_priority_order(self):
        self.assertLess(ModelKind.LINEAR.priority, ModelKind.EXPONENTIAL.priority)
        self.assertLess(ModelKind.EXPONENTIAL.priority, ModelKind.ASYMPTOTIC.priority)

    def test_label(self):
        self.assertEqual(ModelKind.ASYMPTOTIC.label, "Asymptotic")
        self.assertEqual(str(ModelKind.LINEAR), "Linear")


class TestTimeSeries(unittest.TestCase):
    def test_from_records_pairs_and_mappings(self):
        series = TimeSeries.from_records([(2000, 1), {'year': 2001, 'citations': 4},
                                          {'year': 2002, 'citation_count': 9}])
        self.assertEqual(len(series), 3)
        self.assertEqual(series.observations[1], Observation(2001, 4))
        np.testing.assert_array_equal(series.counts, [1.0, 4.0, 9.0])

    def test_from_frame(self):
        frame = pd.DataFrame({'year': [2010, 2011], 'citations': [3, 8]})
        series = TimeSeries.from_frame(frame)
        self.assertEqual(series.min_year, 2010)
        self.assertEqual(series.max_year, 2011)

    def test_as_time_series_accepts_mapping(self):
        series = as_time_series({2001: 5, 2000: 2})
        self.assertEqual(series.years.tolist(), [2001.0, 2000.0])

    def test_as_time_series_returns_series_unchanged(self):
        series = TimeSeries(((2000, 1),))
        self.assertIs(as_time_series(series), series)

    def test_to_frame(self):
        frame = TimeSeries(((2000, 1), (2001, 2))).to_frame()
        self.assertEqual(list(frame.columns), ['year', 'citation_count'])
        self.assertEqual(len(frame), 2)


if __name__ == '__main__':
    unittest.main()
