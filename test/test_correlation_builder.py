"""
Test cases for the correlation_builder.py classes and functions.
"""

import unittest

import pandas as pd

from solarscope.builders import ConditionBuilder, CorrelationBuilder, pearson_correlation
from solarscope.frame import records_frame
from solarscope.schema import CorrelationResult, WeatherCondition


class TestPearsonCorrelation(unittest.TestCase):
    """Test cases for the pearson_correlation function."""

    def test_exact_positive_linear_relation(self):
        """A positive linear relation correlates at 1."""
        x = [1.0, 2.0, 3.0, 4.0, 5.0]
        y = [2 * value + 3 for value in x]
        self.assertAlmostEqual(pearson_correlation(x, y), 1.0, delta=1e-9)

    def test_exact_negative_linear_relation(self):
        """A negative linear relation correlates at -1."""
        x = [1.0, 2.0, 3.0, 4.0, 5.0]
        y = [40 - 3 * value for value in x]
        self.assertAlmostEqual(pearson_correlation(x, y), -1.0, delta=1e-9)

    def test_known_value(self):
        """Hand computed coefficient."""
        # mean x 2, mean y 3; cov 2, var x 2, var y 8 -> 2 / sqrt(16) = 0.5
        self.assertAlmostEqual(
            pearson_correlation([1.0, 2.0, 3.0], [1.0, 5.0, 3.0]), 0.5, delta=1e-9
        )

    def test_zero_variance_returns_zero(self):
        """A constant sample has no correlation."""
        self.assertEqual(pearson_correlation([3.0, 3.0, 3.0], [1.0, 2.0, 3.0]), 0.0)

    def test_empty_samples_return_zero(self):
        """Two empty samples have no correlation."""
        self.assertEqual(pearson_correlation([], []), 0.0)

    def test_mismatched_lengths_raise(self):
        """Different lengths are a programming error."""
        with self.assertRaises(ValueError):
            pearson_correlation([1.0, 2.0], [1.0, 2.0, 3.0])


class TestCorrelationBuilder(unittest.TestCase):
    """
    Test suite for the CorrelationBuilder class.
    """

    def setUp(self):
        """
        Production follows sunshine exactly and falls with precipitation.
        The zero production day would break the relation if it were kept.
        """
        self.records = pd.DataFrame(
            {
                "production": [10.0, 20.0, 30.0, 0.0, 40.0],
                "sunshine_hours": [1.0, 2.0, 3.0, 12.0, 4.0],
                "avg_temperature": [5.0, 5.0, 5.0, 5.0, 5.0],
                "precipitation": [4.0, 3.0, 2.0, 0.0, 1.0],
                "wind_speed": [10.0, 12.0, 9.0, 30.0, 11.0],
            }
        )

    def test_zero_production_days_are_excluded(self):
        """Only days with production enter the sample."""
        builder = CorrelationBuilder(records=self.records)
        self.assertEqual(len(builder.records), 4)

    def test_run(self):
        """Coefficients of every factor."""
        result = CorrelationBuilder(records=self.records).run()

        self.assertAlmostEqual(result.sunshine, 1.0, delta=1e-9)
        self.assertAlmostEqual(result.precipitation, -1.0, delta=1e-9)
        self.assertEqual(result.temperature, 0.0)
        self.assertTrue(-1.0 - 1e-9 <= result.wind <= 1.0 + 1e-9)

    def test_run_with_single_producing_day(self):
        """Fewer than two producing days give an all-zero result."""
        records = self.records.copy()
        records["production"] = [0.0, 0.0, 0.0, 0.0, 40.0]

        self.assertEqual(CorrelationBuilder(records=records).run(), CorrelationResult())

    def test_run_with_empty_records(self):
        """No records give an all-zero result."""
        self.assertEqual(
            CorrelationBuilder(records=records_frame([])).run(), CorrelationResult()
        )


class TestConditionBuilder(unittest.TestCase):
    """
    Test suite for the ConditionBuilder class.
    """

    def test_run(self):
        """Totals and means of the condition group."""
        records = pd.DataFrame(
            {
                "production": [18.0, 22.0],
                "avg_temperature": [20.0, 24.0],
                "total_anomaly_score": [0.5, 1.5],
            }
        )
        aggregate = ConditionBuilder(records=records, condition=WeatherCondition.SUNNY).run()

        self.assertEqual(aggregate.condition, WeatherCondition.SUNNY)
        self.assertEqual(aggregate.days, 2)
        self.assertEqual(aggregate.total_production, 40.0)
        self.assertEqual(aggregate.average_production, 20.0)
        self.assertEqual(aggregate.average_temperature, 22.0)
        self.assertEqual(aggregate.average_anomaly_score, 1.0)

    def test_run_with_empty_records(self):
        """An empty group gives a zero-valued aggregate."""
        aggregate = ConditionBuilder(
            records=records_frame([]), condition=WeatherCondition.RAINY
        ).run()
        self.assertEqual(aggregate.days, 0)
        self.assertEqual(aggregate.average_production, 0.0)


if __name__ == "__main__":
    unittest.main()
