# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Tests for Monte Carlo results aggregation.
"""

import unittest

import numpy as np

from ..errors import ConfigurationError
from ..montecarlo.results import MonteCarloResults, SimulationSummary


def _sample_trajectories(num_sims=10, num_periods=5):
    """Create sample (period, value) paths for testing."""
    return [
        [(period, 100000.0 + sim * 1000 + period * 5000) for period in range(num_periods)]
        for sim in range(num_sims)
    ]


class TestMonteCarloResults(unittest.TestCase):
    """Tests for MonteCarloResults."""

    def test_success_rate_partial(self):
        """Test success rate when some simulations are ruined."""
        results = MonteCarloResults([0.0, 250.0, 10.0, 0.0])
        self.assertEqual(results.success_count(), 2)
        self.assertEqual(results.success_rate(), 50.0)

    def test_success_rate_is_percentage(self):
        """Test that the rate is count / n * 100."""
        results = MonteCarloResults([1.0, 1.0, 1.0, 0.0])
        self.assertEqual(results.success_rate(), 75.0)

    def test_success_rate_not_rounded(self):
        """Test that a repeating fraction is left unrounded."""
        results = MonteCarloResults([1.0, 0.0, 0.0])
        self.assertEqual(results.success_rate(), 1 / 3 * 100)

    def test_empty_results_raise(self):
        """Test that statistics over zero simulations fail instead of giving NaN."""
        results = MonteCarloResults([])
        with self.assertRaises(ConfigurationError):
            results.success_rate()
        with self.assertRaises(ConfigurationError):
            results.summarize()
        with self.assertRaises(ConfigurationError):
            results.histogram(10)

    def test_final_values_keep_trial_order(self):
        """Test that final values come back in trial order."""
        results = MonteCarloResults([3.0, 1.0, 2.0])
        np.testing.assert_array_equal(results.get_final_values(), [3.0, 1.0, 2.0])

    def test_get_statistics(self):
        """Test getting summary statistics."""
        results = MonteCarloResults([0.0, 100.0, 200.0, 300.0, 400.0])
        stats = results.get_statistics()

        self.assertEqual(stats['mean'], 200.0)
        self.assertEqual(stats['min'], 0.0)
        self.assertEqual(stats['max'], 400.0)
        self.assertEqual(stats['p50'], 200.0)
        self.assertIn('std', stats)
        self.assertIn('p95', stats)

    def test_histogram(self):
        """Test a fixed bin count covering every outcome."""
        values = np.linspace(0, 1000, 101)
        counts, edges = MonteCarloResults(values).histogram(20)

        self.assertEqual(len(counts), 20)
        self.assertEqual(len(edges), 21)
        self.assertEqual(counts.sum(), 101)

    def test_histogram_invalid_bins(self):
        """Test that zero bins is rejected."""
        with self.assertRaises(ConfigurationError):
            MonteCarloResults([1.0]).histogram(0)

    def test_summarize(self):
        """Test the pure aggregation step."""
        summary = MonteCarloResults([0.0, 100.0, 200.0, 300.0]).summarize()

        self.assertIsInstance(summary, SimulationSummary)
        self.assertEqual(summary.num_simulations, 4)
        self.assertEqual(summary.num_successful, 3)
        self.assertEqual(summary.success_rate, 75.0)
        self.assertEqual(summary.mean, 150.0)
        self.assertEqual(summary.median, 150.0)
        self.assertIn('p90', summary.percentiles)
        self.assertEqual(summary.to_dict()['success_rate'], 75.0)


class TestTrajectoryResults(unittest.TestCase):
    """Tests for results that carry full paths."""

    def test_from_trajectories(self):
        """Test that final values are taken from the last point of each path."""
        results = MonteCarloResults.from_trajectories(_sample_trajectories())
        self.assertEqual(results.num_simulations, 10)
        self.assertEqual(results.get_periods(), [0, 1, 2, 3, 4])
        self.assertEqual(results.get_final_values()[0], 120000.0)

    def test_refilled_path_after_ruin_scores_zero(self):
        """Test that a path floored at zero stays a failure even if it climbs back."""
        ruined = [(0, 1000.0), (1, 0.0), (2, 500.0)]
        healthy = [(0, 1000.0), (1, 1200.0), (2, 1500.0)]
        results = MonteCarloResults.from_trajectories([ruined, healthy])

        np.testing.assert_array_equal(results.get_final_values(), [0.0, 1500.0])
        self.assertEqual(results.success_rate(), 50.0)
        # The displayed path is left as simulated
        self.assertEqual(results.raw_results[0]["Portfolio Value"].iloc[-1], 500.0)

    def test_zero_initial_capital_is_not_ruin(self):
        """Test that only simulated years count towards ruin."""
        results = MonteCarloResults.from_trajectories([[(0, 0.0), (1, 100.0)]])
        self.assertEqual(results.get_final_values()[0], 100.0)

    def test_percentile_data(self):
        """Test getting percentile bands."""
        results = MonteCarloResults.from_trajectories(_sample_trajectories())
        percentiles = results.get_percentile_data()

        self.assertIn('Median', percentiles)
        self.assertIn('Top 5%', percentiles)
        self.assertIn('Bottom 5%', percentiles)
        # Each percentile should have values for each period
        self.assertEqual(len(percentiles['Median']), 5)
        self.assertLessEqual(percentiles['Bottom 5%'][0], percentiles['Median'][0])
        self.assertLessEqual(percentiles['Median'][0], percentiles['Top 5%'][0])

    def test_percentile_df(self):
        """Test percentile bands as a DataFrame indexed by period."""
        df = MonteCarloResults.from_trajectories(_sample_trajectories()).get_percentile_df()
        self.assertEqual(list(df.index), [0, 1, 2, 3, 4])
        self.assertIn('Median', df.columns)

    def test_percentiles_need_trajectories(self):
        """Test that scalar-mode results cannot produce bands."""
        with self.assertRaises(ValueError):
            MonteCarloResults([1.0, 2.0]).get_percentile_data()


if __name__ == '__main__':
    unittest.main()
