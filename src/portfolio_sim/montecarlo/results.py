# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monte Carlo simulation results aggregation and analysis.

This module provides the MonteCarloResults class for analyzing the outcome of
a bootstrap run: success rate, final-value distribution and, when full paths
were recorded, percentile bands per simulated year.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from ..errors import ConfigurationError
from .lifetime import Trajectory

PERIOD_COLUMN = 'Period'
VALUE_COLUMN = 'Portfolio Value'


@dataclass(frozen=True)
class SimulationSummary:
    """Aggregate statistics for one Monte Carlo run.

    Attributes:
        num_simulations: Number of trials
        num_successful: Trials that finished with a value above zero
        success_rate: Percentage of successful trials (0.0 to 100.0)
        mean, median, std, min, max: Final-value statistics
        percentiles: Final-value percentiles keyed 'p5' .. 'p95'
    """
    num_simulations: int
    num_successful: int
    success_rate: float
    mean: float
    median: float
    std: float
    min: float
    max: float
    percentiles: Dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        return {
            'num_simulations': self.num_simulations,
            'num_successful': self.num_successful,
            'success_rate': self.success_rate,
            'mean': self.mean,
            'median': self.median,
            'std': self.std,
            'min': self.min,
            'max': self.max,
            'percentiles': dict(self.percentiles),
        }


def _final_value(trajectory: Trajectory) -> float:
    # Trajectory values are floored at zero, so any zero after the anchor is ruin
    if any(value <= 0.0 for _, value in trajectory[1:]):
        return 0.0
    return trajectory[-1][1]


class MonteCarloResults:
    """Aggregates and analyzes Monte Carlo simulation results.

    Final values are kept in trial order. Order carries no meaning for the
    statistics; it only keeps reports reproducible for a given seed.

    Example:
        >>> results = MonteCarloResults([0.0, 1_250_000.0, 980_000.0, 0.0])
        >>> results.success_rate()
        50.0
    """

    # Standard percentile levels for analysis
    PERCENTILES = {
        "Top 5%": 0.95,
        "Top 10%": 0.90,
        "Top 25%": 0.75,
        "Median": 0.50,
        "Bottom 25%": 0.25,
        "Bottom 10%": 0.10,
        "Bottom 5%": 0.05,
    }

    SUMMARY_PERCENTILES = (5, 10, 25, 50, 75, 90, 95)

    def __init__(self, final_values: Sequence[float],
                 trajectories: Optional[List[pd.DataFrame]] = None):
        """Initialize with simulation results.

        Args:
            final_values: Final portfolio value of each trial, 0.0 for ruin
            trajectories: Optional list of DataFrames, one per trial, with
                         'Period' and 'Portfolio Value' columns
        """
        self.final_values = np.asarray(final_values, dtype=float)
        self.raw_results = trajectories
        self.num_simulations = len(self.final_values)

        if trajectories:
            self._num_periods = len(trajectories[0])
            self._periods = trajectories[0][PERIOD_COLUMN].tolist()
        else:
            self._num_periods = 0
            self._periods = []

    @classmethod
    def from_trajectories(cls, trajectories: Sequence[Trajectory]) -> 'MonteCarloResults':
        """Build results from raw (period, value) trajectories.

        A trajectory that touched zero after period 0 was ruined and scores
        0.0 even if later contributions lifted it again, so the final values
        match what scalar mode reports for the same draws.
        """
        frames = [pd.DataFrame(t, columns=[PERIOD_COLUMN, VALUE_COLUMN]) for t in trajectories]
        final_values = [_final_value(t) for t in trajectories]
        return cls(final_values, frames)

    @property
    def has_trajectories(self) -> bool:
        return bool(self.raw_results)

    def _require_simulations(self):
        if self.num_simulations == 0:
            raise ConfigurationError("No simulations were run; statistics are undefined")

    def success_count(self) -> int:
        """Number of trials that ended with a value above zero."""
        return int(np.count_nonzero(self.final_values > 0))

    def success_rate(self) -> float:
        """Percentage of trials that ended with a value above zero.

        Raises:
            ConfigurationError: If there are no trials
        """
        self._require_simulations()
        return self.success_count() / self.num_simulations * 100

    def get_final_values(self) -> np.ndarray:
        """Get final values from all simulations, in trial order."""
        return self.final_values.copy()

    def get_statistics(self) -> Dict[str, float]:
        """Get summary statistics for the final values.

        Returns:
            Dict with mean, std, min, max and percentile values
        """
        self._require_simulations()
        values = self.final_values
        stats = {
            'mean': float(np.mean(values)),
            'std': float(np.std(values)),
            'min': float(np.min(values)),
            'max': float(np.max(values)),
        }
        for pct in self.SUMMARY_PERCENTILES:
            stats[f'p{pct}'] = float(np.percentile(values, pct))
        return stats

    def histogram(self, bins: int) -> Tuple[np.ndarray, np.ndarray]:
        """Frequency distribution of final values.

        Returns:
            Tuple of (counts, bin_edges) as returned by ``numpy.histogram``
        """
        self._require_simulations()
        if bins < 1:
            raise ConfigurationError(f"bins must be at least 1, got {bins}")
        return np.histogram(self.final_values, bins=bins)

    def get_percentile_data(self) -> Dict[str, List[float]]:
        """Get percentile bands of portfolio value across periods.

        Returns:
            Dict mapping percentile names to lists of values (one per period)

        Raises:
            ValueError: If the run did not record trajectories
        """
        if not self.has_trajectories:
            raise ValueError("Percentile bands need trajectories; use run_trajectories()")

        values = np.array([sim[VALUE_COLUMN].to_numpy() for sim in self.raw_results])
        values.sort(axis=0)

        percentile_data = {}
        for name, pct in self.PERCENTILES.items():
            idx = min(int(len(self.raw_results) * pct), len(self.raw_results) - 1)
            percentile_data[name] = values[idx].tolist()
        return percentile_data

    def get_percentile_df(self) -> pd.DataFrame:
        """Get percentile data as a DataFrame with periods as index."""
        df = pd.DataFrame(self.get_percentile_data())
        df[PERIOD_COLUMN] = self._periods
        return df.set_index(PERIOD_COLUMN)

    def get_periods(self) -> List[int]:
        return list(self._periods)

    def summarize(self) -> SimulationSummary:
        """Compute aggregate statistics without reporting them anywhere."""
        stats = self.get_statistics()
        return SimulationSummary(
            num_simulations=self.num_simulations,
            num_successful=self.success_count(),
            success_rate=self.success_rate(),
            mean=stats['mean'],
            median=stats['p50'],
            std=stats['std'],
            min=stats['min'],
            max=stats['max'],
            percentiles={f'p{p}': stats[f'p{p}'] for p in self.SUMMARY_PERCENTILES},
        )

    def __len__(self) -> int:
        return self.num_simulations

    def __repr__(self) -> str:
        return (f"MonteCarloResults(num_simulations={self.num_simulations}, "
                f"num_periods={self._num_periods})")
