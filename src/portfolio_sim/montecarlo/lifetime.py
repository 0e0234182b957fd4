# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Simulation of one investor lifetime.

Period 0 is the anchor holding the initial capital. Simulated years are
numbered ``1..horizon_years``; each one:

1. draws one historical period, read from both series at the same index
2. applies the blended return to the current value
3. adds the contribution (years ``<= contribution_years``) or subtracts the
   stipend (later years)
4. checks for ruin (value ``<= 0``)
"""

from typing import List, Tuple

from .config import SimulationConfig
from .evolution import advance, apply_cash_flow
from .resampler import PeriodSampler
from .return_series import HistoricalReturns

Trajectory = List[Tuple[int, float]]


class LifetimeSimulator:
    """Drives the yearly evolution model over the configured horizon.

    Both output modes are pure functions of the config, the historical
    returns and the indices drawn from the sampler: the same index sequence
    always produces the same result.
    """

    def __init__(self, config: SimulationConfig, returns: HistoricalReturns):
        self.config = config
        self.returns = returns
        self._weights = config.weights

    def _step(self, value: float, period: int, sampler: PeriodSampler) -> float:
        index = sampler.draw_period_index(self.returns.sample_space_size)
        stock_return, bond_return = self.returns.period(index)
        value = advance(value, stock_return, bond_return, self._weights)
        return apply_cash_flow(value, period, self.config)

    def simulate(self, sampler: PeriodSampler) -> float:
        """Run one lifetime and return its final value.

        Returns:
            The value after the last simulated year, or 0.0 if the portfolio
            was ruined. Ruin stops the lifetime immediately; no further years
            are drawn.
        """
        value = float(self.config.initial_capital)
        for period in range(1, self.config.horizon_years + 1):
            value = self._step(value, period, sampler)
            if value <= 0:
                return 0.0
        return value

    def simulate_trajectory(self, sampler: PeriodSampler) -> Trajectory:
        """Run one lifetime and return every (period, value) pair.

        The full horizon is always simulated, giving ``horizon_years + 1``
        points starting with ``(0, initial_capital)``. Values are floored at
        zero but a ruined portfolio keeps being stepped so the path covers the
        whole horizon. The path is for display: outcome statistics built from
        it still score a ruined lifetime as 0.0.
        """
        value = float(self.config.initial_capital)
        trajectory: Trajectory = [(0, value)]
        for period in range(1, self.config.horizon_years + 1):
            value = max(self._step(value, period, sampler), 0.0)
            trajectory.append((period, value))
        return trajectory
