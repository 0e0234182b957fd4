# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monte Carlo simulation orchestrator.

This module provides the MonteCarloSimulator class which runs many
independent investor lifetimes against the same historical returns and
collects their outcomes.
"""

import logging
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from typing import Callable, List, Optional, Tuple, TypeVar

import numpy as np

from ..errors import ConfigurationError
from .config import SimulationConfig
from .lifetime import LifetimeSimulator, Trajectory
from .resampler import BootstrapResampler, trial_resampler
from .results import MonteCarloResults
from .return_series import HistoricalReturns

logger = logging.getLogger(__name__)

T = TypeVar('T')


class MonteCarloSimulator:
    """Orchestrates bootstrap Monte Carlo simulations.

    The workflow:
    1. Derive each trial's resampler from the configured seed as the trial starts
    2. Run a LifetimeSimulator for each trial, sequentially or on a process pool
    3. Collect the outcomes, in trial order, into MonteCarloResults

    Trials share nothing but the read-only historical returns, so running
    them on several workers gives the same results as running them in turn.
    The yearly loop is pure Python and holds the GIL, so threads add no
    throughput and ``n_workers > 1`` runs blocks of trials in worker processes.
    Each worker receives a copy of the returns, so small runs are faster
    sequentially.

    Example:
        >>> returns = load_historical_returns("stocks.txt", "bonds.txt")
        >>> simulator = MonteCarloSimulator(
        ...     returns,
        ...     config=SimulationConfig(num_simulations=1000, random_seed=7)
        ... )
        >>> results = simulator.run()
        >>> print(format_success_rate(results.summarize()))
    """

    def __init__(self, returns: HistoricalReturns,
                 config: Optional[SimulationConfig] = None):
        """Initialize the simulator.

        Args:
            returns: Paired stock/bond history to resample from
            config: Simulation configuration. If None, uses defaults.
        """
        self.returns = returns
        self.config = config or SimulationConfig()
        self.lifetime = LifetimeSimulator(self.config, returns)

    def _resolve_count(self, simulation_count: Optional[int]) -> int:
        count = self.config.num_simulations if simulation_count is None else simulation_count
        if count < 1:
            raise ConfigurationError(f"simulation_count must be at least 1, got {count}")
        return count

    def _run_trials(self, trial: Callable[[BootstrapResampler], T], count: int) -> List[T]:
        root = np.random.SeedSequence(self.config.random_seed)
        workers = min(self.config.n_workers, count)

        logger.debug("Running %d trials on %d worker(s) over %d historical periods",
                     count, workers, self.returns.sample_space_size)

        if workers == 1:
            return _run_chunk(trial, root, (0, count))

        # One contiguous block of trials per process; map() keeps block order
        step = -(-count // workers)
        blocks = [(start, min(start + step, count)) for start in range(0, count, step)]
        with ProcessPoolExecutor(max_workers=workers) as executor:
            chunks = executor.map(partial(_run_chunk, trial, root), blocks)
            return [outcome for chunk in chunks for outcome in chunk]

    def run(self, simulation_count: Optional[int] = None) -> MonteCarloResults:
        """Run the Monte Carlo simulation in scalar mode.

        Args:
            simulation_count: Number of trials. Defaults to
                             ``config.num_simulations``.

        Returns:
            MonteCarloResults holding each trial's final value

        Raises:
            ConfigurationError: If the simulation count is below 1
        """
        count = self._resolve_count(simulation_count)
        final_values = self._run_trials(self.lifetime.simulate, count)
        results = MonteCarloResults(final_values)
        logger.info("Completed %d simulations, %d ended above zero",
                    count, results.success_count())
        return results

    def run_trajectories(self, simulation_count: Optional[int] = None) -> MonteCarloResults:
        """Run the Monte Carlo simulation recording every trial's full path.

        Returns:
            MonteCarloResults with per-trial trajectories attached
        """
        count = self._resolve_count(simulation_count)
        trajectories = self._run_trials(self.lifetime.simulate_trajectory, count)
        results = MonteCarloResults.from_trajectories(trajectories)
        logger.info("Completed %d trajectory simulations", count)
        return results

    def run_single(self) -> Trajectory:
        """Run a single lifetime and return its path.

        Useful for debugging or plotting one possible future.
        """
        resampler = BootstrapResampler(seed=self.config.random_seed)
        return self.lifetime.simulate_trajectory(resampler)


def run(config: SimulationConfig, returns: HistoricalReturns,
        simulation_count: Optional[int] = None) -> MonteCarloResults:
    """Run ``simulation_count`` independent lifetimes and collect their final values."""
    return MonteCarloSimulator(returns, config).run(simulation_count)


def _run_chunk(trial: Callable[[BootstrapResampler], T], root: np.random.SeedSequence,
               bounds: Tuple[int, int]) -> List[T]:
    start, stop = bounds
    return [trial(trial_resampler(root, index)) for index in range(start, stop)]
