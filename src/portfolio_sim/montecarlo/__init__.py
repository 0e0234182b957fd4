# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Monte Carlo simulation module for bootstrap portfolio modeling.

This module resamples historical stock and bond returns, year by year and
with replacement, to simulate many possible investor lifetimes under a
contribution/withdrawal schedule.
"""

from .config import SimulationConfig, AssetWeights
from .return_series import (
    ReturnSeries,
    HistoricalReturns,
    parse_return_series,
    load_return_series,
    load_historical_returns,
)
from .resampler import (
    BootstrapResampler,
    ReplayResampler,
    PeriodSampler,
    spawn_resamplers,
    trial_resampler,
)
from .evolution import advance, apply_cash_flow, blended_return
from .lifetime import LifetimeSimulator, Trajectory
from .simulator import MonteCarloSimulator, run
from .results import MonteCarloResults, SimulationSummary

__all__ = [
    'SimulationConfig',
    'AssetWeights',
    'ReturnSeries',
    'HistoricalReturns',
    'parse_return_series',
    'load_return_series',
    'load_historical_returns',
    'BootstrapResampler',
    'ReplayResampler',
    'PeriodSampler',
    'spawn_resamplers',
    'trial_resampler',
    'advance',
    'apply_cash_flow',
    'blended_return',
    'LifetimeSimulator',
    'Trajectory',
    'MonteCarloSimulator',
    'run',
    'MonteCarloResults',
    'SimulationSummary',
]
