# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Bootstrap Portfolio Simulator

Monte Carlo simulation of a long-horizon stock/bond portfolio. Future years
are synthesized by resampling historical returns with replacement, under a
contribution phase followed by a withdrawal phase.

Example usage:
    from portfolio_sim import (SimulationConfig, MonteCarloSimulator,
                               load_historical_returns, format_success_rate)

    returns = load_historical_returns('stocks.txt', 'bonds.txt')
    config = SimulationConfig(initial_capital=135000, annual_contribution=60000,
                              annual_withdrawal=65000, contribution_years=25,
                              horizon_years=75, stock_weight=0.75, bond_weight=0.25,
                              num_simulations=1000)
    results = MonteCarloSimulator(returns, config).run()
    print(format_success_rate(results.summarize()))
"""

# Errors
from .errors import PortfolioSimError, ConfigurationError, InputParseError

# Monte Carlo Simulation
from .montecarlo import (
    SimulationConfig,
    AssetWeights,
    ReturnSeries,
    HistoricalReturns,
    parse_return_series,
    load_return_series,
    load_historical_returns,
    BootstrapResampler,
    ReplayResampler,
    LifetimeSimulator,
    MonteCarloSimulator,
    MonteCarloResults,
    SimulationSummary,
    advance,
    run,
)

# Reporting
from .reporting import format_success_rate, format_summary, report

# Version
from .__meta__ import __version__

__all__ = [
    # Errors
    'PortfolioSimError', 'ConfigurationError', 'InputParseError',
    # Monte Carlo
    'SimulationConfig', 'AssetWeights',
    'ReturnSeries', 'HistoricalReturns',
    'parse_return_series', 'load_return_series', 'load_historical_returns',
    'BootstrapResampler', 'ReplayResampler',
    'LifetimeSimulator', 'MonteCarloSimulator', 'MonteCarloResults',
    'SimulationSummary', 'advance', 'run',
    # Reporting
    'format_success_rate', 'format_summary', 'report',
    # Version
    '__version__',
]
