# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Single-year portfolio evolution.

The performance step and the cash-flow step are kept separate: the blended
return is applied to the pre-period value first, then the year's contribution
or withdrawal. Neither step clamps; ruin is detected by the lifetime
simulator.
"""

from .config import AssetWeights, SimulationConfig


def blended_return(stock_return: float, bond_return: float, weights: AssetWeights) -> float:
    """Weighted combination of one period's stock and bond returns."""
    return stock_return * weights.stock + bond_return * weights.bond


def advance(current_value: float, stock_return: float, bond_return: float,
            weights: AssetWeights) -> float:
    """Apply one period's blended return to the portfolio value.

    Example:
        >>> advance(100_000, 0.50, 0.25, AssetWeights(0.5, 0.5))
        137500.0
    """
    return current_value * (1 + blended_return(stock_return, bond_return, weights))


def apply_cash_flow(value: float, period: int, config: SimulationConfig) -> float:
    """Add the contribution or subtract the stipend for simulated year ``period``."""
    if config.is_contribution_year(period):
        return value + config.annual_contribution
    return value - config.annual_withdrawal
