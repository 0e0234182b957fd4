# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Command-line entry point for bootstrap portfolio simulations."""

import argparse
import logging
import sys
from typing import List, Optional

from .errors import PortfolioSimError
from .log import configure_logging
from .montecarlo import config as defaults
from .montecarlo.config import SimulationConfig
from .montecarlo.return_series import STOCK_FILENAME, BOND_FILENAME, load_historical_returns
from .montecarlo.simulator import MonteCarloSimulator
from .reporting import report

logger = logging.getLogger(__name__)

MODES = ("success-rate", "trajectory", "histogram", "bands")
DEFAULT_OUTPUTS = {
    "trajectory": "trajectory.png",
    "histogram": "histogram.png",
    "bands": "percentiles.png",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-sim",
        description="Monte Carlo simulation of a stock/bond portfolio by resampling historical returns",
    )
    parser.add_argument('--stocks', default=STOCK_FILENAME,
                        help=f'Stock returns, one per line (default: {STOCK_FILENAME})')
    parser.add_argument('--bonds', default=BOND_FILENAME,
                        help=f'Bond returns, one per line (default: {BOND_FILENAME})')
    parser.add_argument('--mode', choices=MODES, default="success-rate",
                        help='What to produce (default: success-rate)')
    parser.add_argument('--output', default=None,
                        help='Chart file for trajectory, histogram and bands modes')
    parser.add_argument('--detailed', action='store_true',
                        help='Print distribution statistics after the success rate')

    sim = parser.add_argument_group('simulation')
    sim.add_argument('--initial-capital', type=float, default=defaults.INITIAL_CAPITAL)
    sim.add_argument('--contribution', type=float, default=defaults.YEARLY_CONTRIBUTION,
                     help='Amount added each contribution year')
    sim.add_argument('--withdrawal', type=float, default=defaults.YEARLY_WITHDRAWAL,
                     help='Stipend withdrawn each year after the contribution phase')
    sim.add_argument('--contribution-years', type=int, default=None,
                     help='Length of the contribution phase (default: whole horizon)')
    sim.add_argument('--years', type=int, default=defaults.TIME_HORIZON_IN_YEARS,
                     help='Simulated horizon in years')
    sim.add_argument('--stock-weight', type=float, default=defaults.STOCK_WEIGHT)
    sim.add_argument('--bond-weight', type=float, default=None,
                     help='Defaults to 1 - stock weight')
    sim.add_argument('--simulations', type=int, default=defaults.SIMULATIONS)
    sim.add_argument('--seed', type=int, default=None)
    sim.add_argument('--bins', type=int, default=defaults.HISTOGRAM_BINS,
                     help='Histogram bin count')
    sim.add_argument('--workers', type=int, default=1,
                     help='Worker processes (default: 1, sequential)')

    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        initial_capital=args.initial_capital,
        annual_contribution=args.contribution,
        annual_withdrawal=args.withdrawal,
        contribution_years=args.years if args.contribution_years is None else args.contribution_years,
        horizon_years=args.years,
        stock_weight=args.stock_weight,
        bond_weight=1.0 - args.stock_weight if args.bond_weight is None else args.bond_weight,
        num_simulations=args.simulations,
        random_seed=args.seed,
        histogram_bins=args.bins,
        n_workers=args.workers,
    )


def run_cli(args: argparse.Namespace) -> None:
    # Validate everything before touching the data files
    config = config_from_args(args)
    returns = load_historical_returns(args.stocks, args.bonds)
    simulator = MonteCarloSimulator(returns, config)
    output = args.output or DEFAULT_OUTPUTS.get(args.mode)

    # Imported lazily so the text modes do not pay for matplotlib
    if args.mode == "trajectory":
        from .plotting import plot_trajectory
        path = plot_trajectory(simulator.run_single(), output)
        print(f"Wrote trajectory chart to {path}")
        return

    if args.mode == "bands":
        from .plotting import plot_percentile_bands
        results = simulator.run_trajectories()
        path = plot_percentile_bands(results, output)
    else:
        results = simulator.run()
        path = None
        if args.mode == "histogram":
            from .plotting import plot_histogram
            path = plot_histogram(results, output, config.histogram_bins)

    report(results.summarize(), detailed=args.detailed)
    if path is not None:
        print(f"Wrote chart to {path}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command-line execution."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        run_cli(args)
    except (PortfolioSimError, OSError) as e:
        logger.debug("Simulation aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
