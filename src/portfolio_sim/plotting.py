# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Chart rendering for simulation output.

Charts are written straight to files with the non-interactive Agg backend;
the output format follows the file suffix (``.png``, ``.svg``, ...).
"""

from pathlib import Path
from typing import Union

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import matplotlib.ticker as mticker  # noqa: E402

from .errors import ConfigurationError  # noqa: E402
from .montecarlo.lifetime import Trajectory  # noqa: E402
from .montecarlo.results import MonteCarloResults  # noqa: E402

PathLike = Union[str, Path]

_DOLLARS = mticker.FuncFormatter(lambda x, _: f"${x:,.0f}")


def _save(fig, path: PathLike) -> Path:
    path = Path(path)
    fig.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_trajectory(trajectory: Trajectory, path: PathLike,
                    title: str = "Simulated portfolio value") -> Path:
    """Line chart of one lifetime: x = year, y = portfolio value."""
    if not trajectory:
        raise ConfigurationError("Cannot plot an empty trajectory")
    periods = [period for period, _ in trajectory]
    values = [value for _, value in trajectory]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(periods, values, color="black", linewidth=1.5)
    ax.set_xlabel("Year")
    ax.set_ylabel("Portfolio value")
    ax.set_title(title)
    ax.yaxis.set_major_formatter(_DOLLARS)
    ax.grid(True, linestyle="--", alpha=0.5)
    return _save(fig, path)


def plot_histogram(results: MonteCarloResults, path: PathLike, bins: int,
                   title: str = "Distribution of final portfolio values") -> Path:
    """Histogram of final values with a fixed bin count."""
    counts, edges = results.histogram(bins)

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.stairs(counts, edges, fill=True, color="steelblue", alpha=0.8)
    ax.set_xlabel("Final portfolio value")
    ax.set_ylabel("Simulations")
    ax.set_title(f"{title} ({results.num_simulations:,} simulations, "
                 f"{results.success_rate():.1f}% success)")
    ax.xaxis.set_major_formatter(_DOLLARS)
    return _save(fig, path)


def plot_percentile_bands(results: MonteCarloResults, path: PathLike,
                          title: str = "Portfolio value percentiles") -> Path:
    """Median path with the 5-95 and 25-75 percentile bands shaded."""
    df = results.get_percentile_df()
    periods = df.index.to_numpy()

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.fill_between(periods, df["Bottom 5%"], df["Top 5%"],
                    color="gray", alpha=0.2, label="5-95th percentile")
    ax.fill_between(periods, df["Bottom 25%"], df["Top 25%"],
                    color="gray", alpha=0.4, label="25-75th percentile")
    ax.plot(periods, df["Median"], color="black", linewidth=2, label="Median")
    ax.set_xlabel("Year")
    ax.set_ylabel("Portfolio value")
    ax.set_title(f"{title} ({results.num_simulations:,} simulations)")
    ax.yaxis.set_major_formatter(_DOLLARS)
    ax.grid(True, linestyle="--", alpha=0.5)
    ax.legend()
    return _save(fig, path)
