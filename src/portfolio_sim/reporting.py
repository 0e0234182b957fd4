# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Human-readable reports for Monte Carlo summaries."""

import sys
from typing import Optional, TextIO

from .montecarlo.results import SimulationSummary


def format_success_rate(summary: SimulationSummary) -> str:
    """The one-line success report, with the percentage left unrounded."""
    return (f"Out of {summary.num_simulations} simulations "
            f"you passed {summary.success_rate}% of the time")


def format_summary(summary: SimulationSummary) -> str:
    lines = [
        format_success_rate(summary),
        f"  Final value mean:   ${summary.mean:,.2f}",
        f"  Final value median: ${summary.median:,.2f}",
        f"  Std deviation:      ${summary.std:,.2f}",
        f"  Range:              ${summary.min:,.2f} to ${summary.max:,.2f}",
    ]
    for name, value in summary.percentiles.items():
        lines.append(f"  {name + ':':<19} ${value:,.2f}")
    return "\n".join(lines)


def report(summary: SimulationSummary, stream: Optional[TextIO] = None,
           detailed: bool = False) -> None:
    """Write the summary to ``stream`` (stdout by default)."""
    stream = stream or sys.stdout
    text = format_summary(summary) if detailed else format_success_rate(summary)
    stream.write(text + "\n")
