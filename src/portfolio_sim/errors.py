# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Exceptions raised by the portfolio simulator.

Both error types subclass ``ValueError`` so callers that already guard
against bad values keep working.
"""

from typing import Optional


class PortfolioSimError(Exception):
    """Base class for all simulator errors."""


class ConfigurationError(PortfolioSimError, ValueError):
    """Invalid simulation parameters or inconsistent inputs.

    Raised before any simulation runs, e.g. for asset weights that do not
    sum to 1.0, return series of different lengths, or a simulation count
    of zero.
    """


class InputParseError(PortfolioSimError, ValueError):
    """A return-series source could not be read or parsed.

    Attributes:
        source: Name or path of the failing source
        line_number: 1-based line number of the bad entry, if known
    """

    def __init__(self, message: str, source: Optional[str] = None,
                 line_number: Optional[int] = None):
        super().__init__(message)
        self.source = source
        self.line_number = line_number
