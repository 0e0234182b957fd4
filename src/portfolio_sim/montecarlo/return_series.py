# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Historical return series used as the bootstrap sample space.

A return file holds one real-valued return per line (e.g. ``0.12`` for a 12%
year) with no header. Stocks and bonds are loaded separately and paired into
a HistoricalReturns object, which guarantees both series can be indexed with
the same random draw.
"""

import logging
import math
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from ..errors import ConfigurationError, InputParseError

logger = logging.getLogger(__name__)

STOCK_FILENAME = "stocks.txt"
BOND_FILENAME = "bonds.txt"


class ReturnSeries:
    """Read-only, zero-indexed sequence of per-period returns for one asset class.

    Example:
        >>> stocks = ReturnSeries("stocks", [0.12, -0.05, 0.21])
        >>> len(stocks)
        3
        >>> stocks[1]
        -0.05
    """

    def __init__(self, name: str, values: Sequence[float]):
        array = np.array(values, dtype=float)
        if array.ndim != 1:
            raise ConfigurationError(f"Return series '{name}' must be one-dimensional")
        if array.size == 0:
            raise ConfigurationError(f"Return series '{name}' is empty")
        if not np.all(np.isfinite(array)):
            raise ConfigurationError(f"Return series '{name}' contains non-finite values")
        array.setflags(write=False)
        self.name = name
        self._values = array

    @property
    def values(self) -> np.ndarray:
        """The underlying returns. The array is not writeable."""
        return self._values

    def __len__(self) -> int:
        return int(self._values.size)

    def __getitem__(self, index: int) -> float:
        return float(self._values[index])

    def __iter__(self):
        return (float(v) for v in self._values)

    def __repr__(self) -> str:
        return f"ReturnSeries(name={self.name!r}, length={len(self)})"


class HistoricalReturns:
    """Stock and bond return series of equal length.

    Index ``i`` refers to the same historical period in both series, so a
    single draw preserves that period's stock/bond correlation.

    Raises:
        ConfigurationError: If the two series differ in length
    """

    def __init__(self, stocks: ReturnSeries, bonds: ReturnSeries):
        if len(stocks) != len(bonds):
            raise ConfigurationError(
                f"Return series lengths differ: '{stocks.name}' has {len(stocks)} "
                f"entries, '{bonds.name}' has {len(bonds)}"
            )
        self.stocks = stocks
        self.bonds = bonds

    @classmethod
    def from_sequences(cls, stocks: Sequence[float],
                       bonds: Sequence[float]) -> 'HistoricalReturns':
        return cls(ReturnSeries("stocks", stocks), ReturnSeries("bonds", bonds))

    @property
    def sample_space_size(self) -> int:
        """Number of historical periods available to draw from."""
        return len(self.stocks)

    def period(self, index: int) -> Tuple[float, float]:
        """Return the (stock_return, bond_return) pair for one historical period."""
        return self.stocks[index], self.bonds[index]

    def __len__(self) -> int:
        return self.sample_space_size

    def __repr__(self) -> str:
        return f"HistoricalReturns(periods={self.sample_space_size})"


def parse_return_series(lines: Iterable[str], name: str) -> ReturnSeries:
    """Parse newline-delimited returns into a ReturnSeries.

    Trailing blank lines are ignored. Any other blank line, or a line that is
    not a finite real number, fails the whole parse: no partial series is
    returned.

    Raises:
        InputParseError: On an empty source or an invalid line
    """
    stripped = [line.strip() for line in lines]
    while stripped and not stripped[-1]:
        stripped.pop()

    if not stripped:
        raise InputParseError(f"Return series '{name}' has no entries", source=name)

    values = []
    for line_number, text in enumerate(stripped, start=1):
        if not text:
            raise InputParseError(
                f"{name}:{line_number}: missing return value",
                source=name, line_number=line_number,
            )
        try:
            value = float(text)
        except ValueError:
            raise InputParseError(
                f"{name}:{line_number}: {text!r} is not a valid real number",
                source=name, line_number=line_number,
            ) from None
        if not math.isfinite(value):
            raise InputParseError(
                f"{name}:{line_number}: {text!r} is not a finite number",
                source=name, line_number=line_number,
            )
        values.append(value)

    return ReturnSeries(name, values)


def load_return_series(path: Union[str, Path], name: Optional[str] = None) -> ReturnSeries:
    """Load a return series from a newline-delimited text file.

    Args:
        path: File containing one return per line
        name: Series name used in error messages. Defaults to the file stem.

    Raises:
        InputParseError: If the file cannot be read or any entry is invalid
    """
    path = Path(path)
    name = name or path.stem
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputParseError(
            f"Cannot read return series '{name}' from {path}: {e.strerror or e}",
            source=str(path),
        ) from e
    except UnicodeDecodeError as e:
        raise InputParseError(
            f"Cannot read return series '{name}' from {path}: "
            f"not UTF-8 text (byte {e.start})",
            source=str(path),
        ) from e

    series = parse_return_series(text.splitlines(), name)
    logger.debug("Loaded %d periods for '%s' from %s", len(series), name, path)
    return series


def load_historical_returns(stock_path: Union[str, Path] = STOCK_FILENAME,
                            bond_path: Union[str, Path] = BOND_FILENAME) -> HistoricalReturns:
    """Load and pair the stock and bond series.

    Raises:
        InputParseError: If either file is missing or malformed
        ConfigurationError: If the series lengths differ
    """
    stocks = load_return_series(stock_path, "stocks")
    bonds = load_return_series(bond_path, "bonds")
    returns = HistoricalReturns(stocks, bonds)
    logger.info("Loaded %d historical periods", returns.sample_space_size)
    return returns
