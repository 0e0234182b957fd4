# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""Configuration for Monte Carlo simulations."""

import math
from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, Mapping, Optional

from ..errors import ConfigurationError

# ===== PORTFOLIO PARAMETERS =====
INITIAL_CAPITAL = 50_000.0  # Portfolio value at period 0
YEARLY_CONTRIBUTION = 50_000.0  # Added each contribution-phase year
YEARLY_WITHDRAWAL = 0.0  # Stipend subtracted each year after the contribution phase
TIME_HORIZON_IN_YEARS = 40
CONTRIBUTION_YEARS = 40  # Contribution phase covers the whole horizon by default

# ===== ALLOCATION =====
STOCK_WEIGHT = 0.75
BOND_WEIGHT = 1.0 - STOCK_WEIGHT
WEIGHT_SUM_TOLERANCE = 1e-9

# ===== MONTE CARLO =====
SIMULATIONS = 100
HISTOGRAM_BINS = 30


@dataclass(frozen=True)
class AssetWeights:
    """Fixed stock/bond blend applied to every simulated period.

    Attributes:
        stock: Fraction of the portfolio held in stocks (0.0 to 1.0)
        bond: Fraction of the portfolio held in bonds (0.0 to 1.0)
    """
    stock: float
    bond: float

    def __post_init__(self):
        for label, weight in (("stock", self.stock), ("bond", self.bond)):
            if not math.isfinite(weight) or weight < 0.0 or weight > 1.0:
                raise ConfigurationError(
                    f"{label} weight must be between 0.0 and 1.0, got {weight}"
                )
        total = self.stock + self.bond
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ConfigurationError(
                f"Asset weights must sum to 1.0, got {self.stock} + {self.bond} = {total}"
            )


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration for a bootstrap Monte Carlo run.

    All validation happens once, here, so the simulation loop never has to
    re-check weights or horizon bounds.

    Attributes:
        initial_capital: Portfolio value before the first simulated year.
        annual_contribution: Amount added in each contribution-phase year.
        annual_withdrawal: Stipend subtracted in each year after the
            contribution phase.
        contribution_years: Number of leading years that receive a
            contribution. Years ``1..contribution_years`` contribute, later
            years withdraw.
        horizon_years: Number of simulated years.
        stock_weight: Fraction held in stocks.
        bond_weight: Fraction held in bonds. Must sum to 1.0 with
            ``stock_weight``.
        num_simulations: Number of Monte Carlo trials. Default 100.
        random_seed: Optional seed for reproducible results. Default None.
        histogram_bins: Bin count for final-value histograms.
        n_workers: Worker processes used to run trials. 1 runs sequentially
            in the calling process.
    """
    initial_capital: float = INITIAL_CAPITAL
    annual_contribution: float = YEARLY_CONTRIBUTION
    annual_withdrawal: float = YEARLY_WITHDRAWAL
    contribution_years: int = CONTRIBUTION_YEARS
    horizon_years: int = TIME_HORIZON_IN_YEARS
    stock_weight: float = STOCK_WEIGHT
    bond_weight: float = BOND_WEIGHT
    num_simulations: int = SIMULATIONS
    random_seed: Optional[int] = None
    histogram_bins: int = HISTOGRAM_BINS
    n_workers: int = 1

    def __post_init__(self):
        for name in ("contribution_years", "horizon_years", "num_simulations",
                     "histogram_bins", "n_workers"):
            _require_int(name, getattr(self, name))
        if self.random_seed is not None:
            _require_int("random_seed", self.random_seed)

        for name in ("initial_capital", "annual_contribution", "annual_withdrawal",
                     "stock_weight", "bond_weight"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigurationError(f"{name} must be a number, got {value!r}")

        for name in ("initial_capital", "annual_contribution", "annual_withdrawal"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(f"{name} must be a non-negative number, got {value}")

        if self.horizon_years < 1:
            raise ConfigurationError(
                f"horizon_years must be at least 1, got {self.horizon_years}"
            )
        if not 0 <= self.contribution_years <= self.horizon_years:
            raise ConfigurationError(
                f"contribution_years must be between 0 and horizon_years "
                f"({self.horizon_years}), got {self.contribution_years}"
            )
        if self.num_simulations < 1:
            raise ConfigurationError("num_simulations must be at least 1")
        if self.histogram_bins < 1:
            raise ConfigurationError("histogram_bins must be at least 1")
        if self.n_workers < 1:
            raise ConfigurationError("n_workers must be at least 1")

        AssetWeights(self.stock_weight, self.bond_weight)

    @property
    def weights(self) -> AssetWeights:
        return AssetWeights(self.stock_weight, self.bond_weight)

    def is_contribution_year(self, period: int) -> bool:
        """Whether simulated year ``period`` (1-based) receives a contribution."""
        return period <= self.contribution_years

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> 'SimulationConfig':
        """Build a config from loosely typed input such as a JSON payload.

        Missing keys fall back to the defaults. ``bond_weight`` defaults to
        ``1 - stock_weight`` when only the stock weight is given.

        Raises:
            ConfigurationError: On unknown keys or values of the wrong type
        """
        known = {f.name: f for f in fields(cls)}
        unknown = sorted(set(values) - set(known))
        if unknown:
            raise ConfigurationError(f"Unknown configuration options: {unknown}")

        kwargs: Dict[str, Any] = {}
        for name, raw in values.items():
            if raw is None:
                if name == "random_seed":
                    kwargs[name] = None
                continue
            if known[name].type in (int, Optional[int]):
                kwargs[name] = _to_int(name, raw)
            else:
                kwargs[name] = _to_float(name, raw)

        if "stock_weight" in kwargs and "bond_weight" not in kwargs:
            kwargs["bond_weight"] = 1.0 - kwargs["stock_weight"]
        return cls(**kwargs)


def _require_int(name: str, value: Any) -> None:
    # bool is an int subclass but never a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")


def _to_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be a number, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
    raise ConfigurationError(f"{name} must be a number, got {value!r}")


def _to_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise ConfigurationError(f"{name} must be an integer, got {value!r}")
