# Copyright 2025 Spencer Williams
#
# Use of this source code is governed by an MIT license:
# https://github.com/sw23/life-model/blob/main/LICENSE

"""
Bootstrap resampling of historical periods.

Each simulated year draws one historical period uniformly at random, with
replacement: any historical year may recur any number of times, in any order.
Every trial owns its own resampler so trials never share generator state.
"""

from typing import Iterable, List, Optional, Protocol

import numpy as np

from ..errors import ConfigurationError


class PeriodSampler(Protocol):
    """Anything that can pick the historical period for the next simulated year."""

    def draw_period_index(self, sample_space_size: int) -> int:
        ...


class BootstrapResampler:
    """Draws uniformly random period indices with replacement.

    Example:
        >>> resampler = BootstrapResampler(seed=42)
        >>> index = resampler.draw_period_index(90)
        >>> 0 <= index < 90
        True
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None):
        """Initialize the resampler.

        Args:
            rng: Generator to draw from. Takes precedence over ``seed``.
            seed: Seed for a new generator when ``rng`` is not given.
        """
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def draw_period_index(self, sample_space_size: int) -> int:
        """Return a uniformly distributed index in ``[0, sample_space_size)``."""
        if sample_space_size < 1:
            raise ConfigurationError(
                f"sample_space_size must be at least 1, got {sample_space_size}"
            )
        return int(self.rng.integers(0, sample_space_size))


class ReplayResampler:
    """Replays a fixed sequence of period indices, cycling when exhausted.

    Useful for deterministic runs and for replaying history in chronological
    order, e.g. ``ReplayResampler(range(len(returns)))``.
    """

    def __init__(self, indices: Iterable[int]):
        self.indices: List[int] = [int(i) for i in indices]
        if not self.indices:
            raise ConfigurationError("ReplayResampler needs at least one index")
        self._position = 0

    def draw_period_index(self, sample_space_size: int) -> int:
        index = self.indices[self._position % len(self.indices)]
        self._position += 1
        if not 0 <= index < sample_space_size:
            raise ConfigurationError(
                f"Replayed index {index} is outside [0, {sample_space_size})"
            )
        return index

    @property
    def draws(self) -> int:
        """Number of indices handed out so far."""
        return self._position


def trial_resampler(root: np.random.SeedSequence, trial: int) -> BootstrapResampler:
    """Build the resampler for trial number ``trial`` of a run seeded by ``root``.

    The child seed is derived from the trial number alone, exactly as
    ``root.spawn()`` would derive its ``trial``-th child, so resamplers can be
    created one at a time in whichever process runs the trial.
    """
    if trial < 0:
        raise ConfigurationError(f"trial must be non-negative, got {trial}")
    child = np.random.SeedSequence(root.entropy, spawn_key=root.spawn_key + (trial,),
                                   pool_size=root.pool_size)
    return BootstrapResampler(rng=np.random.default_rng(child))


def spawn_resamplers(seed: Optional[int], count: int) -> List[BootstrapResampler]:
    """Create ``count`` independent resamplers from one seed.

    Equivalent to ``SeedSequence(seed).spawn(count)``: each trial has its own
    generator stream and a given seed yields the same trials regardless of
    how they are scheduled. Long runs should build resamplers per trial with
    ``trial_resampler`` instead of holding all of them at once.
    """
    if count < 1:
        raise ConfigurationError(f"count must be at least 1, got {count}")
    root = np.random.SeedSequence(seed)
    return [trial_resampler(root, trial) for trial in range(count)]
