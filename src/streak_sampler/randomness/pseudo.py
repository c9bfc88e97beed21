"""Pseudo-random source backed by a numpy ``Generator``.

The default source for the engine. Unseeded by default; a seed may be given
for reproducible experiments.
"""

from __future__ import annotations

import numpy as np

from streak_sampler.randomness.base import RandomSource
from streak_sampler.randomness.registry import random_source_registry


@random_source_registry.register("pseudo")
class PseudoRandomSource(RandomSource):
    """``numpy.random.default_rng()`` wrapper.

    Args:
        seed: Optional RNG seed for reproducible output.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = np.random.default_rng(seed)

    @property
    def name(self) -> str:
        """Return ``'pseudo'``."""
        return "pseudo"

    @property
    def seed(self) -> int | None:
        return self._seed

    def next_float(self) -> float:
        return float(self._rng.random())

    def next_floats(self, n: int) -> np.ndarray:
        """Return *n* values from [0, 1) in one vectorised call.

        Args:
            n: Number of values to generate.

        Returns:
            1-D float64 array of length *n*.
        """
        return self._rng.random(n)
