"""System random source using ``os.urandom()``.

Draws from the OS CSPRNG. The engine makes no unpredictability guarantees,
but this source is available for callers who prefer OS entropy.
"""

from __future__ import annotations

import os

from streak_sampler.randomness.base import RandomSource
from streak_sampler.randomness.registry import random_source_registry

# 53 bits of mantissa: 7 bytes give 56 bits, the low 3 are dropped.
_FLOAT_BYTES = 7
_FLOAT_SHIFT = 3
_FLOAT_SCALE = 2.0**-53


@random_source_registry.register("system")
class SystemRandomSource(RandomSource):
    """``os.urandom()`` wrapper producing 53-bit floats in [0, 1)."""

    @property
    def name(self) -> str:
        """Return ``'system'``."""
        return "system"

    def next_float(self) -> float:
        raw = int.from_bytes(os.urandom(_FLOAT_BYTES), "big") >> _FLOAT_SHIFT
        return raw * _FLOAT_SCALE
