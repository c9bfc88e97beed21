"""Uniform random source subsystem for streak-sampler.

Re-exports the ABC, registry, and all built-in source implementations
for convenient access::

    from streak_sampler.randomness import RandomSource, random_source_registry
    from streak_sampler.randomness import PseudoRandomSource, SequenceRandomSource
"""

from streak_sampler.randomness.base import RandomSource
from streak_sampler.randomness.pseudo import PseudoRandomSource
from streak_sampler.randomness.registry import random_source_registry
from streak_sampler.randomness.sequence import SequenceRandomSource
from streak_sampler.randomness.system import SystemRandomSource

__all__ = [
    "PseudoRandomSource",
    "RandomSource",
    "SequenceRandomSource",
    "SystemRandomSource",
    "random_source_registry",
]
