"""Registry of uniform random sources, keyed by ``random_source_type`` names.

Sources from other packages (a hardware RNG, a recorded stream) are picked
up from the ``streak_sampler.random_sources`` entry-point group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from streak_sampler.registry import PluginRegistry

if TYPE_CHECKING:
    from streak_sampler.randomness.base import RandomSource

random_source_registry: PluginRegistry[RandomSource] = PluginRegistry(
    "random source", group="streak_sampler.random_sources"
)
