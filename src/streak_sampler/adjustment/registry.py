"""Registry of adjustment curves, keyed by the names ``adjuster_type`` accepts.

Curves from other packages are picked up from the
``streak_sampler.adjusters`` entry-point group.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from streak_sampler.registry import PluginRegistry

if TYPE_CHECKING:
    from streak_sampler.adjustment.base import Adjuster

adjuster_registry: PluginRegistry[Adjuster] = PluginRegistry(
    "adjuster", group="streak_sampler.adjusters"
)
