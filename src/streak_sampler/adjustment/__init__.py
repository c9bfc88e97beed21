"""Adjustment curve subsystem for streak-sampler.

Supplies the per-iteration correction the engine applies against the
current streak. Ships a stepped and a smooth curve; any callable can be
adapted with FunctionAdjuster.
"""

from streak_sampler.adjustment.base import Adjuster, FunctionAdjuster
from streak_sampler.adjustment.branched import BranchedAdjuster
from streak_sampler.adjustment.parabola import ParabolaAdjuster
from streak_sampler.adjustment.registry import adjuster_registry

__all__ = [
    "Adjuster",
    "BranchedAdjuster",
    "FunctionAdjuster",
    "ParabolaAdjuster",
    "adjuster_registry",
]
