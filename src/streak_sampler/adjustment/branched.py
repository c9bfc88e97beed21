"""Stepped adjustment curve.

A six-way step function symmetric around 0.5: the largest correction sits
in the middle of the range and it falls off in steps towards certainty,
reaching zero within 1% of either end.
"""

from __future__ import annotations

from streak_sampler.adjustment.base import Adjuster
from streak_sampler.adjustment.registry import adjuster_registry


@adjuster_registry.register("branched")
class BranchedAdjuster(Adjuster):
    """Stepped curve, the engine's default.

    ================================  ==========
    chance                            adjustment
    ================================  ==========
    <= 0.01 or >= 0.99                0
    <= 0.10 or >= 0.90                0.001
    <= 0.25 or >= 0.75                0.01
    <= 0.40 or >= 0.60                0.05
    otherwise                         0.1
    ================================  ==========
    """

    def adjust(self, chance: float) -> float:
        if chance <= 0.01 or chance >= 0.99:
            return 0.0
        if chance <= 0.10 or chance >= 0.90:
            return 0.001
        if chance <= 0.25 or chance >= 0.75:
            return 0.01
        if chance <= 0.40 or chance >= 0.60:
            return 0.05
        return 0.1

    def __repr__(self) -> str:
        return "BranchedAdjuster()"
