"""Smooth adjustment curve.

Product of a downward parabola and a tent function, both centred on 0.5.
Zero at 0 and 1, peaking at 0.125 for a chance of 0.5.
"""

from __future__ import annotations

from streak_sampler.adjustment.base import Adjuster
from streak_sampler.adjustment.registry import adjuster_registry


@adjuster_registry.register("parabola")
class ParabolaAdjuster(Adjuster):
    """Smooth curve.

    Formula::

        r = 0.25 - (chance - 0.5) ** 2
        adjustment = (0.5 - |chance - 0.5|) * r
    """

    def adjust(self, chance: float) -> float:
        distance = abs(chance - 0.5)
        r = 0.25 - distance**2
        return (0.5 - distance) * r

    def __repr__(self) -> str:
        return "ParabolaAdjuster()"
