"""Replay source that hands out a fixed sequence of draws.

Used to drive the engine deterministically: forcing specific outcomes in
tests, or feeding the same draws to an adjusted and an unadjusted run so
the two can be compared directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from streak_sampler.exceptions import RandomSourceExhaustedError
from streak_sampler.randomness.base import RandomSource

if TYPE_CHECKING:
    from collections.abc import Iterable


class SequenceRandomSource(RandomSource):
    """Replays *draws* in order, one per ``next_float()`` call.

    Args:
        draws: Values in [0, 1). Copied on construction.

    Raises:
        ValueError: If any value lies outside [0, 1).
    """

    def __init__(self, draws: Iterable[float]) -> None:
        values = [float(d) for d in draws]
        for index, value in enumerate(values):
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Draw #{index} must be in [0, 1), got {value!r}")
        self._draws = values
        self._position = 0

    @property
    def name(self) -> str:
        """Return ``'sequence'``."""
        return "sequence"

    @property
    def draw_count(self) -> int:
        """Number of values handed out so far."""
        return self._position

    @property
    def remaining(self) -> int:
        return len(self._draws) - self._position

    def next_float(self) -> float:
        if self._position >= len(self._draws):
            raise RandomSourceExhaustedError(
                f"Sequence exhausted after {len(self._draws)} draws"
            )
        value = self._draws[self._position]
        self._position += 1
        return value
