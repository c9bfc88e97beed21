"""Base classes for adjustment curves.

An adjuster maps a probability in [0, 1] to the amount the engine adds to
(failure streak) or subtracts from (success streak) the chance, once per
unit of streak magnitude.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class Adjuster(ABC):
    """Abstract base class for adjustment curves.

    Implementations must be deterministic, stateless and side-effect free
    over the domain [0, 1]. A positive return value pulls the chance back
    against the current streak (shorter streaks); a negative value pushes
    it further along (longer streaks).

    Example with a curve that always returns ``0.10 * chance`` and a base
    chance of 0.4::

        success streak of 2:  0.4 -> 0.36 -> 0.324
        failure streak of 2:  0.4 -> 0.44 -> 0.484
    """

    @abstractmethod
    def adjust(self, chance: float) -> float:
        """Return the adjustment for a single iteration.

        Args:
            chance: Probability value for the current iteration, in [0, 1].

        Returns:
            The amount to add to or subtract from *chance*.
        """

    def __call__(self, chance: float) -> float:
        return self.adjust(chance)


class FunctionAdjuster(Adjuster):
    """Adapts a plain ``float -> float`` callable to the Adjuster interface."""

    def __init__(self, func: Callable[[float], float]) -> None:
        if not callable(func):
            raise TypeError(f"Adjuster function must be callable, got {type(func).__name__}")
        self._func = func

    @property
    def func(self) -> Callable[[float], float]:
        """The wrapped callable."""
        return self._func

    def adjust(self, chance: float) -> float:
        return float(self._func(chance))

    def __repr__(self) -> str:
        name = getattr(self._func, "__name__", repr(self._func))
        return f"FunctionAdjuster({name})"
