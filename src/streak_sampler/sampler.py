"""Streak-adjusted boolean sampler.

Produces success/failure outcomes from a caller-supplied chance while
pulling the effective chance against the current streak, so long runs of
the same outcome become less likely.

Per-roll pipeline::

    validate chance -> compound adjustments over |streak| -> clamp to [0, 1]
    -> one draw from the random source -> compare -> update streak

Streak transitions (``s`` is the counter before the roll)::

    success:  s >= 0 -> s + 1    s < 0 -> 0
    failure:  s <= 0 -> s - 1    s > 0 -> 0

A success that ends a failure streak therefore leaves the counter at 0 and
the following roll is unadjusted; the same holds for a failure ending a
success streak.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Union

from streak_sampler.adjustment.base import Adjuster, FunctionAdjuster
from streak_sampler.adjustment.branched import BranchedAdjuster
from streak_sampler.exceptions import InvalidChanceError
from streak_sampler.logging.types import RollRecord
from streak_sampler.randomness.pseudo import PseudoRandomSource

if TYPE_CHECKING:
    from collections.abc import Callable

    from streak_sampler.logging.logger import RollLogger
    from streak_sampler.randomness.base import RandomSource
    from streak_sampler.report import DiagnosticReport

logger = logging.getLogger("streak_sampler")

AdjusterLike = Union[Adjuster, "Callable[[float], float]"]


def validate_chance(chance: float) -> float:
    """Check that *chance* lies in the closed interval [0, 1].

    Args:
        chance: Probability value to check.

    Returns:
        *chance* as a float.

    Raises:
        InvalidChanceError: If *chance* is outside [0, 1] or NaN.
    """
    if not 0.0 <= chance <= 1.0:
        raise InvalidChanceError(f"Chance must be in the interval [0, 1], got {chance!r}")
    return float(chance)


def as_adjuster(adjuster: AdjusterLike) -> Adjuster:
    """Return *adjuster* as an Adjuster, wrapping plain callables.

    Raises:
        TypeError: If *adjuster* is neither an Adjuster nor callable.
    """
    if isinstance(adjuster, Adjuster):
        return adjuster
    if callable(adjuster):
        return FunctionAdjuster(adjuster)
    raise TypeError(f"Expected an Adjuster or a callable, got {type(adjuster).__name__}")


class StreakAdjustedSampler:
    """Boolean sampler that dampens streaks of identical outcomes.

    Each instance owns a signed streak counter (negative for consecutive
    failures, positive for consecutive successes) and its random source.
    Instances are not synchronised; use one instance per sequence of
    correlated rolls.

    Args:
        adjuster: Adjustment curve, or a plain ``float -> float`` callable.
            Defaults to :class:`BranchedAdjuster`.
        random_source: Source of uniform draws in [0, 1). Defaults to a new
            unseeded :class:`PseudoRandomSource`.
        max_adjustments: Upper bound on adjuster iterations per roll.
            ``0`` or less means unbounded, so the cost of a roll grows with
            the streak magnitude. The streak counter itself is never capped.
        roll_logger: Optional per-roll diagnostic logger.
    """

    def __init__(
        self,
        adjuster: AdjusterLike | None = None,
        random_source: RandomSource | None = None,
        *,
        max_adjustments: int = 0,
        roll_logger: RollLogger | None = None,
    ) -> None:
        self._streak = 0
        self._adjuster = as_adjuster(adjuster) if adjuster is not None else BranchedAdjuster()
        self._random_source = random_source if random_source is not None else PseudoRandomSource()
        self._max_adjustments = max_adjustments
        self._roll_logger = roll_logger

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(adjuster={self._adjuster!r}, "
            f"random_source={self._random_source.name!r}, streak={self._streak})"
        )

    @property
    def streak(self) -> int:
        """Current streak counter (<0 failure streak, >0 success streak)."""
        return self._streak

    @property
    def adjuster(self) -> Adjuster:
        return self._adjuster

    @property
    def random_source(self) -> RandomSource:
        return self._random_source

    @property
    def max_adjustments(self) -> int:
        return self._max_adjustments

    def set_adjuster(self, adjuster: AdjusterLike) -> StreakAdjustedSampler:
        """Replace the adjustment curve without clearing the streak.

        Args:
            adjuster: The new curve, or a plain ``float -> float`` callable.

        Returns:
            This instance, for chaining.
        """
        self._adjuster = as_adjuster(adjuster)
        logger.debug("Adjuster replaced with %r (streak kept at %d)", self._adjuster, self._streak)
        return self

    def reset(self) -> None:
        """Forget all previous outcomes.

        The next ``next(chance)`` call uses *chance* unmodified.
        """
        self._streak = 0

    def close(self) -> None:
        """Close the random source this sampler draws from."""
        self._random_source.close()

    def __enter__(self) -> StreakAdjustedSampler:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def effective_chance(self, chance: float) -> float:
        """Return the chance the next roll would use, without rolling.

        Args:
            chance: Nominal chance of success, in [0, 1].

        Returns:
            The adjusted chance, clamped to [0, 1].

        Raises:
            InvalidChanceError: If *chance* is outside [0, 1].
        """
        chance = validate_chance(chance)
        return self._adjusted(chance, self._adjustment_steps())

    def next(self, chance: float) -> bool:
        """Roll once and update the streak.

        Args:
            chance: Intended chance of success, in [0, 1].

        Returns:
            ``True`` on success, ``False`` on failure.

        Raises:
            InvalidChanceError: If *chance* is outside [0, 1]. Nothing is
                drawn and the streak is left untouched.
        """
        chance = validate_chance(chance)
        steps = self._adjustment_steps()
        effective = self._adjusted(chance, steps)
        draw = self._random_source.next_float()

        # A zero effective chance must never succeed, even on a draw of 0.0.
        success = effective > 0.0 and draw <= effective

        streak_before = self._streak
        if success:
            self._streak = streak_before + 1 if streak_before >= 0 else 0
        else:
            self._streak = streak_before - 1 if streak_before <= 0 else 0

        if self._roll_logger is not None and self._roll_logger.enabled:
            self._roll_logger.log_roll(
                RollRecord(
                    timestamp_ns=time.time_ns(),
                    chance=chance,
                    effective_chance=effective,
                    draw=draw,
                    success=success,
                    streak_before=streak_before,
                    streak_after=self._streak,
                    adjustment_steps=steps,
                    adjuster=repr(self._adjuster),
                    random_source=self._random_source.name,
                )
            )
        return success

    def report(self, chance: float, runs: int) -> DiagnosticReport:
        """Run the diagnostic report with this sampler's adjuster.

        The report rolls through a fresh sampler that shares only the
        adjuster; this instance's streak and random source are untouched.

        Args:
            chance: Intended chance of success, in [0, 1].
            runs: Number of rolls, at least 1.

        Returns:
            The computed DiagnosticReport.
        """
        from streak_sampler.report import run_diagnostic

        return run_diagnostic(
            self._adjuster,
            chance,
            runs,
            max_adjustments=self._max_adjustments,
        )

    def _adjustment_steps(self) -> int:
        steps = abs(self._streak)
        if self._max_adjustments > 0:
            steps = min(steps, self._max_adjustments)
        return steps

    def _adjusted(self, chance: float, steps: int) -> float:
        """Compound *steps* adjustments against the streak, then clamp.

        Each iteration feeds the already adjusted value back into the
        adjuster. Clamping happens once, after the loop.
        """
        adjust = self._adjuster.adjust
        if self._streak < 0:
            for _ in range(steps):
                chance += adjust(chance)
        elif self._streak > 0:
            for _ in range(steps):
                chance -= adjust(chance)
        return min(1.0, max(0.0, chance))
