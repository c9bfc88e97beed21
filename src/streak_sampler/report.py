"""Diagnostic report comparing adjusted and unadjusted roll sequences.

Rolls a fresh sampler (sharing only the caller's adjuster) side by side
with a plain ``u <= chance`` baseline, then summarises success counts and
the longest streaks of both. Feeding the two paths identical draw sequences
makes the comparison deterministic.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from streak_sampler.randomness.pseudo import PseudoRandomSource
from streak_sampler.sampler import StreakAdjustedSampler, as_adjuster, validate_chance

if TYPE_CHECKING:
    from collections.abc import Sequence

    from streak_sampler.randomness.base import RandomSource
    from streak_sampler.sampler import AdjusterLike

logger = logging.getLogger("streak_sampler")

# Chances at which the report samples the adjustment curve.
EXAMPLE_CHANCES: tuple[float, ...] = (0.10, 0.25, 0.50, 0.75, 0.90)


def longest_runs(outcomes: Sequence[bool] | np.ndarray) -> tuple[int, int]:
    """Return the longest success run and the longest failure run.

    Args:
        outcomes: Boolean outcomes in roll order.

    Returns:
        Tuple of (longest run of ``True``, longest run of ``False``).
    """
    arr = np.asarray(outcomes, dtype=bool)
    return _longest_run(arr), _longest_run(~arr)


def _longest_run(mask: np.ndarray) -> int:
    if not mask.any():
        return 0
    # Run boundaries are where the zero-padded mask changes value.
    padded = np.concatenate(([0], mask.astype(np.int8), [0]))
    edges = np.flatnonzero(np.diff(padded))
    return int((edges[1::2] - edges[::2]).max())


@dataclass(frozen=True, slots=True)
class StreakStats:
    """Outcome counts and longest streaks of one roll sequence.

    Attributes:
        successes: Number of successful rolls.
        failures: Number of failed rolls.
        longest_success_streak: Longest run of consecutive successes.
        longest_failure_streak: Longest run of consecutive failures.
    """

    successes: int
    failures: int
    longest_success_streak: int
    longest_failure_streak: int

    @classmethod
    def from_outcomes(cls, outcomes: Sequence[bool] | np.ndarray) -> StreakStats:
        arr = np.asarray(outcomes, dtype=bool)
        successes = int(arr.sum())
        longest_success, longest_failure = longest_runs(arr)
        return cls(
            successes=successes,
            failures=int(arr.size) - successes,
            longest_success_streak=longest_success,
            longest_failure_streak=longest_failure,
        )

    @property
    def runs(self) -> int:
        return self.successes + self.failures

    @property
    def success_rate(self) -> float:
        """Fraction of successful rolls (0.0 for an empty sequence)."""
        return self.successes / self.runs if self.runs else 0.0

    @property
    def failure_rate(self) -> float:
        return self.failures / self.runs if self.runs else 0.0


@dataclass(frozen=True, slots=True)
class DiagnosticReport:
    """Result of :func:`run_diagnostic`.

    Attributes:
        chance: Nominal chance used for every roll.
        runs: Number of rolls in each sequence.
        adjustment: Adjuster output at *chance*.
        example_adjustments: Adjuster output at each of ``EXAMPLE_CHANCES``.
        expected_successes: ``chance * runs`` rounded half up.
        adjusted: Statistics of the streak-adjusted sequence.
        unadjusted: Statistics of the baseline sequence.
    """

    chance: float
    runs: int
    adjustment: float
    example_adjustments: dict[float, float]
    expected_successes: int
    adjusted: StreakStats
    unadjusted: StreakStats

    def format(self) -> str:
        """Render the report as human-readable text."""
        examples = "  //  ".join(
            f"{c * 100:.0f}%: ±{a * 100:.2f}" for c, a in self.example_adjustments.items()
        )
        lines = [
            f"---- Diagnostic for {self.runs} runs ----",
            f"Adjustment value for chance = {self.chance * 100:.1f}%: "
            f"±{self.adjustment * 100:.2f}",
            examples,
            f"Expected successes: {self.expected_successes} ({self.chance * 100:.1f}%)",
            "",
            f"Successes: {self.adjusted.successes} ({self.adjusted.success_rate * 100:.1f}%) "
            f"Longest streak: {self.adjusted.longest_success_streak} "
            f"({self.unadjusted.longest_success_streak} without adjustments)",
            f"Failures: {self.adjusted.failures} ({self.adjusted.failure_rate * 100:.1f}%) "
            f"Longest streak: {self.adjusted.longest_failure_streak} "
            f"({self.unadjusted.longest_failure_streak} without adjustments)",
        ]
        return "\n".join(lines)


def run_diagnostic(
    adjuster: AdjusterLike,
    chance: float,
    runs: int,
    *,
    adjusted_source: RandomSource | None = None,
    baseline_source: RandomSource | None = None,
    max_adjustments: int = 0,
) -> DiagnosticReport:
    """Roll *runs* times with and without streak adjustment.

    A new :class:`StreakAdjustedSampler` is built around *adjuster*, so its
    streak starts at zero and is independent of any caller-owned sampler.
    The baseline succeeds whenever its draw is ``<= chance``.

    Args:
        adjuster: Adjustment curve shared with the caller.
        chance: Nominal chance of success, in [0, 1].
        runs: Number of rolls, at least 1.
        adjusted_source: Random source for the adjusted sampler. Defaults to
            a new unseeded PseudoRandomSource.
        baseline_source: Random source for the baseline. Defaults to a new
            unseeded PseudoRandomSource.
        max_adjustments: Passed through to the adjusted sampler.

    Returns:
        The computed DiagnosticReport.

    Raises:
        InvalidChanceError: If *chance* is outside [0, 1].
        ValueError: If *runs* < 1.
    """
    chance = validate_chance(chance)
    if runs < 1:
        raise ValueError(f"runs must be >= 1, got {runs}")

    curve = as_adjuster(adjuster)
    sampler = StreakAdjustedSampler(
        curve,
        adjusted_source if adjusted_source is not None else PseudoRandomSource(),
        max_adjustments=max_adjustments,
    )
    baseline = baseline_source if baseline_source is not None else PseudoRandomSource()

    adjusted_outcomes = np.empty(runs, dtype=bool)
    baseline_draws = np.empty(runs, dtype=np.float64)
    for i in range(runs):
        adjusted_outcomes[i] = sampler.next(chance)
        baseline_draws[i] = baseline.next_float()

    report = DiagnosticReport(
        chance=chance,
        runs=runs,
        adjustment=curve.adjust(chance),
        example_adjustments={c: curve.adjust(c) for c in EXAMPLE_CHANCES},
        expected_successes=math.floor(chance * runs + 0.5),
        adjusted=StreakStats.from_outcomes(adjusted_outcomes),
        unadjusted=StreakStats.from_outcomes((baseline_draws <= chance) & (chance > 0.0)),
    )
    logger.debug(
        "Diagnostic finished: runs=%d chance=%.3f adjusted_rate=%.4f baseline_rate=%.4f",
        runs,
        chance,
        report.adjusted.success_rate,
        report.unadjusted.success_rate,
    )
    return report
