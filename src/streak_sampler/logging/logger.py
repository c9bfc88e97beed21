"""Diagnostic logger for per-roll events.

Uses the standard ``logging`` module with the ``"streak_sampler"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from streak_sampler.config import StreakSamplerConfig
    from streak_sampler.logging.types import RollRecord

logger = logging.getLogger("streak_sampler")


class RollLogger:
    """Per-roll diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per roll with the outcome, the nominal and
        effective chance, the draw and the streak transition.

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc analysis via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: StreakSamplerConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[RollRecord] = []

    @property
    def enabled(self) -> bool:
        """Whether logging a record has any effect at all."""
        return self._diagnostic_mode or self._log_level != "none"

    def log_roll(self, record: RollRecord) -> None:
        """Log a single roll.

        Args:
            record: Immutable record of the roll.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "roll=%s chance=%.4f effective=%.4f u=%.6f streak=%d->%d steps=%d source=%s",
                "success" if record.success else "failure",
                record.chance,
                record.effective_chance,
                record.draw,
                record.streak_before,
                record.streak_after,
                record.adjustment_steps,
                record.random_source,
            )
        elif self._log_level == "full":
            logger.info("roll_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[RollRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all RollRecord instances logged so far.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def clear(self) -> None:
        """Drop all stored records."""
        self._records.clear()

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        successes = sum(1 for r in self._records if r.success)
        effective = [r.effective_chance for r in self._records]
        nominal = [r.chance for r in self._records]
        streaks = [r.streak_after for r in self._records]
        return {
            "total_rolls": n,
            "successes": successes,
            "failures": n - successes,
            "success_rate": successes / n,
            "mean_chance": sum(nominal) / n,
            "mean_effective_chance": sum(effective) / n,
            "max_streak": max(streaks),
            "min_streak": min(streaks),
            "max_adjustment_steps": max(r.adjustment_steps for r in self._records),
        }
