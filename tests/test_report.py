"""Tests for the diagnostic report."""

from __future__ import annotations

import numpy as np
import pytest

from streak_sampler.adjustment.branched import BranchedAdjuster
from streak_sampler.adjustment.parabola import ParabolaAdjuster
from streak_sampler.exceptions import InvalidChanceError
from streak_sampler.randomness.pseudo import PseudoRandomSource
from streak_sampler.randomness.sequence import SequenceRandomSource
from streak_sampler.report import (
    EXAMPLE_CHANCES,
    DiagnosticReport,
    StreakStats,
    longest_runs,
    run_diagnostic,
)

# Rolls in the end-to-end comparison.
_E2E_RUNS: int = 100_000

# Seed for the shared draw sequence of the end-to-end comparison.
_E2E_SEED: int = 2024


def _paired_sources(draws: np.ndarray) -> tuple[SequenceRandomSource, SequenceRandomSource]:
    return SequenceRandomSource(draws), SequenceRandomSource(draws)


class TestLongestRuns:
    """Tests for the vectorised run-length helper."""

    def test_mixed(self) -> None:
        assert longest_runs([True, True, False, True, True, True, False, False]) == (3, 2)

    def test_empty(self) -> None:
        assert longest_runs([]) == (0, 0)

    def test_all_success(self) -> None:
        assert longest_runs([True] * 7) == (7, 0)

    def test_all_failure(self) -> None:
        assert longest_runs(np.zeros(4, dtype=bool)) == (0, 4)

    def test_run_at_end(self) -> None:
        assert longest_runs([False, True, False, False, False]) == (1, 3)


class TestStreakStats:
    """Tests for the per-sequence statistics."""

    def test_from_outcomes(self) -> None:
        stats = StreakStats.from_outcomes([True, False, False, True, True, True])
        assert stats.successes == 4
        assert stats.failures == 2
        assert stats.runs == 6
        assert stats.longest_success_streak == 3
        assert stats.longest_failure_streak == 2
        assert stats.success_rate == pytest.approx(4 / 6)
        assert stats.failure_rate == pytest.approx(2 / 6)

    def test_empty_rates(self) -> None:
        stats = StreakStats.from_outcomes([])
        assert stats.success_rate == 0.0
        assert stats.failure_rate == 0.0

    def test_frozen(self) -> None:
        stats = StreakStats.from_outcomes([True])
        with pytest.raises(AttributeError):
            stats.successes = 5  # type: ignore[misc]


class TestRunDiagnostic:
    """Tests for run_diagnostic()."""

    def test_example_adjustments(self, branched: BranchedAdjuster) -> None:
        report = run_diagnostic(branched, 0.5, 10)
        assert tuple(report.example_adjustments) == EXAMPLE_CHANCES
        assert report.example_adjustments == {
            0.10: 0.001,
            0.25: 0.01,
            0.50: 0.1,
            0.75: 0.01,
            0.90: 0.001,
        }
        assert report.adjustment == 0.1

    def test_counts_add_up(self, parabola: ParabolaAdjuster) -> None:
        report = run_diagnostic(parabola, 0.3, 500)
        assert report.runs == 500
        assert report.adjusted.runs == 500
        assert report.unadjusted.runs == 500

    def test_expected_successes_rounds_half_up(self, branched: BranchedAdjuster) -> None:
        assert run_diagnostic(branched, 0.5, 101).expected_successes == 51
        assert run_diagnostic(branched, 0.25, 10).expected_successes == 3

    def test_accepts_plain_callable(self) -> None:
        report = run_diagnostic(lambda c: 0.0, 0.5, 20)
        assert report.adjustment == 0.0

    def test_certain_outcomes(self, branched: BranchedAdjuster) -> None:
        always = run_diagnostic(branched, 1.0, 300)
        assert always.adjusted.successes == always.unadjusted.successes == 300
        never = run_diagnostic(branched, 0.0, 300)
        assert never.adjusted.successes == never.unadjusted.successes == 0

    def test_zero_adjustment_matches_baseline(self) -> None:
        """With a flat-zero curve both paths see the same draws and agree."""
        draws = PseudoRandomSource(seed=3).next_floats(2000)
        adjusted, baseline = _paired_sources(draws)
        report = run_diagnostic(
            lambda c: 0.0, 0.4, 2000, adjusted_source=adjusted, baseline_source=baseline
        )
        assert report.adjusted == report.unadjusted

    def test_consumes_one_draw_per_roll(self, branched: BranchedAdjuster) -> None:
        draws = PseudoRandomSource(seed=4).next_floats(50)
        adjusted, baseline = _paired_sources(draws)
        run_diagnostic(branched, 0.5, 50, adjusted_source=adjusted, baseline_source=baseline)
        assert adjusted.draw_count == 50
        assert baseline.draw_count == 50

    def test_invalid_runs(self, branched: BranchedAdjuster) -> None:
        with pytest.raises(ValueError, match="runs"):
            run_diagnostic(branched, 0.5, 0)

    def test_invalid_chance(self, branched: BranchedAdjuster) -> None:
        with pytest.raises(InvalidChanceError):
            run_diagnostic(branched, 1.5, 10)

    def test_format(self, branched: BranchedAdjuster) -> None:
        text = run_diagnostic(branched, 0.5, 1000).format()
        assert "Diagnostic for 1000 runs" in text
        assert "±10.00" in text
        assert "Expected successes: 500 (50.0%)" in text
        assert "without adjustments" in text

    def test_report_is_frozen(self, branched: BranchedAdjuster) -> None:
        report = run_diagnostic(branched, 0.5, 10)
        assert isinstance(report, DiagnosticReport)
        with pytest.raises(AttributeError):
            report.runs = 11  # type: ignore[misc]


@pytest.fixture(scope="module")
def e2e_report() -> DiagnosticReport:
    """Adjusted and unadjusted paths fed the same 100,000 draws."""
    draws = PseudoRandomSource(seed=_E2E_SEED).next_floats(_E2E_RUNS)
    adjusted, baseline = _paired_sources(draws)
    return run_diagnostic(
        BranchedAdjuster(),
        0.5,
        _E2E_RUNS,
        adjusted_source=adjusted,
        baseline_source=baseline,
    )


class TestEndToEndComparison:
    """Adjusted and unadjusted paths fed the same 100,000 draws."""

    def test_success_rate_near_nominal(self, e2e_report: DiagnosticReport) -> None:
        assert abs(e2e_report.adjusted.success_rate - 0.5) < 0.01

    def test_baseline_rate_near_nominal(self, e2e_report: DiagnosticReport) -> None:
        assert abs(e2e_report.unadjusted.success_rate - 0.5) < 0.01

    def test_success_streaks_shorter(self, e2e_report: DiagnosticReport) -> None:
        adjusted, unadjusted = e2e_report.adjusted, e2e_report.unadjusted
        assert adjusted.longest_success_streak < unadjusted.longest_success_streak

    def test_failure_streaks_shorter(self, e2e_report: DiagnosticReport) -> None:
        adjusted, unadjusted = e2e_report.adjusted, e2e_report.unadjusted
        assert adjusted.longest_failure_streak < unadjusted.longest_failure_streak
