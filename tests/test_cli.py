"""Tests for the streak-sampler command line."""

from __future__ import annotations

import os

import pytest

from streak_sampler.cli import main
from streak_sampler.randomness.pseudo import PseudoRandomSource


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:  # type: ignore[no-untyped-def]
    """Run each test away from any real .env file or STREAK_* variables."""
    monkeypatch.chdir(tmp_path)
    for var in [name for name in os.environ if name.startswith("STREAK_")]:
        monkeypatch.delenv(var, raising=False)


class TestReportCommand:
    def test_prints_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["report", "--chance", "0.5", "--runs", "500", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "Diagnostic for 500 runs" in out
        assert "Expected successes: 250" in out

    def test_adjuster_flag(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["report", "--runs", "50", "--adjuster", "parabola"]) == 0
        # Smooth curve peaks at 12.5% for a 50% chance.
        assert "±12.50" in capsys.readouterr().out

    def test_env_defaults(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("STREAK_REPORT_RUNS", "77")
        assert main(["report"]) == 0
        assert "Diagnostic for 77 runs" in capsys.readouterr().out

    def test_invalid_chance(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["report", "--chance", "1.5", "--runs", "10"]) == 2
        assert capsys.readouterr().out == ""

    def test_invalid_runs(self) -> None:
        assert main(["report", "--runs", "0"]) == 2

    def test_unknown_adjuster(self) -> None:
        assert main(["report", "--adjuster", "zigzag"]) == 2

    def test_closes_both_sources(self, monkeypatch: pytest.MonkeyPatch) -> None:
        closed: list[PseudoRandomSource] = []
        monkeypatch.setattr(PseudoRandomSource, "close", lambda self: closed.append(self))
        assert main(["report", "--runs", "20", "--seed", "1"]) == 0
        assert len(closed) == 2
        assert closed[0] is not closed[1]

    def test_closes_sources_on_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        closed: list[PseudoRandomSource] = []
        monkeypatch.setattr(PseudoRandomSource, "close", lambda self: closed.append(self))
        assert main(["report", "--chance", "1.5", "--runs", "20"]) == 2
        assert len(closed) == 2


class TestListingCommands:
    def test_adjusters(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["adjusters"]) == 0
        assert capsys.readouterr().out.split() == ["branched", "parabola"]

    def test_sources(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["sources"]) == 0
        names = capsys.readouterr().out.split()
        assert "pseudo" in names
        assert "system" in names

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            main([])
