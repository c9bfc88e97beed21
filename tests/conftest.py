"""Shared pytest fixtures for streak-sampler tests.

Provides configuration objects, adjusters, and replay sources that force
specific outcomes so streak transitions can be asserted exactly.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from streak_sampler.adjustment.branched import BranchedAdjuster
from streak_sampler.adjustment.parabola import ParabolaAdjuster
from streak_sampler.config import StreakSamplerConfig
from streak_sampler.randomness.sequence import SequenceRandomSource

# Draws that force an outcome under any effective chance the branched
# curve can reach from a nominal 0.5 (it stays within (0.01, 0.99)).
SUCCESS_DRAW: float = 0.0
FAILURE_DRAW: float = 0.999999


def draws_for(outcomes: str) -> list[float]:
    """Translate an outcome string such as ``"FFSF"`` into forcing draws."""
    return [SUCCESS_DRAW if o == "S" else FAILURE_DRAW for o in outcomes]


@pytest.fixture
def default_config() -> StreakSamplerConfig:
    """Return a StreakSamplerConfig with all default values.

    ``_env_file=None`` keeps a stray ``.env`` from leaking into tests.
    """
    return StreakSamplerConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def diagnostic_config() -> StreakSamplerConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return StreakSamplerConfig(
        _env_file=None,  # type: ignore[call-arg]
        log_level="full",
        diagnostic_mode=True,
    )


@pytest.fixture
def branched() -> BranchedAdjuster:
    return BranchedAdjuster()


@pytest.fixture
def parabola() -> ParabolaAdjuster:
    return ParabolaAdjuster()


@pytest.fixture
def forced_source() -> Callable[[str], SequenceRandomSource]:
    """Return a factory building a replay source from an outcome string."""

    def make(outcomes: str) -> SequenceRandomSource:
        return SequenceRandomSource(draws_for(outcomes))

    return make
