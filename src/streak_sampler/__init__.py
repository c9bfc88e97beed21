"""streak-sampler: boolean outcomes with dampened streaks.

Rolls success/failure outcomes from a caller-supplied chance while pulling
the effective chance against the current streak, so long runs of the same
result become less likely. The adjustment curve and the uniform random
source are both pluggable.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("streak-sampler")
except PackageNotFoundError:
    __version__ = "0.0.0"

from streak_sampler.adjustment import (
    Adjuster,
    BranchedAdjuster,
    FunctionAdjuster,
    ParabolaAdjuster,
    adjuster_registry,
)
from streak_sampler.config import StreakSamplerConfig, resolve_config
from streak_sampler.exceptions import (
    ConfigValidationError,
    InvalidChanceError,
    RandomSourceExhaustedError,
    StreakSamplerError,
)
from streak_sampler.factory import build_sampler
from streak_sampler.randomness import (
    PseudoRandomSource,
    RandomSource,
    SequenceRandomSource,
    SystemRandomSource,
    random_source_registry,
)
from streak_sampler.report import DiagnosticReport, StreakStats, run_diagnostic
from streak_sampler.sampler import StreakAdjustedSampler

__all__ = [
    "Adjuster",
    "BranchedAdjuster",
    "ConfigValidationError",
    "DiagnosticReport",
    "FunctionAdjuster",
    "InvalidChanceError",
    "ParabolaAdjuster",
    "PseudoRandomSource",
    "RandomSource",
    "RandomSourceExhaustedError",
    "SequenceRandomSource",
    "StreakAdjustedSampler",
    "StreakSamplerConfig",
    "StreakSamplerError",
    "StreakStats",
    "SystemRandomSource",
    "__version__",
    "adjuster_registry",
    "build_sampler",
    "random_source_registry",
    "resolve_config",
    "run_diagnostic",
]
