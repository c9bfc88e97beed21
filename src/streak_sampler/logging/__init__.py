"""Diagnostic logging subsystem for streak-sampler.

Provides immutable per-roll records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from streak_sampler.logging.logger import RollLogger
from streak_sampler.logging.types import RollRecord

__all__ = [
    "RollLogger",
    "RollRecord",
]
