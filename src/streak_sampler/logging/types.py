"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RollRecord:
    """Immutable record of a single roll.

    Attributes:
        timestamp_ns: Wall-clock time of the roll (nanoseconds since epoch).
        chance: Nominal chance supplied by the caller.
        effective_chance: Chance actually compared against the draw.
        draw: Uniform value drawn from the random source.
        success: Outcome of the roll.
        streak_before: Streak counter before the roll.
        streak_after: Streak counter after the roll.
        adjustment_steps: Number of adjuster iterations applied.
        adjuster: Representation of the adjuster in use.
        random_source: Name of the random source that provided the draw.
    """

    timestamp_ns: int

    # Probabilities
    chance: float
    effective_chance: float
    draw: float
    success: bool

    # Streak
    streak_before: int
    streak_after: int
    adjustment_steps: int

    # Components
    adjuster: str
    random_source: str
