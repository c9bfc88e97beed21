"""Configuration system for streak-sampler.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (STREAK_*) -> .env file -> field defaults.

Overrides (e.g. from the command line) are applied via resolve_config()
which creates a new config instance without mutating the defaults.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from streak_sampler.exceptions import ConfigValidationError

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class StreakSamplerConfig(BaseSettings):
    """Configuration for streak-sampler.

    Resolution order: init kwargs -> env vars (STREAK_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="STREAK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Engine ---

    adjuster_type: str = Field(
        default="branched",
        description="Adjustment curve: 'branched' or 'parabola'",
    )
    random_source_type: str = Field(
        default="pseudo",
        description="Uniform random source: 'pseudo' or 'system'",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for seedable sources (ignored by 'system')",
    )
    max_adjustments: int = Field(
        default=0,
        description="Cap on adjustment iterations per roll (<=0 disables)",
    )

    # --- Logging ---

    log_level: Literal["none", "summary", "full"] = Field(
        default="none",
        description="Per-roll logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all roll records in memory for analysis",
    )

    # --- Diagnostic report ---

    report_chance: float = Field(
        default=0.5,
        description="Default chance used by the diagnostic report",
    )
    report_runs: int = Field(
        default=10000,
        description="Default number of rolls used by the diagnostic report",
    )


_ALL_FIELDS = frozenset(StreakSamplerConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate override keys without creating a config.

    Args:
        overrides: Mapping of config field names to new values.

    Raises:
        ConfigValidationError: If any key is not a known config field.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            available = ", ".join(sorted(_ALL_FIELDS))
            raise ConfigValidationError(
                f"Unknown config field: '{key}'. Available: {available}"
            )


def resolve_config(
    defaults: StreakSamplerConfig,
    overrides: dict[str, Any] | None,
) -> StreakSamplerConfig:
    """Create a new config instance merging defaults with overrides.

    Overrides whose value is ``None`` are treated as "not given" and skipped,
    which lets optional command-line flags pass straight through.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Field overrides, keyed by field name.

    Returns:
        A new StreakSamplerConfig with overrides applied, or *defaults*
        itself when there is nothing to apply.

    Raises:
        ConfigValidationError: If any key is unknown.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    applied = {key: value for key, value in overrides.items() if value is not None}
    if not applied:
        return defaults

    # model_copy(update=...) skips validation, so string "100" would not
    # be coerced to int 100. model_validate runs the full validator.
    merged = defaults.model_dump()
    merged.update(applied)
    return StreakSamplerConfig.model_validate(merged)
