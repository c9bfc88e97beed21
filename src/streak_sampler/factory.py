"""Registry-based factory for constructing samplers from config.

Maps the string identifiers in ``StreakSamplerConfig`` to concrete
adjuster and random source classes, and wires them into a
``StreakAdjustedSampler``. Adding a new curve or source requires only
registering the class; no code here changes.
"""

from __future__ import annotations

import inspect
import logging

from streak_sampler.adjustment.base import Adjuster
from streak_sampler.adjustment.registry import adjuster_registry
from streak_sampler.config import StreakSamplerConfig
from streak_sampler.exceptions import ConfigValidationError
from streak_sampler.logging.logger import RollLogger
from streak_sampler.randomness.base import RandomSource
from streak_sampler.randomness.registry import random_source_registry
from streak_sampler.sampler import StreakAdjustedSampler

logger = logging.getLogger("streak_sampler")


def _accepts_seed(cls: type) -> bool:
    """Check if a class constructor takes a ``seed`` parameter."""
    try:
        sig = inspect.signature(cls)
    except (ValueError, TypeError):
        return False
    return "seed" in sig.parameters


def build_adjuster(config: StreakSamplerConfig) -> Adjuster:
    """Instantiate the adjuster named by ``config.adjuster_type``.

    Raises:
        ConfigValidationError: If the name is not registered.
    """
    try:
        adjuster_cls = adjuster_registry.get(config.adjuster_type)
    except KeyError as exc:
        raise ConfigValidationError(str(exc.args[0])) from exc
    return adjuster_cls()


def build_random_source(config: StreakSamplerConfig) -> RandomSource:
    """Instantiate the source named by ``config.random_source_type``.

    ``config.random_seed`` is passed only to sources whose constructor
    takes a ``seed`` argument.

    Raises:
        ConfigValidationError: If the name is not registered.
    """
    try:
        source_cls = random_source_registry.get(config.random_source_type)
    except KeyError as exc:
        raise ConfigValidationError(str(exc.args[0])) from exc

    if _accepts_seed(source_cls):
        return source_cls(seed=config.random_seed)  # type: ignore[call-arg]
    if config.random_seed is not None:
        logger.warning(
            "Random source %r does not take a seed; random_seed=%d ignored",
            config.random_source_type,
            config.random_seed,
        )
    return source_cls()


def build_sampler(config: StreakSamplerConfig | None = None) -> StreakAdjustedSampler:
    """Build a fully wired sampler from configuration.

    Args:
        config: Configuration to use. Loaded from the environment when
            ``None``.

    Returns:
        A new StreakAdjustedSampler with a zero streak.
    """
    if config is None:
        config = StreakSamplerConfig()

    roll_logger = RollLogger(config)
    sampler = StreakAdjustedSampler(
        build_adjuster(config),
        build_random_source(config),
        max_adjustments=config.max_adjustments,
        roll_logger=roll_logger if roll_logger.enabled else None,
    )
    logger.debug(
        "Built sampler: adjuster=%s random_source=%s max_adjustments=%d",
        config.adjuster_type,
        config.random_source_type,
        config.max_adjustments,
    )
    return sampler
