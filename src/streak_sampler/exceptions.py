"""Exception hierarchy for streak-sampler.

All exceptions derive from StreakSamplerError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class StreakSamplerError(Exception):
    """Base exception for all streak-sampler errors."""


class InvalidChanceError(StreakSamplerError, ValueError):
    """A chance value fell outside the closed interval [0, 1].

    Raised synchronously by ``StreakAdjustedSampler.next()`` before any
    state is touched or any random value is drawn.
    """


class RandomSourceExhaustedError(StreakSamplerError):
    """A random source has no more values to hand out.

    Raised by replay sources (e.g. ``SequenceRandomSource``) once every
    supplied draw has been consumed.
    """


class ConfigValidationError(StreakSamplerError):
    """Configuration field validation failed.

    Raised when overrides contain unknown keys or when the configuration
    names an adjuster or random source that is not registered.
    """
