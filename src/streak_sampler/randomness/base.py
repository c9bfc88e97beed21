"""Abstract base class for all uniform random sources.

Every source the engine can draw from (a numpy generator, the OS CSPRNG, a
replayed sequence in tests) implements this interface. Subclasses must
implement ``name`` and ``next_float()``. Sources holding external resources
override ``close()``; every source can be used as a context manager.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from types import TracebackType


class RandomSource(ABC):
    """Abstract base for all uniform random sources.

    Implementations hand out one float in [0, 1) per ``next_float()`` call.
    A source instance is owned by a single engine; sources are not
    synchronised.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable source identifier (e.g. ``'pseudo'``, ``'system'``)."""

    @abstractmethod
    def next_float(self) -> float:
        """Return one value drawn uniformly from [0, 1).

        Raises:
            RandomSourceExhaustedError: If the source cannot provide a value.
        """

    def close(self) -> None:
        """Release resources. No-op unless a subclass holds any."""

    def __enter__(self) -> RandomSource:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
