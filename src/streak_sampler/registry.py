"""Name-to-class registry shared by the adjuster and random source subsystems.

Built-in classes bind themselves to a name at import time with the
:meth:`PluginRegistry.register` decorator. Other installed packages can add
classes by publishing them under the registry's entry-point group, e.g. in
their ``pyproject.toml``::

    [project.entry-points."streak_sampler.adjusters"]
    sawtooth = "my_curves:SawtoothAdjuster"

Plugins are imported the first time a registry is asked for a name it does
not already know, or for its full listing.
"""

from __future__ import annotations

import importlib.metadata
import logging
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("streak_sampler")

T = TypeVar("T")


class PluginRegistry(Generic[T]):
    """Maps names to classes of one kind.

    A name is bound at most once. ``register`` refuses a taken name, and a
    plugin whose name is already bound is skipped with a warning.

    Args:
        kind: Label used in messages, e.g. ``"adjuster"``.
        group: Entry-point group to scan for plugins. ``None`` disables
            plugin discovery.
    """

    def __init__(self, kind: str, group: str | None = None) -> None:
        self.kind = kind
        self.group = group
        self._classes: dict[str, type[T]] = {}
        self._plugins_scanned = group is None

    def __repr__(self) -> str:
        return f"PluginRegistry(kind={self.kind!r}, group={self.group!r})"

    def __contains__(self, name: object) -> bool:
        self._scan_plugins()
        return name in self._classes

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Class decorator binding *name* to the decorated class.

        Raises:
            ValueError: If *name* is already bound.
        """

        def decorator(klass: type[T]) -> type[T]:
            if name in self._classes:
                bound = self._classes[name].__qualname__
                raise ValueError(
                    f"{self.kind.capitalize()} '{name}' is already registered ({bound})"
                )
            self._classes[name] = klass
            return klass

        return decorator

    def get(self, name: str) -> type[T]:
        """Return the class bound to *name*.

        Raises:
            KeyError: If neither a built-in nor a plugin uses *name*.
        """
        if name not in self._classes:
            self._scan_plugins()
        if name not in self._classes:
            available = ", ".join(sorted(self._classes)) or "(none)"
            raise KeyError(f"Unknown {self.kind} '{name}'. Available: {available}")
        return self._classes[name]

    def names(self) -> list[str]:
        """Return every bound name, sorted."""
        self._scan_plugins()
        return sorted(self._classes)

    def _scan_plugins(self) -> None:
        if self._plugins_scanned:
            return
        self._plugins_scanned = True

        for ep in importlib.metadata.entry_points(group=self.group):
            if ep.name in self._classes:
                logger.warning(
                    "Skipping %s plugin %r (%s): name already registered",
                    self.kind,
                    ep.name,
                    ep.value,
                )
                continue
            try:
                klass = ep.load()
            except Exception:  # A broken plugin must not hide the others
                logger.warning(
                    "Could not load %s plugin %r (%s)",
                    self.kind,
                    ep.name,
                    ep.value,
                    exc_info=True,
                )
                continue
            self._classes[ep.name] = klass
            logger.debug("Loaded %s plugin %r from %s", self.kind, ep.name, ep.value)
