from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any, Generic, TypeAlias, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")

Factory: TypeAlias = Callable[[], Any]
"""A zero-argument callable producing a fresh value on every call."""


class BindingsRegistry(Generic[V]):
    """A name-keyed map guarded by a lock.

    Every read and write holds the lock, so readers never observe a
    half-applied registration. Values are returned as stored; the registry
    never calls them.
    """

    def __init__(self, kind: str) -> None:
        self._kind = kind
        self._entries: dict[str, V] = {}
        self._lock = threading.Lock()

    def set(self, name: str, value: V) -> None:
        with self._lock:
            replaced = name in self._entries
            self._entries[name] = value
        if replaced:
            logger.debug("Overriding %s '%s'", self._kind, name)
        else:
            logger.debug("Registered %s '%s'", self._kind, name)

    def get(self, name: str) -> V | None:
        with self._lock:
            return self._entries.get(name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    def snapshot(self) -> dict[str, V]:
        """Return a shallow copy of the current entries."""
        with self._lock:
            return dict(self._entries)


__all__ = ["BindingsRegistry", "Factory"]
