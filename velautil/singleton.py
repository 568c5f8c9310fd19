"""A lazily loaded, thread-safe holder for one global value."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class Singleton(Generic[T]):
    """Holds one value, produced by ``loader`` on first access if not set."""

    def __init__(self, loader: Optional[Callable[[], T]] = None) -> None:
        self._lock = threading.Lock()
        self._loaded = False
        self._loader = loader
        self._data: Optional[T] = None

    def get(self) -> Optional[T]:
        """Return the value, loading it first if it was never set."""
        with self._lock:
            needs_load = not self._loaded and self._loader is not None
        if needs_load:
            self.set(self._loader())
        with self._lock:
            return self._data

    def set(self, data: T) -> None:
        """Store ``data`` as the value."""
        with self._lock:
            self._loaded = True
            self._data = data

    def reload(self) -> None:
        """Run the loader again and store its result."""
        if self._loader is not None:
            self.set(self._loader())


def new_singleton(loader: Optional[Callable[[], T]]) -> Singleton[T]:
    """Create a singleton backed by ``loader``."""
    return Singleton(loader)