"""Revocable registrations.

Every subscription and command registration made by the core returns a
Disposable so that a component can tear down everything it set up as a
single unit.
"""

import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)


class SupportsDispose(Protocol):
    """Anything with a dispose() method."""

    def dispose(self) -> None: ...


class Disposable:
    """Runs a teardown callback at most once."""

    def __init__(self, callback: Callable[[], None] | None = None):
        self._callback = callback
        self.disposed = False

    def dispose(self) -> None:
        """Run the teardown callback if it has not run yet."""
        if self.disposed:
            return
        self.disposed = True
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()


class CompositeDisposable:
    """A group of disposables revoked together.

    Items are disposed in insertion order. Anything added after the group
    has been disposed is disposed immediately.
    """

    def __init__(self, *items: SupportsDispose):
        self._items: list[SupportsDispose] = list(items)
        self.disposed = False

    def add(self, *items: SupportsDispose) -> None:
        """Add items to the group."""
        if self.disposed:
            for item in items:
                item.dispose()
            return
        self._items.extend(items)

    def dispose(self) -> None:
        """Dispose every item exactly once."""
        if self.disposed:
            return
        self.disposed = True
        items, self._items = self._items, []
        logger.debug(f"Disposing {len(items)} registrations")
        for item in items:
            item.dispose()

    def __len__(self) -> int:
        return len(self._items)
