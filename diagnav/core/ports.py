"""Port interfaces for the diagnav navigation system.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - SnapshotFeedPort: Push stream of full diagnostic snapshots
   - LocationOpenerPort: Jump to a file and optional position
   - CommandRegistryPort: Bind named commands to handlers
   - NotifierPort: Surface user-facing messages

2. **Driving Ports** (adapters/external systems call into core)
   - NavigationPort: Step through diagnostics and their traces
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from .disposable import Disposable
from .models import DiagnosticMessage

SnapshotCallback = Callable[[Sequence[DiagnosticMessage]], None]
CommandHandler = Callable[[], None]


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class SnapshotFeedPort(ABC):
    """Port for receiving the current list of diagnostics.

    Each emission is the complete list, never a delta. Implementations
    must:
    - Deliver emissions on the event loop thread, one at a time
    - Replay the latest snapshot (if any) to a new subscriber
    - Stop calling the subscriber once its Disposable is disposed
    """

    @abstractmethod
    def subscribe(self, callback: SnapshotCallback) -> Disposable:
        """Register the callback that receives every snapshot.

        Args:
            callback: Called with the full diagnostic list on each change.

        Returns:
            Disposable that cancels the subscription.

        Raises:
            RuntimeError: If the feed already has an active subscriber.
        """


class LocationOpenerPort(ABC):
    """Port for navigating the user's editor to a location.

    Calls are fire-and-forget from the core's perspective. Failures
    raised by an implementation are not handled by the core.
    """

    @abstractmethod
    def open(
        self,
        file_path: str,
        row: int | None = None,
        column: int | None = None,
    ) -> None:
        """Open a file, optionally at a zero-based row and column.

        Args:
            file_path: Path of the file to open.
            row: Zero-based row. If None, no cursor position is requested.
            column: Zero-based column. If None, no cursor position is requested.
        """


class CommandRegistryPort(ABC):
    """Port for binding named zero-argument commands to handlers."""

    @abstractmethod
    def register(self, name: str, handler: CommandHandler) -> Disposable:
        """Register a handler under a command name.

        Args:
            name: Fully qualified command name (e.g. "diagnav:go-to-first-diagnostic").
            handler: Zero-argument callable run when the command fires.

        Returns:
            Disposable that unregisters the command.

        Raises:
            ValueError: If the name is already registered.
        """


class NotifierPort(ABC):
    """Port for surfacing short messages to the user."""

    @abstractmethod
    def add_error(self, message: str) -> None:
        """Show an error message."""

    @abstractmethod
    def add_info(self, message: str) -> None:
        """Show an informational message."""


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class NavigationPort(ABC):
    """Port for user-triggered diagnostic navigation.

    None of these operations raise for empty lists, out-of-range
    positions or entries without coordinates.
    """

    @abstractmethod
    def first(self) -> None:
        """Go to the first diagnostic."""

    @abstractmethod
    def last(self) -> None:
        """Go to the last diagnostic."""

    @abstractmethod
    def next(self) -> None:
        """Go to the next diagnostic, staying on the last one at the end."""

    @abstractmethod
    def previous(self) -> None:
        """Go to the previous diagnostic, staying on the first one at the start."""

    @abstractmethod
    def next_trace(self) -> None:
        """Go to the next navigable trace of the current diagnostic."""

    @abstractmethod
    def previous_trace(self) -> None:
        """Go to the previous navigable trace of the current diagnostic."""
