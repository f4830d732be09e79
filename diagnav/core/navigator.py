"""Keyboard-driven navigation over file-scoped diagnostics.

The navigator keeps a working list of file-scoped diagnostics and two
cursors: one over the list and one over the traces of the selected
diagnostic. Every new snapshot from the feed replaces the list and
clears both cursors, so no index can outlive the list it pointed into.
"""

import logging
from collections.abc import Sequence

from .disposable import CompositeDisposable
from .models import (
    UNSET,
    At,
    DiagnosticMessage,
    DiagnosticScope,
    NavigationCursor,
    Snapshot,
    Trace,
)
from .ports import (
    CommandRegistryPort,
    LocationOpenerPort,
    NavigationPort,
    SnapshotFeedPort,
)

logger = logging.getLogger(__name__)

GO_TO_FIRST = "diagnav:go-to-first-diagnostic"
GO_TO_LAST = "diagnav:go-to-last-diagnostic"
GO_TO_NEXT = "diagnav:go-to-next-diagnostic"
GO_TO_PREVIOUS = "diagnav:go-to-previous-diagnostic"
GO_TO_NEXT_TRACE = "diagnav:go-to-next-diagnostic-trace"
GO_TO_PREVIOUS_TRACE = "diagnav:go-to-previous-diagnostic-trace"


class DiagnosticNavigator(NavigationPort):
    """Implements diagnostic and trace navigation.

    This service:
    - Subscribes to the snapshot feed and keeps the file-scoped entries
    - Registers the six navigation commands
    - Translates commands into opener calls, clamping and skipping as needed
    """

    def __init__(
        self,
        feed: SnapshotFeedPort,
        opener: LocationOpenerPort,
        commands: CommandRegistryPort,
    ):
        self.feed = feed
        self.opener = opener
        self.commands = commands
        self._snapshot: Snapshot = ()
        self._diagnostics: Snapshot = ()
        self._cursor = NavigationCursor()
        self._subscriptions = CompositeDisposable()
        self._attached = False
        self._disposed = False

    @property
    def snapshot(self) -> Snapshot:
        """The last full snapshot, including project-scoped entries."""
        return self._snapshot

    @property
    def diagnostics(self) -> Snapshot:
        """The working list: file-scoped entries of the last snapshot."""
        return self._diagnostics

    @property
    def cursor(self) -> NavigationCursor:
        return self._cursor

    @property
    def disposed(self) -> bool:
        return self._disposed

    def attach(self) -> None:
        """Subscribe to the feed and register the navigation commands."""
        if self._disposed:
            raise RuntimeError("Cannot attach a disposed navigator")
        if self._attached:
            logger.warning("Navigator already attached")
            return

        handlers = [
            (GO_TO_FIRST, self.first),
            (GO_TO_LAST, self.last),
            (GO_TO_NEXT, self.next),
            (GO_TO_PREVIOUS, self.previous),
            (GO_TO_NEXT_TRACE, self.next_trace),
            (GO_TO_PREVIOUS_TRACE, self.previous_trace),
        ]
        try:
            self._subscriptions.add(self.feed.subscribe(self.on_snapshot))
            for name, handler in handlers:
                self._subscriptions.add(self.commands.register(name, handler))
        except Exception:
            # Roll back partial registration so attach() can be retried.
            self._subscriptions.dispose()
            self._subscriptions = CompositeDisposable()
            raise
        self._attached = True

    def dispose(self) -> None:
        """Unsubscribe from the feed and unregister every command."""
        if self._disposed:
            return
        self._disposed = True
        self._subscriptions.dispose()
        logger.debug("Navigator disposed")

    def on_snapshot(self, messages: Sequence[DiagnosticMessage]) -> None:
        """Replace the working list and reset both cursors."""
        if self._disposed:
            return
        self._snapshot = tuple(messages)
        self._diagnostics = tuple(
            message
            for message in self._snapshot
            if message.scope is DiagnosticScope.FILE
        )
        self._cursor = NavigationCursor()
        logger.debug(
            f"Received snapshot with {len(self._snapshot)} messages "
            f"({len(self._diagnostics)} file-scoped)"
        )

    def first(self) -> None:
        self.go_to_index(0)

    def last(self) -> None:
        self.go_to_index(len(self._diagnostics) - 1)

    def next(self) -> None:
        index = self._cursor.primary_index
        if index is None:
            self.first()
        else:
            self.go_to_index(index + 1)

    def previous(self) -> None:
        index = self._cursor.primary_index
        if index is None:
            self.last()
        else:
            self.go_to_index(index - 1)

    def go_to_index(self, index: int) -> None:
        """Select the diagnostic at index, clamped to the working list."""
        if self._disposed:
            return
        # Clear the trace cursor before the primary cursor moves.
        self._cursor = NavigationCursor(primary=self._cursor.primary)
        if not self._diagnostics:
            self._cursor = NavigationCursor()
            return
        clamped = max(0, min(index, len(self._diagnostics) - 1))
        self._cursor = NavigationCursor(primary=At(clamped))
        self._goto_current_primary()

    def next_trace(self) -> None:
        traces = self._current_traces()
        if traces is None:
            return
        current = self._cursor.secondary_index
        start = 0 if current is None else current + 1
        for candidate in range(start, len(traces)):
            if self._try_set_current_trace(traces, candidate):
                return
        self._fall_back_to_primary()

    def previous_trace(self) -> None:
        traces = self._current_traces()
        if traces is None:
            return
        current = self._cursor.secondary_index
        start = len(traces) - 1 if current is None else current - 1
        for candidate in range(start, -1, -1):
            if self._try_set_current_trace(traces, candidate):
                return
        self._fall_back_to_primary()

    def _current_traces(self) -> tuple[Trace, ...] | None:
        if self._disposed:
            return None
        index = self._cursor.primary_index
        if index is None:
            return None
        return self._diagnostics[index].trace

    def _try_set_current_trace(self, traces: tuple[Trace, ...], index: int) -> bool:
        trace = traces[index]
        if not trace.is_navigable:
            return False
        assert trace.file_path is not None and trace.range is not None
        self._cursor = NavigationCursor(primary=self._cursor.primary, secondary=At(index))
        self.opener.open(trace.file_path, trace.range.start.row, trace.range.start.column)
        return True

    def _fall_back_to_primary(self) -> None:
        self._cursor = NavigationCursor(primary=self._cursor.primary, secondary=UNSET)
        self._goto_current_primary()

    def _goto_current_primary(self) -> None:
        index = self._cursor.primary_index
        assert index is not None, "primary cursor must be set"
        assert self._cursor.secondary_index is None, "secondary cursor must be unset"

        diagnostic = self._diagnostics[index]
        assert diagnostic.file_path is not None
        if diagnostic.range is None:
            self.opener.open(diagnostic.file_path)
        else:
            start = diagnostic.range.start
            self.opener.open(diagnostic.file_path, start.row, start.column)
