"""Shared asyncio polling loop for snapshot feeds.

Concrete feeds only say how to fetch the raw payload; this base class
owns the subscriber, change detection, replay and the loop lifecycle.
"""

import asyncio
import logging
from abc import abstractmethod

from diagnav.core.disposable import Disposable
from diagnav.core.models import Snapshot
from diagnav.core.ports import SnapshotCallback, SnapshotFeedPort

from .decoding import SnapshotDecodeError, parse_snapshot

logger = logging.getLogger(__name__)


class PollingSnapshotFeed(SnapshotFeedPort):
    """Polls a source at a fixed interval and emits on content change."""

    def __init__(self, poll_interval_seconds: float = 1.0):
        if poll_interval_seconds <= 0:
            raise ValueError("poll_interval_seconds must be positive")
        self.poll_interval_seconds = poll_interval_seconds
        self.running = False
        self._task: asyncio.Task[None] | None = None
        self._subscriber: SnapshotCallback | None = None
        self._latest: Snapshot | None = None
        self._last_payload: str | None = None

    @property
    def latest(self) -> Snapshot | None:
        """The most recently emitted snapshot, or None before the first poll."""
        return self._latest

    def subscribe(self, callback: SnapshotCallback) -> Disposable:
        if self._subscriber is not None:
            raise RuntimeError("Snapshot feed already has a subscriber")
        self._subscriber = callback

        def _unsubscribe() -> None:
            if self._subscriber is callback:
                self._subscriber = None

        if self._latest is not None:
            try:
                callback(self._latest)
            except Exception:
                self._subscriber = None
                raise
        return Disposable(_unsubscribe)

    @abstractmethod
    async def fetch(self) -> str | None:
        """Fetch the raw JSON payload.

        Returns:
            Payload text, or None when the source is known to be unchanged.

        Raises:
            Exception: If the source cannot be read. The loop logs and retries.
        """

    async def poll_once(self) -> bool:
        """Run a single poll. Returns True if a new snapshot was emitted."""
        payload = await self.fetch()
        if payload is None or payload == self._last_payload:
            return False

        try:
            snapshot = parse_snapshot(payload)
        except SnapshotDecodeError as e:
            logger.error(f"Ignoring malformed snapshot: {e}")
            self._last_payload = payload
            return False

        self._last_payload = payload
        self._latest = snapshot
        logger.debug(f"Emitting snapshot with {len(snapshot)} messages")
        if self._subscriber is not None:
            self._subscriber(snapshot)
        return True

    async def start(self) -> None:
        """Start polling in a background task."""
        if self.running:
            logger.warning("Snapshot feed already running")
            return
        self.running = True
        logger.info(
            f"Starting {type(self).__name__} with {self.poll_interval_seconds}s interval"
        )
        self._task = asyncio.create_task(self._run_loop())

    async def stop(self) -> None:
        """Stop polling and wait for the loop to exit."""
        if not self.running:
            return
        logger.info(f"Stopping {type(self).__name__}...")
        self.running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

    async def close(self) -> None:
        """Release resources held by the feed."""
        await self.stop()

    async def _run_loop(self) -> None:
        while self.running:
            try:
                await self.poll_once()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(f"Snapshot poll failed: {e}", exc_info=True)
            await asyncio.sleep(self.poll_interval_seconds)
