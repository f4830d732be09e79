"""JSON file snapshot feed.

Implements SnapshotFeedPort by watching a JSON file that an external
linter or build tool rewrites with the full diagnostics list.
"""

import asyncio
import logging
from pathlib import Path

from .polling import PollingSnapshotFeed

logger = logging.getLogger(__name__)


class JsonFileSnapshotFeed(PollingSnapshotFeed):
    """Polls a file's mtime and size and re-reads it when they change.

    A missing file is treated as an empty diagnostics list.
    """

    def __init__(self, path: str | Path, poll_interval_seconds: float = 1.0):
        super().__init__(poll_interval_seconds=poll_interval_seconds)
        self.path = Path(path)
        self._last_stat: tuple[int, int] | None = None

    async def fetch(self) -> str | None:
        try:
            stat = await asyncio.to_thread(self.path.stat)
        except FileNotFoundError:
            if self._last_stat is not None:
                logger.info(f"Diagnostics file removed: {self.path}")
            self._last_stat = None
            return ""

        signature = (stat.st_mtime_ns, stat.st_size)
        if signature == self._last_stat:
            return None
        text = await asyncio.to_thread(self.path.read_text, encoding="utf-8")
        # Only remember the stat once the read succeeded, so failures are retried.
        self._last_stat = signature
        return text
