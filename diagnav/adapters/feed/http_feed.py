"""HTTP snapshot feed.

Implements SnapshotFeedPort by polling an HTTP endpoint that returns the
full diagnostics list as JSON (for example, a language server bridge).
"""

import logging
from typing import Any

import httpx

from .polling import PollingSnapshotFeed

logger = logging.getLogger(__name__)


class HttpSnapshotFeed(PollingSnapshotFeed):
    """Polls a URL with httpx and emits when the body changes."""

    def __init__(
        self,
        url: str,
        poll_interval_seconds: float = 1.0,
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ):
        """Initialize HTTP feed.

        Args:
            url: Endpoint returning the diagnostics JSON.
            poll_interval_seconds: Delay between requests.
            timeout_seconds: Per-request timeout.
            client: Optional preconfigured client (used by tests).
        """
        super().__init__(poll_interval_seconds=poll_interval_seconds)
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.client = client or httpx.AsyncClient(timeout=timeout_seconds)
        self._etag: str | None = None

    async def __aenter__(self) -> "HttpSnapshotFeed":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def fetch(self) -> str | None:
        headers = {"Accept": "application/json"}
        if self._etag:
            headers["If-None-Match"] = self._etag

        try:
            response = await self.client.get(self.url, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch diagnostics from {self.url}: {e}")
            return None

        if response.status_code == 304:
            return None
        if response.status_code == 404:
            return ""
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Diagnostics endpoint returned {response.status_code}: {e}")
            return None

        self._etag = response.headers.get("ETag")
        return response.text

    async def close(self) -> None:
        """Stop polling and close the HTTP client."""
        await super().close()
        await self.client.aclose()
