"""Snapshot feed adapters."""

from .decoding import SnapshotDecodeError, decode_snapshot, parse_snapshot
from .file_feed import JsonFileSnapshotFeed
from .http_feed import HttpSnapshotFeed

__all__ = [
    "HttpSnapshotFeed",
    "JsonFileSnapshotFeed",
    "SnapshotDecodeError",
    "decode_snapshot",
    "parse_snapshot",
]
