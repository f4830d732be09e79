"""Fake implementations of core ports for testing.

These in-memory implementations allow core logic to be tested
without external dependencies:

- FakeSnapshotFeed: Push snapshots by hand
- FakeLocationOpener: Captured opener calls for assertion
- FakeCommandRegistry: Captured command registrations
- FakeNotifier: Captured notifications for assertion
"""

from .commands import FakeCommandRegistry
from .feed import FakeSnapshotFeed
from .notifier import FakeNotifier
from .opener import FakeLocationOpener

__all__ = [
    "FakeCommandRegistry",
    "FakeLocationOpener",
    "FakeNotifier",
    "FakeSnapshotFeed",
]
