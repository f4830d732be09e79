"""Notification adapters for user-facing messages."""

from .stdout import StdoutNotifier

__all__ = ["StdoutNotifier"]
