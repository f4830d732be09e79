"""Core domain logic for the diagnav navigation system.

This package contains zero external dependencies and represents
the pure navigation logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .disposable import CompositeDisposable, Disposable
from .models import (
    UNSET,
    At,
    Cursor,
    DiagnosticMessage,
    DiagnosticScope,
    MessageType,
    NavigationCursor,
    Point,
    Range,
    Snapshot,
    Trace,
    Unset,
)

__all__ = [
    "UNSET",
    "At",
    "CompositeDisposable",
    "Cursor",
    "DiagnosticMessage",
    "DiagnosticScope",
    "Disposable",
    "MessageType",
    "NavigationCursor",
    "Point",
    "Range",
    "Snapshot",
    "Trace",
    "Unset",
]
