"""Domain models for the diagnav navigation system.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias


@dataclass(frozen=True)
class Point:
    """A zero-based (row, column) position in a file."""

    row: int
    column: int


@dataclass(frozen=True)
class Range:
    """A span of text between two points."""

    start: Point
    end: Point


class DiagnosticScope(Enum):
    """Whether a diagnostic belongs to a single file or the whole project."""

    FILE = "file"
    PROJECT = "project"


class MessageType(Enum):
    """Severity reported by the diagnostic provider."""

    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"


@dataclass(frozen=True)
class Trace:
    """A related location attached to a diagnostic.

    Providers may emit traces that carry only explanatory text, so both
    the path and the range are optional.
    """

    file_path: str | None = None
    range: Range | None = None
    text: str | None = None

    @property
    def is_navigable(self) -> bool:
        """True when the trace has enough coordinates to jump to."""
        return self.file_path is not None and self.range is not None


@dataclass(frozen=True)
class DiagnosticMessage:
    """A single diagnostic reported by an upstream provider.

    Identity is positional within the snapshot that delivered it; there is
    no stable key across snapshots.
    """

    scope: DiagnosticScope
    file_path: str | None
    range: Range | None = None
    trace: tuple[Trace, ...] = field(default_factory=tuple)
    provider_name: str = ""
    type: MessageType = MessageType.ERROR
    text: str | None = None

    def __post_init__(self) -> None:
        """Validate message invariants on creation."""
        if self.scope is DiagnosticScope.FILE and not self.file_path:
            raise ValueError("file-scoped diagnostics require a file_path")
        if isinstance(self.trace, list):
            object.__setattr__(self, "trace", tuple(self.trace))


Snapshot: TypeAlias = tuple[DiagnosticMessage, ...]


class Unset:
    """Cursor state meaning "no position selected"."""

    _instance: "Unset | None" = None

    def __new__(cls) -> "Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = Unset()


@dataclass(frozen=True)
class At:
    """Cursor state pointing at a concrete index."""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"cursor index must be >= 0, got {self.index}")


Cursor: TypeAlias = Unset | At


@dataclass(frozen=True)
class NavigationCursor:
    """Primary (diagnostic) and secondary (trace) cursor pair.

    The secondary cursor is only meaningful while the primary one is set.
    """

    primary: Cursor = UNSET
    secondary: Cursor = UNSET

    def __post_init__(self) -> None:
        """Validate the nesting invariant."""
        if isinstance(self.secondary, At) and not isinstance(self.primary, At):
            raise ValueError("secondary cursor cannot be set without a primary cursor")

    @property
    def primary_index(self) -> int | None:
        """Primary index, or None when unset."""
        return self.primary.index if isinstance(self.primary, At) else None

    @property
    def secondary_index(self) -> int | None:
        """Secondary index, or None when unset."""
        return self.secondary.index if isinstance(self.secondary, At) else None
