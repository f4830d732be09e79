"""Stdout location opener.

Implements LocationOpenerPort by printing the location in the
conventional path:line:column form, which terminals and editors can
turn into a link.
"""

import logging

from diagnav.core.ports import LocationOpenerPort

logger = logging.getLogger(__name__)


def format_location(file_path: str, row: int | None = None, column: int | None = None) -> str:
    """Format a location with one-based line and column numbers."""
    if row is None:
        return file_path
    if column is None:
        return f"{file_path}:{row + 1}"
    return f"{file_path}:{row + 1}:{column + 1}"


class StdoutLocationOpener(LocationOpenerPort):
    """Prints each requested location on its own line."""

    def __init__(self, prefix: str = "-> "):
        self.prefix = prefix

    def open(
        self,
        file_path: str,
        row: int | None = None,
        column: int | None = None,
    ) -> None:
        location = format_location(file_path, row, column)
        logger.debug(f"Opening {location}")
        print(f"{self.prefix}{location}")
