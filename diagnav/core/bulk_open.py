"""Open every file that currently has a file-scoped diagnostic."""

import logging

from .disposable import Disposable
from .models import DiagnosticScope
from .navigator import DiagnosticNavigator
from .ports import CommandRegistryPort, LocationOpenerPort, NotifierPort

logger = logging.getLogger(__name__)

OPEN_ALL_FILES_WITH_ERRORS = "diagnav:open-all-files-with-errors"
DEFAULT_MAX_OPEN_ALL_FILES = 20


class OpenAllFilesService:
    """Opens the files named by the navigator's latest snapshot.

    Refuses to open anything when the snapshot holds more than max_files
    messages, so a flood of diagnostics cannot open hundreds of editors.
    """

    def __init__(
        self,
        navigator: DiagnosticNavigator,
        opener: LocationOpenerPort,
        notifier: NotifierPort,
        max_files: int = DEFAULT_MAX_OPEN_ALL_FILES,
    ):
        if max_files <= 0:
            raise ValueError("max_files must be positive")
        self.navigator = navigator
        self.opener = opener
        self.notifier = notifier
        self.max_files = max_files

    def register(self, commands: CommandRegistryPort) -> Disposable:
        """Register the open-all command and return its registration."""
        return commands.register(OPEN_ALL_FILES_WITH_ERRORS, self.open_all_files_with_errors)

    def open_all_files_with_errors(self) -> int:
        """Open each file-scoped message's file at its start row.

        Returns:
            Number of opener calls made.
        """
        messages = self.navigator.snapshot
        if len(messages) > self.max_files:
            self.notifier.add_error(
                f"Diagnostics: Will not open more than {self.max_files} files"
            )
            return 0

        opened = 0
        for message in messages:
            if message.scope is not DiagnosticScope.FILE or message.file_path is None:
                continue
            # Some providers report a row of -1.
            row = max(message.range.start.row if message.range else 0, 0)
            self.opener.open(message.file_path, row, 0)
            opened += 1

        logger.info(f"Opened {opened} files with diagnostics")
        return opened
