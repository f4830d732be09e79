"""Stdout notifier adapter.

Implements NotifierPort by logging each message and echoing it to the
terminal.
"""

import logging

from diagnav.core.ports import NotifierPort

logger = logging.getLogger(__name__)


class StdoutNotifier(NotifierPort):
    """Prints notifications to stdout with a severity tag."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout notifier.

        Args:
            verbose: If True, info messages are printed as well as logged.
        """
        self.verbose = verbose

    def add_error(self, message: str) -> None:
        logger.error(message)
        print(f"[error] {message}")

    def add_info(self, message: str) -> None:
        logger.info(message)
        if self.verbose:
            print(f"[info] {message}")
