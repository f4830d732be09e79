"""Editor command location opener.

Implements LocationOpenerPort by launching an external editor command
such as ``code -g {path}:{line}:{column}`` or ``vim +{line} {path}``.
The process is started without waiting for it to finish.
"""

import logging
import shlex
import subprocess

from diagnav.core.ports import LocationOpenerPort

logger = logging.getLogger(__name__)

DEFAULT_EDITOR_COMMAND = "code -g {path}:{line}:{column}"


class EditorCommandLocationOpener(LocationOpenerPort):
    """Launches an editor command for each requested location.

    The template may use {path}, {line} and {column}. Line and column
    are one-based; both default to 1 when no position is requested.
    """

    def __init__(self, command_template: str = DEFAULT_EDITOR_COMMAND):
        if "{path}" not in command_template:
            raise ValueError("command_template must contain a {path} placeholder")
        self.command_template = command_template

    def build_command(
        self,
        file_path: str,
        row: int | None = None,
        column: int | None = None,
    ) -> list[str]:
        """Expand the template into an argv list."""
        line = 1 if row is None else row + 1
        col = 1 if column is None else column + 1
        return [
            part.format(path=file_path, line=line, column=col)
            for part in shlex.split(self.command_template)
        ]

    def open(
        self,
        file_path: str,
        row: int | None = None,
        column: int | None = None,
    ) -> None:
        argv = self.build_command(file_path, row, column)
        logger.info(f"Launching editor: {' '.join(argv)}")
        subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
