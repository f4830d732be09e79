"""Location opener adapters.

- stdout: Print path:line:column for the terminal
- editor: Launch an external editor command
"""

from .editor import EditorCommandLocationOpener
from .stdout import StdoutLocationOpener

__all__ = ["EditorCommandLocationOpener", "StdoutLocationOpener"]
