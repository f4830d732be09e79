"""In-memory command registry.

Implements CommandRegistryPort with a name -> handler table that the
interactive CLI dispatches into.
"""

import logging

from diagnav.core.disposable import Disposable
from diagnav.core.ports import CommandHandler, CommandRegistryPort

logger = logging.getLogger(__name__)


class InMemoryCommandRegistry(CommandRegistryPort):
    """Maps command names to zero-argument handlers."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}

    def register(self, name: str, handler: CommandHandler) -> Disposable:
        if name in self._handlers:
            raise ValueError(f"Command already registered: {name}")
        self._handlers[name] = handler
        logger.debug(f"Registered command {name}")

        def _unregister() -> None:
            if self._handlers.get(name) is handler:
                del self._handlers[name]
                logger.debug(f"Unregistered command {name}")

        return Disposable(_unregister)

    def dispatch(self, name: str) -> None:
        """Run the handler registered under name.

        Raises:
            KeyError: If no handler is registered under name.
        """
        try:
            handler = self._handlers[name]
        except KeyError:
            raise KeyError(f"Unknown command: {name}") from None
        handler()

    def names(self) -> list[str]:
        """Registered command names in registration order."""
        return list(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers
