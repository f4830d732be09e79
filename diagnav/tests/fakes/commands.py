"""Fake CommandRegistryPort implementation for testing."""

from diagnav.core.disposable import Disposable
from diagnav.core.ports import CommandHandler, CommandRegistryPort


class FakeCommandRegistry(CommandRegistryPort):
    """In-memory command registry that tracks registrations."""

    def __init__(self) -> None:
        self.handlers: dict[str, CommandHandler] = {}
        self.unregistered: list[str] = []

    def register(self, name: str, handler: CommandHandler) -> Disposable:
        if name in self.handlers:
            raise ValueError(f"Command already registered: {name}")
        self.handlers[name] = handler

        def _unregister() -> None:
            self.handlers.pop(name, None)
            self.unregistered.append(name)

        return Disposable(_unregister)

    def trigger(self, name: str) -> None:
        """Fire a registered command as the host would."""
        self.handlers[name]()
