"""Command registry adapters."""

from .registry import InMemoryCommandRegistry

__all__ = ["InMemoryCommandRegistry"]
