"""diagnav: keyboard navigation over a live stream of file diagnostics."""

__version__ = "0.1.0"
