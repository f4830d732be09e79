"""External adapters for the diagnav navigation system.

This package contains all external dependencies (files, HTTP, editor
processes, the terminal) and provides implementations of the core
port interfaces.

Adapter Organization:

- feed/: Snapshot feeds (JSON file, HTTP endpoint)
- opener/: Location openers (stdout, editor command)
- commands/: Command registry used by the interactive CLI
- notification/: User-facing messages
"""
