"""Test suite for the diagnav navigation system.

Organized into three categories:

1. core/: Unit tests for core navigation logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Real files in temporary directories, mocked HTTP transport
   - Validates adapter behavior and error handling

3. fakes/: Port implementations for testing
   - In-memory implementations of SnapshotFeedPort, LocationOpenerPort, etc.
   - Used by core unit tests
"""
