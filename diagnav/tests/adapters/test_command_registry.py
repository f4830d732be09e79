"""Tests for InMemoryCommandRegistry and StdoutNotifier."""

import logging

import pytest

from diagnav.adapters.commands.registry import InMemoryCommandRegistry
from diagnav.adapters.notification.stdout import StdoutNotifier


@pytest.fixture
def registry() -> InMemoryCommandRegistry:
    return InMemoryCommandRegistry()


def test_dispatch_runs_handler(registry: InMemoryCommandRegistry) -> None:
    calls: list[str] = []
    registry.register("diagnav:test", lambda: calls.append("ran"))

    registry.dispatch("diagnav:test")

    assert calls == ["ran"]
    assert "diagnav:test" in registry
    assert registry.names() == ["diagnav:test"]


def test_duplicate_registration_rejected(registry: InMemoryCommandRegistry) -> None:
    registry.register("diagnav:test", lambda: None)
    with pytest.raises(ValueError, match="already registered"):
        registry.register("diagnav:test", lambda: None)


def test_unknown_command_raises_key_error(registry: InMemoryCommandRegistry) -> None:
    with pytest.raises(KeyError, match="Unknown command"):
        registry.dispatch("diagnav:missing")


def test_dispose_unregisters(registry: InMemoryCommandRegistry) -> None:
    registration = registry.register("diagnav:test", lambda: None)
    registration.dispose()

    assert "diagnav:test" not in registry
    with pytest.raises(KeyError):
        registry.dispatch("diagnav:test")


def test_stale_disposal_keeps_newer_handler(registry: InMemoryCommandRegistry) -> None:
    calls: list[str] = []
    old = registry.register("diagnav:test", lambda: calls.append("old"))
    old.dispose()
    registry.register("diagnav:test", lambda: calls.append("new"))

    old.dispose()
    registry.dispatch("diagnav:test")

    assert calls == ["new"]


class TestStdoutNotifier:
    """StdoutNotifier prints and logs."""

    def test_error_is_printed_and_logged(
        self, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        StdoutNotifier().add_error("too many files")

        assert capsys.readouterr().out == "[error] too many files\n"
        assert "too many files" in caplog.text

    def test_info_printed_only_when_verbose(
        self, capsys: pytest.CaptureFixture[str], caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO)
        StdoutNotifier().add_info("quiet")
        StdoutNotifier(verbose=True).add_info("loud")

        assert capsys.readouterr().out == "[info] loud\n"
        assert "quiet" in caplog.text
