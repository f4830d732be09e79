"""Tests for interactive CLI loop functionality.

Covers:
- _run_cli_interactive: REPL-like command loop
- EOF/KeyboardInterrupt handling
- Short and fully qualified command names
"""

from unittest.mock import patch

import pytest

from diagnav.adapters.commands.registry import InMemoryCommandRegistry
from diagnav.adapters.feed.file_feed import JsonFileSnapshotFeed
from diagnav.config import Settings
from diagnav.core.bulk_open import OpenAllFilesService
from diagnav.core.disposable import CompositeDisposable
from diagnav.core.models import DiagnosticMessage, DiagnosticScope, Point, Range, Trace
from diagnav.core.navigator import DiagnosticNavigator
from diagnav.main import Application, _run_cli_interactive, execute_cli_command
from diagnav.tests.fakes import FakeLocationOpener, FakeNotifier


@pytest.fixture
def opener() -> FakeLocationOpener:
    return FakeLocationOpener()


@pytest.fixture
def app(tmp_path, opener: FakeLocationOpener) -> Application:
    settings = Settings(feed_file_path=str(tmp_path / "d.json"))
    feed = JsonFileSnapshotFeed(settings.feed_file_path)
    registry = InMemoryCommandRegistry()
    navigator = DiagnosticNavigator(feed=feed, opener=opener, commands=registry)
    navigator.attach()
    bulk_open = OpenAllFilesService(navigator=navigator, opener=opener, notifier=FakeNotifier())
    subscriptions = CompositeDisposable(navigator, bulk_open.register(registry))

    navigator.on_snapshot(
        [
            DiagnosticMessage(
                scope=DiagnosticScope.FILE,
                file_path="a.py",
                range=Range(Point(1, 2), Point(1, 3)),
                trace=(Trace(file_path="t.py", range=Range(Point(7, 0), Point(7, 1))),),
                text="undefined name",
            ),
            DiagnosticMessage(scope=DiagnosticScope.FILE, file_path="b.py"),
        ]
    )
    return Application(
        settings=settings,
        feed=feed,
        opener=opener,
        registry=registry,
        navigator=navigator,
        bulk_open=bulk_open,
        subscriptions=subscriptions,
    )


class TestExecuteCommand:
    """Test single-line command execution."""

    def test_short_names_dispatch(self, app: Application, opener: FakeLocationOpener) -> None:
        for command in ["next", "nt", "pt", "n", "p", "last", "first"]:
            assert execute_cli_command(app, command) is True

        assert opener.calls == [
            ("a.py", 1, 2),
            ("t.py", 7, 0),
            ("a.py", 1, 2),
            ("b.py",),
            ("a.py", 1, 2),
            ("b.py",),
            ("a.py", 1, 2),
        ]

    def test_full_command_name(self, app: Application, opener: FakeLocationOpener) -> None:
        execute_cli_command(app, "diagnav:go-to-last-diagnostic")
        assert opener.calls == [("b.py",)]

    def test_open_all(self, app: Application, opener: FakeLocationOpener) -> None:
        execute_cli_command(app, "open-all")
        assert opener.calls == [("a.py", 1, 0), ("b.py", 0, 0)]

    def test_blank_line_is_ignored(self, app: Application, opener: FakeLocationOpener) -> None:
        assert execute_cli_command(app, "   ") is True
        assert opener.calls == []

    def test_exit_returns_false(self, app: Application) -> None:
        assert execute_cli_command(app, "EXIT") is False

    def test_unknown_command_raises(self, app: Application) -> None:
        with pytest.raises(ValueError, match="Unknown command"):
            execute_cli_command(app, "jump")

    def test_status_and_list(self, app: Application, capsys: pytest.CaptureFixture[str]) -> None:
        execute_cli_command(app, "status")
        execute_cli_command(app, "next")
        execute_cli_command(app, "next-trace")
        execute_cli_command(app, "status")
        execute_cli_command(app, "list")

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "2 diagnostics, none selected"
        assert out[1] == "diagnostic 1 of 2, trace 1"
        assert out[2] == "* [Error] a.py:2:3 undefined name"
        assert out[3] == "  [Error] b.py"


@pytest.mark.asyncio
class TestInteractiveCLILoop:
    """Test suite for interactive CLI loop."""

    async def test_cli_reads_and_executes_commands(
        self, app: Application, opener: FakeLocationOpener
    ) -> None:
        """Commands are dispatched until exit."""
        with patch("builtins.input", side_effect=["next", "next", "exit", "next"]):
            await _run_cli_interactive(app)

        assert opener.calls == [("a.py", 1, 2), ("b.py",)]

    async def test_cli_reports_unknown_command_and_continues(
        self, app: Application, opener: FakeLocationOpener
    ) -> None:
        """Unknown commands are reported and the loop continues."""
        with patch("builtins.input", side_effect=["bogus", "first", "exit"]):
            with patch("builtins.print") as mock_print:
                await _run_cli_interactive(app)

        assert opener.calls == [("a.py", 1, 2)]
        printed = " ".join(str(call.args[0]) for call in mock_print.call_args_list)
        assert "Unknown command: bogus" in printed

    async def test_cli_handles_eof(self, app: Application) -> None:
        """EOF (Ctrl+D) exits the loop."""

        def input_with_eof(_: str) -> str:
            raise EOFError()

        with patch("builtins.input", side_effect=input_with_eof):
            await _run_cli_interactive(app)

    async def test_cli_handles_keyboard_interrupt(
        self, app: Application, opener: FakeLocationOpener
    ) -> None:
        """Ctrl+C cancels the current line and keeps the loop running."""
        with patch("builtins.input", side_effect=[KeyboardInterrupt(), "last", "exit"]):
            await _run_cli_interactive(app)

        assert opener.calls == [("b.py",)]

    async def test_cli_survives_opener_failure(
        self, app: Application, opener: FakeLocationOpener
    ) -> None:
        """Errors raised by the opener are logged and the loop continues."""
        opener.set_should_fail(True)
        with patch("builtins.input", side_effect=["first", "exit"]):
            await _run_cli_interactive(app)
