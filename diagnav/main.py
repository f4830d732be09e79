"""Composition root for the diagnav navigation system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Interactive command loop
"""

import asyncio
import logging
import sys
from dataclasses import dataclass

from diagnav.adapters.commands.registry import InMemoryCommandRegistry
from diagnav.adapters.feed.file_feed import JsonFileSnapshotFeed
from diagnav.adapters.feed.http_feed import HttpSnapshotFeed
from diagnav.adapters.feed.polling import PollingSnapshotFeed
from diagnav.adapters.notification.stdout import StdoutNotifier
from diagnav.adapters.opener.editor import EditorCommandLocationOpener
from diagnav.adapters.opener.stdout import StdoutLocationOpener, format_location
from diagnav.config import Settings, load_settings
from diagnav.core import navigator as nav
from diagnav.core.bulk_open import OPEN_ALL_FILES_WITH_ERRORS, OpenAllFilesService
from diagnav.core.disposable import CompositeDisposable
from diagnav.core.navigator import DiagnosticNavigator
from diagnav.core.ports import LocationOpenerPort

# Short names accepted at the interactive prompt.
CLI_COMMANDS: dict[str, str] = {
    "first": nav.GO_TO_FIRST,
    "last": nav.GO_TO_LAST,
    "next": nav.GO_TO_NEXT,
    "n": nav.GO_TO_NEXT,
    "previous": nav.GO_TO_PREVIOUS,
    "prev": nav.GO_TO_PREVIOUS,
    "p": nav.GO_TO_PREVIOUS,
    "next-trace": nav.GO_TO_NEXT_TRACE,
    "nt": nav.GO_TO_NEXT_TRACE,
    "previous-trace": nav.GO_TO_PREVIOUS_TRACE,
    "pt": nav.GO_TO_PREVIOUS_TRACE,
    "open-all": OPEN_ALL_FILES_WITH_ERRORS,
}


@dataclass
class Application:
    """Everything bootstrap() wires together."""

    settings: Settings
    feed: PollingSnapshotFeed
    opener: LocationOpenerPort
    registry: InMemoryCommandRegistry
    navigator: DiagnosticNavigator
    bulk_open: OpenAllFilesService
    subscriptions: CompositeDisposable

    async def close(self) -> None:
        """Dispose registrations and stop the feed."""
        self.subscriptions.dispose()
        await self.feed.close()


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands:

  first, last            Go to the first or last diagnostic
  next (n)               Go to the next diagnostic
  previous (prev, p)     Go to the previous diagnostic
  next-trace (nt)        Go to the next trace of the current diagnostic
  previous-trace (pt)    Go to the previous trace of the current diagnostic
  open-all               Open every file that has a diagnostic
  status                 Show the current position
  list                   List the navigable diagnostics
  help                   Show this help message
  exit                   Exit

Full command names (e.g. diagnav:go-to-next-diagnostic) are accepted too.
    """
    print(help_text)


def _format_status(navigator: DiagnosticNavigator) -> str:
    cursor = navigator.cursor
    total = len(navigator.diagnostics)
    if cursor.primary_index is None:
        return f"{total} diagnostics, none selected"
    status = f"diagnostic {cursor.primary_index + 1} of {total}"
    if cursor.secondary_index is not None:
        status += f", trace {cursor.secondary_index + 1}"
    return status


def _format_list(navigator: DiagnosticNavigator) -> str:
    lines = []
    for i, message in enumerate(navigator.diagnostics):
        assert message.file_path is not None
        start = message.range.start if message.range else None
        location = format_location(
            message.file_path,
            start.row if start else None,
            start.column if start else None,
        )
        marker = "*" if i == navigator.cursor.primary_index else " "
        text = f" {message.text}" if message.text else ""
        lines.append(f"{marker} [{message.type.value}] {location}{text}")
    return "\n".join(lines) if lines else "No diagnostics"


def execute_cli_command(app: Application, command_line: str) -> bool:
    """Execute one line of interactive input.

    Returns:
        False when the user asked to exit, True otherwise.

    Raises:
        ValueError: If the command is not recognized.
    """
    command = command_line.strip().lower()
    if not command:
        return True
    if command == "exit":
        return False
    if command == "help":
        _print_cli_help()
    elif command == "status":
        print(_format_status(app.navigator))
    elif command == "list":
        print(_format_list(app.navigator))
    elif command in CLI_COMMANDS:
        app.registry.dispatch(CLI_COMMANDS[command])
    elif command in app.registry:
        app.registry.dispatch(command)
    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")
    return True


async def _run_cli_interactive(app: Application) -> None:
    """Run interactive command loop.

    Reads stdin in a worker thread so the snapshot feed keeps polling on
    the event loop. Commands run on the loop, never concurrently with a
    snapshot update.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            command_line = await loop.run_in_executor(None, input, "diagnav> ")
            if not execute_cli_command(app, command_line):
                logger.info("Exiting CLI")
                break
        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue
        except ValueError as e:
            print(str(e))
        except Exception as e:
            logger.error(f"Command execution error: {e}", exc_info=True)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_application(settings: Settings) -> Application:
    """Instantiate adapters and core services from settings.

    Raises:
        ValueError: If a backend name is not recognized.
    """
    logger = logging.getLogger(__name__)

    feed: PollingSnapshotFeed
    if settings.feed_backend == "file":
        feed = JsonFileSnapshotFeed(
            path=settings.feed_file_path,
            poll_interval_seconds=settings.feed_poll_interval_seconds,
        )
        logger.info(f"Snapshot feed: file {settings.feed_file_path}")
    elif settings.feed_backend == "http":
        feed = HttpSnapshotFeed(
            url=settings.feed_url,
            poll_interval_seconds=settings.feed_poll_interval_seconds,
            timeout_seconds=settings.feed_timeout_seconds,
        )
        logger.info(f"Snapshot feed: HTTP {settings.feed_url}")
    else:
        raise ValueError(f"Unknown feed backend: {settings.feed_backend}")

    opener: LocationOpenerPort
    if settings.opener_backend == "stdout":
        opener = StdoutLocationOpener()
        logger.info("Location opener: Stdout")
    elif settings.opener_backend == "editor":
        opener = EditorCommandLocationOpener(command_template=settings.editor_command)
        logger.info(f"Location opener: Editor ({settings.editor_command})")
    else:
        raise ValueError(f"Unknown opener backend: {settings.opener_backend}")

    registry = InMemoryCommandRegistry()
    notifier = StdoutNotifier(verbose=settings.debug)

    navigator = DiagnosticNavigator(feed=feed, opener=opener, commands=registry)
    navigator.attach()

    bulk_open = OpenAllFilesService(
        navigator=navigator,
        opener=opener,
        notifier=notifier,
        max_files=settings.max_open_all_files,
    )

    subscriptions = CompositeDisposable(navigator, bulk_open.register(registry))

    return Application(
        settings=settings,
        feed=feed,
        opener=opener,
        registry=registry,
        navigator=navigator,
        bulk_open=bulk_open,
        subscriptions=subscriptions,
    )


async def bootstrap() -> None:
    """Load configuration, wire adapters, and run the command loop.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and core services
    4. Start the snapshot feed
    5. Run the interactive loop until exit
    """
    settings = load_settings()
    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading diagnav...")

    app = build_application(settings)
    try:
        await app.feed.start()
        await _run_cli_interactive(app)
    finally:
        await app.close()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except asyncio.CancelledError:
        logger.info("Graceful shutdown completed")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
