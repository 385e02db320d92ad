"""Composition root for the Roster user directory.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Entry point selection (cli, report)
"""

import json
import logging
import sys
from collections.abc import Callable

from roster.adapters.cli.commands import run_command
from roster.adapters.store.memory import InMemoryUserStore
from roster.config import Settings, load_settings
from roster.core.directory_service import UserDirectoryService
from roster.core.ports import DirectoryPort


def _run_cli_interactive(
    directory: DirectoryPort,
    read_line: Callable[[str], str] = input,
) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for directory commands.

    Args:
        directory: DirectoryPort the commands operate on.
        read_line: Prompt function, defaults to input().
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = read_line("roster> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            try:
                result = run_command(directory, command, args)
                print(json.dumps(result, indent=2, ensure_ascii=False, default=str))
            except ValueError as e:
                logger.error(f"Command execution error: {e}")
                _print_error(str(e))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                _print_error(str(e))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_error(message: str) -> None:
    print(json.dumps({
        "status": "error",
        "message": message
    }, indent=2, ensure_ascii=False))


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  create
    Register a new user.
    Required: name, email, age
    Optional: is_admin

    Example: create {"name": "Alice", "email": "alice@email.com", "age": 28}

  get
    Show a user.
    Required: user_id

    Example: get {"user_id": "uuid-here"}

  deactivate
    Deactivate a user. Admin users cannot be deactivated.
    Required: user_id

    Example: deactivate {"user_id": "uuid-here"}

  list
    List users, optionally filtered by status.
    Status options: ativo, inativo

    Example: list {"status": "ativo", "format": "text"}

  report
    Print the user report.

  clear
    Remove every user.

  help
    Show this help message.

  exit
    Exit the CLI.

Note: Commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


LOG_FORMATS = {
    "json": '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}',
    "text": "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
}


def resolve_log_level(log_level: str, debug: bool = False) -> int:
    """Map a configured level name to a logging constant.

    Debug mode always wins over the configured level.
    """
    if debug:
        return logging.DEBUG
    return getattr(logging, log_level, logging.INFO)


def configure_logging(settings: Settings) -> None:
    """Configure application logging from settings.

    Log records go to stderr so that command results on stdout stay
    machine-readable.
    """
    logging.basicConfig(
        level=resolve_log_level(settings.log_level, settings.debug),
        format=LOG_FORMATS[settings.log_format],
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )



def build_directory(settings: Settings) -> UserDirectoryService:
    """Wire the in-memory store into a directory service."""
    store = InMemoryUserStore()
    return UserDirectoryService(store=store, adult_age=settings.adult_age)


def bootstrap() -> None:
    """Load configuration, wire adapters, and start the application.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate the store and directory service
    4. Select and start run mode
    """
    settings = load_settings()

    configure_logging(settings)
    logger = logging.getLogger(__name__)
    logger.info("Loading Roster user directory...")

    directory = build_directory(settings)
    logger.info(f"Starting in {settings.run_mode} mode...")

    if settings.run_mode == "cli":
        _run_cli_interactive(directory)
    elif settings.run_mode == "report":
        print(directory.generate_user_report())
    else:
        logger.error(f"Unknown run mode: {settings.run_mode}")
        sys.exit(1)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
