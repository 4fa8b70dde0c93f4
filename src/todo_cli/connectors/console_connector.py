# src/todo_cli/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.bootstrap import save_task_store
from ..cli.commands import is_exit_command, registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def print_banner() -> None:
    print("Welcome to the Todo CLI!")
    print("Type 'exit' to quit the application.")
    print("💡 Type 'help' to see available commands")
    print("-----------------------------------")


def _finish(state: AppState) -> None:
    print(save_task_store(state))
    print("👋 Goodbye!")


def run_console_loop(state: AppState) -> None:
    """
    Read-eval-print loop over stdin/stdout.

    Exits on exit/quit, end of input or Ctrl+C; every exit path saves once and
    prints the farewell whether or not the save worked.
    """
    logger.info("Console connector started (tasks=%s).", state.task_store.count())
    prompt = str(getattr(state.settings, "prompt", "> "))

    while True:
        try:
            user_input = input(f"\n{prompt}").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            print()
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break
        except (OSError, UnicodeDecodeError):
            logger.exception("Failed to read from stdin.")
            print("Error reading input")
            continue

        if not user_input:
            continue

        if is_exit_command(user_input):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            print(response)

    _finish(state)
    logger.info("Console connector finished.")
