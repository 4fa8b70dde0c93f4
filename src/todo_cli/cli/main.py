# src/todo_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task list into AppState, then runs the console REPL
until the user exits. Saving on exit happens inside the REPL.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import print_banner, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    console_level = getattr(logging, str(settings.log_level).upper(), logging.WARNING)
    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s (tasks file %s)...", settings.app_name, settings.tasks_path)

    print_banner()
    state = create_initial_state(settings=settings, emit=print)
    run_console_loop(state)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
