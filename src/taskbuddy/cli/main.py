# src/taskbuddy/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the data file), then runs the
console REPL in the main thread until 'bye' or end-of-input.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import console_writer, run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    if not isinstance(console_level, int):
        console_level = logging.WARNING

    log_dir = settings.log_dir if settings.file_logging else None
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (data file: %s)...", settings.app_name, settings.tasks_path)

    state = create_initial_state(settings=settings, emit=console_writer)
    run_console_loop(state, emit=console_writer)

    logger.info("Bye.")


if __name__ == "__main__":
    main()
