# src/taskbuddy/connectors/console_connector.py

from __future__ import annotations

import logging
from enum import Enum

from ..cli.commands import EXIT_COMMAND, CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.errors import StorageError, TaskBuddyError
from ..core.ports import LineReader, LineWriter
from ..core.state import AppState

logger = logging.getLogger(__name__)


class SessionState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


def console_reader(prompt: str = "> ") -> LineReader:
    def read() -> str:
        return input(prompt)

    return read


def console_writer(text: str) -> None:
    print(text, flush=True)


def persist(state: AppState, emit: LineWriter) -> bool:
    """
    Rewrite the data file from the in-memory list.

    A failed save is reported but the in-memory change stays.
    """
    try:
        state.task_store.save(state.tasks.snapshot())
    except StorageError as e:
        # The user sees `emit`; keep the traceback out of the console.
        logger.info("Saving tasks failed: %s", e, exc_info=True)
        emit(f"Warning: your change is kept for this session but was not saved. {e}")
        return False
    return True


def process_line(
    state: AppState,
    line: str,
    emit: LineWriter,
    registry: CommandRegistry = command_registry,
) -> SessionState:
    """Handle one input line and return the session state that follows it."""
    text = line.strip()
    if not text:
        return SessionState.RUNNING

    if text.lower() == EXIT_COMMAND:
        logger.info("Console exit command received.")
        return SessionState.TERMINATED

    try:
        result = registry.handle(state, text)
    except TaskBuddyError as e:
        logger.info("Command rejected (%s): %s", type(e).__name__, e)
        emit(f"Oops! {e}")
        return SessionState.RUNNING
    except Exception:
        logger.exception("Command handler crashed.")
        emit("Internal error while handling a command.")
        return SessionState.RUNNING

    if result.mutated:
        persist(state, emit)
    emit(result.reply)
    return SessionState.RUNNING


def run_console_loop(
    state: AppState,
    read_line: LineReader | None = None,
    emit: LineWriter = console_writer,
    registry: CommandRegistry = command_registry,
) -> None:
    """
    Read-eval-print loop: RUNNING until the exit command or end-of-input.

    `read_line` raises EOFError at end-of-input; Ctrl+C ends the session
    the same way.
    """
    read = read_line or console_reader()
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "taskbuddy"))

    logger.info("Console session started with %d task(s).", len(state.tasks))
    emit(f"Hello! I'm {app_name}, your task buddy. Type 'help' for commands, '{EXIT_COMMAND}' to quit.")

    session = SessionState.RUNNING
    while session is SessionState.RUNNING:
        try:
            line = read()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            break

        session = process_line(state, line, emit, registry)

    emit("Bye! See you later. Don't forget your tasks now!")
    logger.info("Console session finished.")
