# src/taskbuddy/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings, wires the
flat-file TaskStore into AppState and loads the saved task list.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import StorageError
from ..core.ports import LineWriter
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, emit: LineWriter | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().

    A data file that cannot be read leaves the session with an empty list;
    the problem is logged and, when `emit` is given, shown to the user.
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_path)
    try:
        tasks = TaskList(store.load())
    except StorageError as e:
        logger.info("Loading tasks failed, starting empty: %s", e, exc_info=True)
        if emit is not None:
            emit(f"Warning: starting with an empty list. {e}")
        tasks = TaskList()

    return AppState(settings=settings, task_store=store, tasks=tasks)
