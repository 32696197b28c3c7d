# src/taskbuddy/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..core.errors import StorageError
from .task_codec import decode_lines, encode
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_PATH = Path("data") / "taskbuddy.txt"


class TaskStore:
    """
    Flat-file task store (one record per line, see task_codec).

    - load(): missing file -> created empty, returns []
    - save(): truncates and rewrites the whole file

    There is no locking and no temp-file swap: one process, one writer.
    A crash in the middle of save() can leave a truncated file.
    """

    def __init__(self, path: str | Path = DEFAULT_TASKS_PATH) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_file(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if not self._path.exists():
                self._path.touch()
                logger.info("Created empty task file %s", self._path)
        except OSError as e:
            raise StorageError("Could not create the data file.", self._path) from e

    def load(self) -> list[Task]:
        if not self._path.exists():
            self._ensure_file()
            return []

        try:
            # Records end with "\n" only; other line-break characters are description text.
            with self._path.open("r", encoding="utf-8", newline="") as f:
                lines = f.read().split("\n")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError("Could not read the data file.", self._path) from e

        tasks = decode_lines(lines)
        logger.info("TaskStore loaded path=%s total=%d", self._path, len(tasks))
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        self._ensure_file()
        body = "".join(encode(task) + "\n" for task in tasks)
        try:
            self._path.write_text(body, "utf-8")
        except OSError as e:
            raise StorageError("Could not save the data file.", self._path) from e
        logger.debug("TaskStore saved path=%s bytes=%d", self._path, len(body))
