# src/taskbuddy/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..core.errors import OutOfRangeError
from .task_models import Task


class TaskList:
    """
    Ordered, session-lived collection of tasks.

    Callers address tasks by 1-based position. Positions are not stable:
    deleting task k moves every task above k down by one.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def add(self, task: Task) -> int:
        """Append `task` and return the new size."""
        self._tasks.append(task)
        return len(self._tasks)

    def get(self, number: int) -> Task:
        return self._tasks[self._index(number)]

    def mark_done(self, number: int) -> Task:
        task = self.get(number)
        task.mark_done()
        return task

    def mark_not_done(self, number: int) -> Task:
        task = self.get(number)
        task.mark_not_done()
        return task

    def delete(self, number: int) -> Task:
        return self._tasks.pop(self._index(number))

    def numbered(self) -> list[tuple[int, Task]]:
        return list(enumerate(self._tasks, start=1))

    def snapshot(self) -> list[Task]:
        return list(self._tasks)

    def _index(self, number: int) -> int:
        if not 1 <= number <= len(self._tasks):
            raise OutOfRangeError(number, len(self._tasks))
        return number - 1
