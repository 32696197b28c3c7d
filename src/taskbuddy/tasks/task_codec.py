# src/taskbuddy/tasks/task_codec.py

"""
One-line text records for tasks.

Format: TYPE | DONE_FLAG | DESCRIPTION [| EXTRA...]
- TYPE: T, D or E
- DONE_FLAG: 1 for done, 0 otherwise
- EXTRA: `by` for D; `from` then `to` for E

Fields are written as-is. A field containing the separator itself cannot
be read back correctly; this is a known limitation of the format.
"""

from __future__ import annotations

import logging

from .task_models import Task, TaskKind

logger = logging.getLogger(__name__)

SEP = " | "

# Minimum number of fields per type tag.
_REQUIRED_FIELDS: dict[TaskKind, int] = {
    TaskKind.TODO: 3,
    TaskKind.DEADLINE: 4,
    TaskKind.EVENT: 5,
}


def encode(task: Task) -> str:
    fields = [task.kind.value, "1" if task.done else "0", task.description]
    if task.kind is TaskKind.DEADLINE:
        fields.append(str(task.by))
    elif task.kind is TaskKind.EVENT:
        fields.extend([str(task.start), str(task.end)])
    return SEP.join(fields)


def decode(line: str) -> Task | None:
    """
    Rebuild a task from one record.

    Returns None for a record that cannot be used (unknown tag, too few
    fields, anything else unreadable) so a damaged file still loads.
    """
    try:
        parts = line.rstrip("\r\n").split(SEP)
        if len(parts) < 3:
            return None

        try:
            kind = TaskKind(parts[0])
        except ValueError:
            return None

        if len(parts) < _REQUIRED_FIELDS[kind]:
            return None

        # Required fields must be non-empty, as the parser guarantees for new tasks.
        if not all(parts[2 : _REQUIRED_FIELDS[kind]]):
            return None

        description = parts[2]
        if kind is TaskKind.TODO:
            task = Task.todo(description)
        elif kind is TaskKind.DEADLINE:
            task = Task.deadline(description, parts[3])
        else:
            task = Task.event(description, parts[3], parts[4])

        if parts[1] == "1":
            task.mark_done()
        return task
    except Exception:
        logger.debug("Unreadable task record skipped: %r", line, exc_info=True)
        return None


def decode_lines(lines: list[str]) -> list[Task]:
    """Decode every usable record, dropping the rest."""
    tasks: list[Task] = []
    skipped = 0
    for line in lines:
        if not line.strip():
            continue
        task = decode(line)
        if task is None:
            skipped += 1
            logger.debug("Skipping malformed task record: %r", line)
            continue
        tasks.append(task)
    if skipped:
        logger.info("Decoded %d task(s), skipped %d record(s).", len(tasks), skipped)
    return tasks
