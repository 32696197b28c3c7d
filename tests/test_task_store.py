# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from taskbuddy.core.errors import StorageError
from taskbuddy.tasks.task_models import Task
from taskbuddy.tasks.task_store import TaskStore


def test_missing_file_loads_empty_and_is_created(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "dir" / "tasks.txt"
    store = TaskStore(path)

    assert store.load() == []
    assert path.exists()
    assert path.read_text("utf-8") == ""


def test_save_rewrites_whole_file_and_load_reads_it_back(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = TaskStore(path)

    deadline = Task.deadline("submit", "Friday")
    deadline.mark_done()
    store.save([Task.todo("a"), deadline, Task.event("trip", "Mon", "Wed")])
    store.save([Task.todo("only")])

    assert path.read_text("utf-8") == "T | 0 | only\n"

    store.save([Task.todo("a"), deadline])
    loaded = store.load()
    assert [t.render() for t in loaded] == ["[T][ ] a", "[D][X] submit (by: Friday)"]


def test_load_skips_corrupt_lines(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T | 0 | read book\nX | 1 | bogus\nE | 1 | trip | Mon | Wed\n", "utf-8")

    loaded = TaskStore(path).load()

    assert [t.render() for t in loaded] == ["[T][ ] read book", "[E][X] trip (from: Mon to: Wed)"]


def test_unwritable_location_raises_storage_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", "utf-8")
    store = TaskStore(blocker / "tasks.txt")

    with pytest.raises(StorageError) as excinfo:
        store.save([Task.todo("a")])
    assert excinfo.value.path == blocker / "tasks.txt"

    with pytest.raises(StorageError):
        store.load()


def test_only_newline_ends_a_record(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "tasks.txt")
    descriptions = ["page\x0cbreak", "tab\x0bbed", "para\u2029graph", "next\x85line", "after"]

    store.save([Task.todo(d) for d in descriptions])

    assert [t.description for t in store.load()] == descriptions


def test_load_tolerates_crlf_line_endings(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | a\r\nD | 1 | b | Fri\r\n")

    loaded = TaskStore(path).load()

    assert [t.render() for t in loaded] == ["[T][ ] a", "[D][X] b (by: Fri)"]
