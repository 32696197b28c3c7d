# tests/test_task_list.py

from __future__ import annotations

import pytest

from taskbuddy.core.errors import OutOfRangeError
from taskbuddy.tasks.task_list import TaskList
from taskbuddy.tasks.task_models import Task


def _three() -> TaskList:
    return TaskList([Task.todo("a"), Task.todo("b"), Task.todo("c")])


def test_add_returns_new_size_and_keeps_order() -> None:
    tasks = TaskList()
    assert tasks.add(Task.todo("a")) == 1
    assert tasks.add(Task.deadline("b", "Fri")) == 2
    assert [t.description for t in tasks] == ["a", "b"]
    assert tasks.get(2).description == "b"


def test_delete_shifts_later_tasks_down() -> None:
    tasks = _three()
    removed = tasks.delete(2)

    assert removed.description == "b"
    assert tasks.size() == 2
    assert tasks.get(2).description == "c"
    assert [n for n, _ in tasks.numbered()] == [1, 2]


@pytest.mark.parametrize("number", [0, -1, 4, 100])
def test_out_of_range_leaves_list_untouched(number: int) -> None:
    tasks = _three()
    before = [t.render() for t in tasks]

    for op in (tasks.get, tasks.mark_done, tasks.mark_not_done, tasks.delete):
        with pytest.raises(OutOfRangeError) as excinfo:
            op(number)
        assert excinfo.value.number == number
        assert excinfo.value.size == 3

    assert [t.render() for t in tasks] == before


def test_mark_then_unmark_restores_rendering() -> None:
    tasks = _three()
    original = tasks.get(1).render()

    assert tasks.mark_done(1).render() == "[T][X] a"
    assert tasks.mark_not_done(1).render() == original


def test_empty_list_has_no_valid_numbers() -> None:
    with pytest.raises(OutOfRangeError) as excinfo:
        TaskList().get(1)
    assert "only 0 tasks" in str(excinfo.value)
