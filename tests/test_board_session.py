from __future__ import annotations

from kanban.services.board import BoardSession
from kanban.services.task_store import TaskStore


def test_create_and_move_scenario(storage) -> None:
    session = BoardSession(TaskStore(storage))

    task = session.create_task("Write spec", "")
    assert [(t.title, t.description, t.stage, t.is_priority) for t in session.tasks()] == [
        ("Write spec", "", "todo", False)
    ]

    session.move_task(task.id, "done")

    assert session.tasks()[0].stage == "done"
    assert session.counts_by_stage() == {"todo": 0, "in-progress": 0, "done": 1}


def test_search_scenario(storage) -> None:
    session = BoardSession(TaskStore(storage))
    bug = session.create_task("Fix bug")
    session.create_task("Write docs")

    session.set_search_text("bug")

    assert session.filtered()["todo"] == (bug,)
    assert session.visible_count() == 1
    assert session.has_active_filters() is True
    assert session.filter_summary() == "Showing 1 of 2 tasks"

    session.clear_search()
    assert session.has_active_filters() is False
    assert session.filter_summary() is None
    assert session.visible_count() == 2


def test_priority_filter_toggle(storage) -> None:
    session = BoardSession(TaskStore(storage))
    task = session.create_task("Fix bug")
    session.create_task("Write docs")
    session.toggle_task_priority(task.id)

    session.toggle_priority_only()

    assert session.params.priority_only is True
    assert session.visible_count() == 1
    assert [c.badge for c in session.columns()] == ["1/2", "0/0", "0/0"]

    session.toggle_priority_only()
    assert session.visible_count() == 2


def test_projections_are_reused_until_state_changes(storage) -> None:
    session = BoardSession(TaskStore(storage))
    task = session.create_task("Fix bug")

    grouped = session.grouped()
    assert session.grouped() is grouped
    assert session.filtered() is grouped

    session.move_task(task.id, "todo")
    assert session.grouped() is grouped

    session.update_task(task.id, "Fix crash")
    assert session.grouped() is not grouped

    session.set_search_text("crash")
    filtered = session.filtered()
    assert session.filtered() is filtered
    session.set_search_text("crash")
    assert session.filtered() is filtered


def test_delete_task(storage) -> None:
    session = BoardSession(TaskStore(storage))
    task = session.create_task("Fix bug")

    assert session.delete_task(task.id) is True
    assert session.total_count() == 0
    assert session.delete_task(task.id) is False
