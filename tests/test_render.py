# tests/test_render.py

from __future__ import annotations

from task_tracker.cli.render import RULE_WIDTH, render_task, render_task_list
from task_tracker.tasks.task_models import Task


def _task(status: str, updated_at: str = "not-a-date") -> Task:
    return Task(id=3, description="Walk dog", status=status, created_at="", updated_at=updated_at)


def test_render_task_block() -> None:
    lines = render_task(_task("in-progress")).splitlines()

    assert lines == [
        "🔄 [ID: 3] Walk dog",
        "   Status: IN-PROGRESS | Updated: not-a-date",
        "-" * RULE_WIDTH,
    ]


def test_glyphs_fall_back_to_todo() -> None:
    assert render_task(_task("done")).startswith("✅ ")
    assert render_task(_task("todo")).startswith("⭕ ")
    assert render_task(_task("blocked")).startswith("⭕ ")


def test_timestamp_is_shown_in_local_time_format() -> None:
    line = render_task(_task("todo", "2024-03-05T10:20:30.000Z")).splitlines()[1]
    stamp = line.split("Updated: ", 1)[1]

    assert len(stamp) == len("2024-03-05 10:20:30")
    assert stamp[4] == "-" and stamp[10] == " "


def test_list_is_framed() -> None:
    text = render_task_list([_task("todo"), _task("done")])
    lines = text.splitlines()

    assert lines[0] == ""
    assert lines[1] == "=" * RULE_WIDTH
    assert lines[-1] == "=" * RULE_WIDTH
    assert text.count("[ID: 3]") == 2
