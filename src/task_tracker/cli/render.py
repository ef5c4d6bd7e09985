# src/task_tracker/cli/render.py

from __future__ import annotations

from datetime import datetime

from ..tasks.task_models import Task, TaskStatus

RULE_WIDTH = 80

STATUS_GLYPHS: dict[str, str] = {
    TaskStatus.TODO: "⭕",
    TaskStatus.IN_PROGRESS: "🔄",
    TaskStatus.DONE: "✅",
}


def _ts_local(raw: str) -> str:
    """ISO timestamp -> local 'YYYY-MM-DD HH:MM:SS'; unparsable values are shown as-is."""
    try:
        dt = datetime.fromisoformat(raw)
    except ValueError:
        return raw
    return dt.astimezone().strftime("%Y-%m-%d %H:%M:%S")


def render_task(task: Task) -> str:
    glyph = STATUS_GLYPHS.get(task.status, STATUS_GLYPHS[TaskStatus.TODO])
    return "\n".join(
        [
            f"{glyph} [ID: {task.id}] {task.description}",
            f"   Status: {task.status.upper()} | Updated: {_ts_local(task.updated_at)}",
            "-" * RULE_WIDTH,
        ]
    )


def render_task_list(tasks: list[Task]) -> str:
    lines = ["", "=" * RULE_WIDTH]
    lines += [render_task(t) for t in tasks]
    lines += ["=" * RULE_WIDTH, ""]
    return "\n".join(lines)
