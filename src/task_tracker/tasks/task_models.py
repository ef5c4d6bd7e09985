# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - Task.status is a plain str, so values outside this set survive load/save.
    """

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


# Keys written to disk for the known fields (camelCase, as the file has always used).
_KNOWN_KEYS = ("id", "description", "status", "createdAt", "updatedAt")


def utc_now_iso() -> str:
    """Current UTC time as 'YYYY-MM-DDTHH:MM:SS.mmmZ'."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: str
    created_at: str
    updated_at: str

    # Unrecognized keys from the stored record, written back untouched.
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")
        if "id" not in raw:
            raise ValueError("task record is missing 'id'")
        task_id = raw["id"]
        # bool is an int subclass; floats and strings would be silently coerced by int().
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise ValueError(f"task record has invalid id {task_id!r}")

        return cls(
            id=task_id,
            description=str(raw.get("description") or ""),
            status=str(raw.get("status") or TaskStatus.TODO),
            created_at=str(raw.get("createdAt") or ""),
            updated_at=str(raw.get("updatedAt") or ""),
            extra={k: v for k, v in raw.items() if k not in _KNOWN_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.id,
            "description": self.description,
            "status": str(self.status),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        out.update(self.extra)
        return out
