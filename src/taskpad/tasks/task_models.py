# src/taskpad/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Attribute name -> persisted JSON key.
FIELD_KEYS: dict[str, str] = {
    "id": "id",
    "text": "text",
    "completed": "completed",
    "created_at": "createdAt",
    "tags": "tags",
}


@dataclass(slots=True)
class Task:
    id: int
    text: str
    completed: bool = False
    created_at: str = ""
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "createdAt": self.created_at,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task | None:
        """
        Build a Task from a stored JSON object.

        Returns None for anything that cannot be a task
        (not an object, missing/invalid id, empty text).
        """
        if not isinstance(raw, dict):
            return None

        task_id = raw.get("id")
        # bool is an int subclass; JSON true is not an id.
        if isinstance(task_id, bool) or not isinstance(task_id, (int, float)):
            return None
        if isinstance(task_id, float) and not task_id.is_integer():
            return None

        text = raw.get("text")
        if not isinstance(text, str) or not text.strip():
            return None

        tags_raw = raw.get("tags")
        tags = [str(t) for t in tags_raw] if isinstance(tags_raw, list) else []

        # Only a JSON boolean counts; "false", 1, null and friends read as open.
        completed = raw.get("completed")
        created_at = raw.get("createdAt")
        return cls(
            id=int(task_id),
            text=text,
            completed=completed if isinstance(completed, bool) else False,
            created_at=created_at if isinstance(created_at, str) else "",
            tags=tags,
        )
