# src/taskpad/tasks/task_repository.py

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import datetime
from typing import Any

from ..core.ports import TaskStoreLike
from .task_factory import create_task, normalize_text
from .task_models import FIELD_KEYS, Task

logger = logging.getLogger(__name__)

# Fields an update may touch; id is the identity and never merged.
_MERGEABLE = frozenset(FIELD_KEYS) - {"id"}
_JSON_TO_ATTR = {v: k for k, v in FIELD_KEYS.items()}


def _find_index(tasks: list[Task], task_id: int) -> int | None:
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    return None


def _validated_changes(task_id: int, fields: Any) -> dict[str, Any] | None:
    """Attribute-keyed changes ready for replace(), or None to reject the update."""
    if not isinstance(fields, Mapping):
        logger.warning("update_by_id: fields must be a mapping for id=%s", task_id)
        return None

    changes: dict[str, Any] = {}
    for key, value in fields.items():
        attr = _JSON_TO_ATTR.get(key, key)
        if attr not in _MERGEABLE:
            logger.warning("update_by_id: refusing field %r for id=%s", key, task_id)
            return None
        if attr == "text":
            value = normalize_text(value)
            if value is None:
                logger.info("update_by_id: blank text rejected for id=%s", task_id)
                return None
        elif attr == "completed":
            if not isinstance(value, bool):
                logger.warning("update_by_id: completed must be a bool for id=%s", task_id)
                return None
        elif attr == "created_at":
            if not isinstance(value, str):
                logger.warning("update_by_id: createdAt must be a string for id=%s", task_id)
                return None
        elif attr == "tags":
            if not isinstance(value, (list, tuple)):
                logger.warning("update_by_id: tags must be a list for id=%s", task_id)
                return None
            value = [str(t) for t in value]
        changes[attr] = value
    return changes


class TaskRepository:
    """
    CRUD facade over a TaskStore.

    Every operation is a full read-modify-write: it re-reads the list,
    mutates its own copy, and writes the whole list back. Nothing is cached
    between calls. Failures come back as False (or [] for list()).
    """

    def __init__(
        self,
        store: TaskStoreLike,
        *,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._store = store
        self._clock = clock

    def list(self) -> list[Task]:
        try:
            return self._store.read()
        except Exception:
            logger.exception("Task list read failed.")
            return []

    def add(self, text: Any) -> bool:
        now = self._clock() if self._clock is not None else None
        task = create_task(text, now=now)
        if task is None:
            logger.debug("Rejected task text=%r", text)
            return False

        try:
            tasks = self._store.read()
            if any(t.id == task.id for t in tasks):
                # Same millisecond as an existing task: keep ids unique and increasing.
                task = replace(task, id=max(t.id for t in tasks) + 1)
            tasks.append(task)
            ok = self._store.write(tasks)
        except Exception:
            logger.exception("Error saving task.")
            return False

        if ok:
            logger.info("Task added id=%s", task.id)
        return ok

    def remove_by_id(self, task_id: int) -> bool:
        try:
            tasks = self._store.read()
            idx = _find_index(tasks, task_id)
            if idx is None:
                logger.info("remove_by_id: no task id=%s", task_id)
                return False
            del tasks[idx]
            ok = self._store.write(tasks)
        except Exception:
            logger.exception("Error removing task id=%s.", task_id)
            return False

        if ok:
            logger.info("Task removed id=%s", task_id)
        return ok

    def update_by_id(self, task_id: int, fields: Mapping[str, Any]) -> bool:
        """
        Shallow-merge `fields` over the task with `task_id`.

        Keys may be attribute names (created_at) or stored JSON keys
        (createdAt). Only named fields change. Unknown keys, `id`, or a blank
        `text` reject the whole update without writing.
        """
        try:
            changes = _validated_changes(task_id, fields)
            if changes is None:
                return False

            tasks = self._store.read()
            idx = _find_index(tasks, task_id)
            if idx is None:
                logger.info("update_by_id: no task id=%s", task_id)
                return False
            tasks[idx] = replace(tasks[idx], **changes)
            ok = self._store.write(tasks)
        except Exception:
            logger.exception("Error updating task id=%s.", task_id)
            return False

        if ok:
            logger.info("Task updated id=%s fields=%s", task_id, sorted(changes))
        return ok

    def toggle_completed(self, task_id: int) -> bool:
        current = next((t for t in self.list() if t.id == task_id), None)
        if current is None:
            return False
        return self.update_by_id(task_id, {"completed": not current.completed})
