# src/taskpad/ui/renderer.py

"""
Projection of the stored task list into display rows, plus the single
delegated event handler that maps row events back to repository calls.

Rows carry their task id; there is no per-row callback state. A UI surface
turns a user action into a TaskEvent and hands it to TaskEventDispatcher.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from ..core.ports import Display, Notifier, TaskRepo

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TaskRow:
    task_id: int
    text: str
    completed: bool
    editing: bool = False


class Renderer:
    """Full clear-and-rebuild renderer; no diffing."""

    def __init__(self, repository: TaskRepo, display: Display) -> None:
        self._repository = repository
        self._display = display
        self._editing: set[int] = set()

    @property
    def editing(self) -> frozenset[int]:
        return frozenset(self._editing)

    def begin_edit(self, task_id: int) -> None:
        self._editing.add(task_id)

    def end_edit(self, task_id: int) -> None:
        self._editing.discard(task_id)

    def render(self) -> list[TaskRow]:
        tasks = self._repository.list()
        # Edit marks for tasks that no longer exist are dropped.
        self._editing &= {t.id for t in tasks}

        rows = [
            TaskRow(
                task_id=t.id,
                text=t.text,
                completed=t.completed,
                editing=t.id in self._editing,
            )
            for t in tasks
        ]

        self._display.clear()
        for row in rows:
            self._display.show_row(row)
        return rows


class TaskAction(StrEnum):
    TOGGLE = "toggle"
    REMOVE = "remove"
    BEGIN_EDIT = "begin_edit"
    COMMIT_EDIT = "commit_edit"
    CANCEL_EDIT = "cancel_edit"


@dataclass(frozen=True, slots=True)
class TaskEvent:
    action: TaskAction
    task_id: int
    value: str | None = None


class TaskEventDispatcher:
    """
    Delegated handler: (action, task_id) -> repository call -> render().

    Always re-renders after handling, so the display reflects the store even
    when the operation failed.
    """

    def __init__(self, repository: TaskRepo, renderer: Renderer, notifier: Notifier) -> None:
        self._repository = repository
        self._renderer = renderer
        self._notifier = notifier

    def dispatch(self, event: TaskEvent) -> bool:
        try:
            ok = self._handle(event)
        except Exception:
            logger.exception("Task event crashed: %s", event)
            ok = False
        self._renderer.render()
        return ok

    def _handle(self, event: TaskEvent) -> bool:
        task_id = event.task_id

        if event.action is TaskAction.TOGGLE:
            return self._repository.toggle_completed(task_id)

        if event.action is TaskAction.REMOVE:
            self._renderer.end_edit(task_id)
            return self._repository.remove_by_id(task_id)

        if event.action is TaskAction.BEGIN_EDIT:
            if not any(t.id == task_id for t in self._repository.list()):
                return False
            self._renderer.begin_edit(task_id)
            return True

        if event.action is TaskAction.CANCEL_EDIT:
            was_editing = task_id in self._renderer.editing
            self._renderer.end_edit(task_id)
            return was_editing

        if event.action is TaskAction.COMMIT_EDIT:
            value = (event.value or "").strip()
            if not value:
                self._notifier.alert("Task text cannot be empty.")
                return False
            self._renderer.end_edit(task_id)
            return self._repository.update_by_id(task_id, {"text": value})

        logger.warning("Unknown task action: %s", event.action)
        return False
