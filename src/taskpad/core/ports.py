from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and the UI surface swappable and makes testing easier.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from ..tasks.task_models import Task


class KeyValueStorage(Protocol):
    """
    Synchronous, durable string key-value store (localStorage-like).

    set_item may raise StorageError subclasses; get_item never does.
    """

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> None: ...
    def clear(self) -> None: ...


class TaskStoreLike(Protocol):
    """Whole-list persistence: read never raises, write reports success."""

    def read(self) -> list[Task]: ...
    def write(self, tasks: list[Task]) -> bool: ...


class TaskRepo(Protocol):
    def list(self) -> list[Task]: ...
    def add(self, text: str) -> bool: ...
    def remove_by_id(self, task_id: int) -> bool: ...
    def update_by_id(self, task_id: int, fields: Mapping[str, Any]) -> bool: ...
    def toggle_completed(self, task_id: int) -> bool: ...


class Display(Protocol):
    """
    Where rendered rows end up.

    The renderer always calls clear() once, then show_row() per task in order.
    """

    def clear(self) -> None: ...
    def show_row(self, row: Any) -> None: ...


class TextField(Protocol):
    """The input control the Input Handler reads from."""

    def get_value(self) -> str: ...
    def set_value(self, value: str) -> None: ...


class Notifier(Protocol):
    """Blocking, synchronous user notification (alert-like)."""

    def alert(self, message: str) -> None: ...
