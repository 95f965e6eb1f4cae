# src/taskpad/tasks/task_factory.py

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from .task_models import Task


def normalize_text(text: Any) -> str | None:
    """Trimmed task text, or None if `text` is not a non-blank string."""
    if not isinstance(text, str):
        return None
    trimmed = text.strip()
    return trimmed or None


def iso_timestamp(now: datetime) -> str:
    """UTC ISO 8601 with millisecond precision and a 'Z' suffix."""
    utc = now.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def create_task(text: Any, *, now: datetime | None = None) -> Task | None:
    """
    Build a fresh Task from raw user input.

    Returns None for invalid input (non-string, empty, whitespace-only).
    The id is the creation time in milliseconds since the epoch.
    """
    clean = normalize_text(text)
    if clean is None:
        return None

    if now is None:
        now = datetime.now(timezone.utc)

    return Task(
        id=int(now.timestamp() * 1000),
        text=clean,
        completed=False,
        created_at=iso_timestamp(now),
        tags=[],
    )
