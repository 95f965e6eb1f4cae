# src/taskpad/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStorage
from ..storage import StorageError
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_KEY = "tasks"


class TaskStore:
    """
    Whole-list task persistence over a key-value storage.

    The full list lives as one JSON array under a single key.
    - read() never raises: missing/malformed data reads as []
    - write() never raises: failures are logged and reported as False
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = DEFAULT_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def read(self) -> list[Task]:
        try:
            raw = self._storage.get_item(self._key)
        except Exception:
            logger.exception("Failed to get tasks key=%s; treating as empty.", self._key)
            return []

        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Stored tasks under key=%s are not valid JSON; treating as empty.", self._key)
            return []

        if not isinstance(data, list):
            logger.warning("Stored tasks under key=%s are not a JSON array; treating as empty.", self._key)
            return []

        tasks: list[Task] = []
        for item in data:
            task = Task.from_dict(item)
            if task is None:
                logger.warning("Skipping malformed task entry: %r", item)
                continue
            tasks.append(task)
        return tasks

    def write(self, tasks: Iterable[Task]) -> bool:
        try:
            blob = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)
        except (TypeError, ValueError, AttributeError):
            logger.exception("Failed to serialize tasks for key=%s.", self._key)
            return False

        try:
            self._storage.set_item(self._key, blob)
        except StorageError as e:
            logger.error("Error storing tasks list key=%s: %s", self._key, e)
            return False
        except Exception:
            logger.exception("Unexpected storage failure key=%s.", self._key)
            return False
        return True
