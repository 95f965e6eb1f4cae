# src/taskpad/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires storage, store, repository and UI pieces into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.console_connector import ConsoleDisplay, ConsoleNotifier, ConsoleTextField
from ..core.ports import Display, KeyValueStorage, Notifier, TextField
from ..core.state import AppState
from ..storage import JsonFileStorage
from ..tasks.task_repository import TaskRepository
from ..tasks.task_store import TaskStore
from ..ui.input_handler import InputHandler
from ..ui.renderer import Renderer, TaskEventDispatcher

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(
    *,
    settings=None,
    storage: KeyValueStorage | None = None,
    display: Display | None = None,
    notifier: Notifier | None = None,
    text_field: TextField | None = None,
) -> AppState:
    """
    Create AppState from the provided settings.

    Everything is injectable so tests can swap in fakes; anything omitted gets
    the console/file-backed default. If settings is None, falls back to
    get_settings().
    """
    if settings is None:
        settings = get_settings()

    if storage is None:
        _ensure_local_dirs(settings)
        storage = JsonFileStorage(
            settings.storage_path,
            quota_bytes=getattr(settings, "storage_quota_bytes", 5 * 1024 * 1024),
        )

    display = display if display is not None else ConsoleDisplay(title=getattr(settings, "app_name", "Tasks"))
    notifier = notifier if notifier is not None else ConsoleNotifier()
    text_field = text_field if text_field is not None else ConsoleTextField()

    store = TaskStore(storage, key=getattr(settings, "storage_key", "tasks"))
    repository = TaskRepository(store)
    renderer = Renderer(repository, display)
    dispatcher = TaskEventDispatcher(repository, renderer, notifier)
    input_handler = InputHandler(text_field, repository, renderer, notifier)

    logger.debug("AppState wired storage=%s key=%s", type(storage).__name__, store.key)
    return AppState(
        settings=settings,
        storage=storage,
        store=store,
        repository=repository,
        renderer=renderer,
        dispatcher=dispatcher,
        text_field=text_field,
        input_handler=input_handler,
    )
