# tests/conftest.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from types import SimpleNamespace

import pytest

from taskpad.cli.bootstrap import create_initial_state
from taskpad.core.state import AppState
from taskpad.tasks.task_repository import TaskRepository
from taskpad.tasks.task_store import TaskStore

from .fakes import FakeDisplay, FakeNotifier, FakeTextField, InMemoryStorage


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskpad-test",
        log_level="DEBUG",
        log_to_file=False,
        data_dir=tmp_path,
        storage_path=tmp_path / "local_storage.json",
        storage_key="tasks",
        storage_quota_bytes=64 * 1024,
    )


class StepClock:
    """Deterministic clock: each call advances by one second."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture()
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture()
def store(storage: InMemoryStorage) -> TaskStore:
    return TaskStore(storage, key="tasks")


@pytest.fixture()
def repo(store: TaskStore) -> TaskRepository:
    return TaskRepository(store, clock=StepClock())


@pytest.fixture()
def display() -> FakeDisplay:
    return FakeDisplay()


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def state(
    settings: SimpleNamespace,
    storage: InMemoryStorage,
    display: FakeDisplay,
    notifier: FakeNotifier,
) -> AppState:
    """AppState wired with in-memory storage and capturing UI fakes."""
    return create_initial_state(
        settings=settings,
        storage=storage,
        display=display,
        notifier=notifier,
        text_field=FakeTextField(),
    )
