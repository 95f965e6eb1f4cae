# tests/test_task_factory.py

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from taskpad.tasks.task_factory import create_task, iso_timestamp, normalize_text


@pytest.mark.parametrize("text", ["Buy milk", "  padded  ", "\tcall mom\n", "x"])
def test_create_task_trims_and_defaults(text: str) -> None:
    task = create_task(text)
    assert task is not None
    assert task.text == text.strip()
    assert task.completed is False
    assert task.tags == []


@pytest.mark.parametrize("text", ["", " ", "\t\n  ", None, 42, ["a"]])
def test_create_task_rejects_blank_and_non_strings(text) -> None:
    assert create_task(text) is None


def test_create_task_uses_injected_clock_for_id_and_timestamp() -> None:
    now = datetime(2024, 3, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)
    task = create_task("write report", now=now)
    assert task is not None
    assert task.id == 1709296245123
    assert task.created_at == "2024-03-01T12:30:45.123Z"


def test_iso_timestamp_converts_to_utc() -> None:
    from datetime import timedelta

    local = datetime(2024, 3, 1, 14, 0, 0, tzinfo=timezone(timedelta(hours=2)))
    assert iso_timestamp(local) == "2024-03-01T12:00:00.000Z"


def test_normalize_text() -> None:
    assert normalize_text("  a b  ") == "a b"
    assert normalize_text("   ") is None
    assert normalize_text(None) is None
