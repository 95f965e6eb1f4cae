# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskpad.logging_setup import setup_logging


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    before, level = list(root.handlers), root.level
    yield
    # pytest re-attaches its own capture handlers per phase; drop only ours.
    for h in list(root.handlers):
        if h not in before and not type(h).__module__.startswith("_pytest"):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


def test_setup_logging_writes_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path, console_level=logging.WARNING)
    logging.getLogger("taskpad.tasks.task_repository").debug("hello %s", "file")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello file" in (tmp_path / "taskpad.log").read_text("utf-8")


def test_setup_logging_without_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path / "logs", log_to_file=False)
    assert not (tmp_path / "logs").exists()
    assert all(not isinstance(h, logging.FileHandler) for h in logging.getLogger().handlers)


def test_console_filter_hides_storage_chatter(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path, log_to_file=False)
    (console,) = logging.getLogger().handlers
    (flt,) = console.filters

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "m", None, None)

    assert flt.filter(rec("taskpad.cli.main", logging.INFO))
    assert not flt.filter(rec("taskpad.storage", logging.INFO))
    assert flt.filter(rec("taskpad.tasks.task_store", logging.WARNING))
    assert not flt.filter(rec("urllib3", logging.WARNING))
