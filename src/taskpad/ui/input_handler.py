# src/taskpad/ui/input_handler.py

from __future__ import annotations

import logging

from ..core.ports import Notifier, TaskRepo, TextField
from .renderer import Renderer

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter a task."


class InputHandler:
    """Reads the text field and turns it into a new task."""

    def __init__(
        self,
        field: TextField,
        repository: TaskRepo,
        renderer: Renderer,
        notifier: Notifier,
    ) -> None:
        self._field = field
        self._repository = repository
        self._renderer = renderer
        self._notifier = notifier

    def submit(self) -> bool:
        text = self._field.get_value()
        if not text.strip():
            self._notifier.alert(EMPTY_INPUT_MESSAGE)
            return False

        ok = self._repository.add(text)
        if ok:
            self._field.set_value("")
        else:
            logger.warning("Task was not saved (storage failure?).")
        self._renderer.render()
        return ok
