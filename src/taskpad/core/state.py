# src/taskpad/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_repository import TaskRepository
from ..tasks.task_store import TaskStore
from ..ui.input_handler import InputHandler
from ..ui.renderer import Renderer, TaskEventDispatcher
from .ports import KeyValueStorage, TextField


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    storage: KeyValueStorage
    store: TaskStore
    repository: TaskRepository
    renderer: Renderer
    dispatcher: TaskEventDispatcher
    text_field: TextField
    input_handler: InputHandler
