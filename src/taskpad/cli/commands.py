# src/taskpad/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..ui.renderer import TaskAction, TaskEvent

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Handlers taking a third parameter also get the raw text after the
        command name (whitespace preserved).
        """
        if not line.startswith("/"):
            return None

        body = line[1:].strip()
        if not body:
            return "Empty command. Use /help to list available commands."

        name, _, rest = body.partition(" ")
        name = name.lower()
        args = rest.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 3

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, rest.strip())

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Anything else you type is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0])
    except ValueError:
        return None


def _exists(state: AppState, task_id: int) -> bool:
    return any(t.id == task_id for t in state.repository.list())


def _dispatch(state: AppState, action: TaskAction, task_id: int, value: str | None = None) -> bool:
    return state.dispatcher.dispatch(TaskEvent(action=action, task_id=task_id, value=value))


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    rows = state.renderer.render()
    return "" if rows else "(no tasks yet)"


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = state.repository.list()
    done = sum(1 for t in tasks if t.completed)
    location = getattr(state.storage, "path", "(in-memory)")
    return (
        "Status:\n"
        f"  Storage: {location} (key={state.store.key})\n"
        f"  Tasks: {len(tasks)} total, {done} done, {len(tasks) - done} open"
    )


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done <id>  -> toggle completion (checkbox)
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /done <id>"
    if not _exists(state, task_id):
        return f"No task with id {task_id}."
    if not _dispatch(state, TaskAction.TOGGLE, task_id):
        return "Could not save the change (see log)."
    return ""


def cmd_rm(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /rm <id>"
    if not _exists(state, task_id):
        return f"No task with id {task_id}."
    if not _dispatch(state, TaskAction.REMOVE, task_id):
        return "Could not save the change (see log)."
    return ""


def cmd_edit(state: AppState, args: list[str], rest: str) -> str:
    """
    /edit <id>         -> open the row for editing (pre-filled)
    /edit <id> <text>  -> commit new text
    """
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /edit <id> [new text]"
    if not _exists(state, task_id):
        return f"No task with id {task_id}."

    new_text = rest[len(args[0]):].strip()
    if not new_text:
        _dispatch(state, TaskAction.BEGIN_EDIT, task_id)
        return ""

    if not _dispatch(state, TaskAction.COMMIT_EDIT, task_id, new_text):
        return "Could not save the change (see log)."
    return ""


def cmd_cancel(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /cancel <id>"
    if not _dispatch(state, TaskAction.CANCEL_EDIT, task_id):
        return f"Task {task_id} is not being edited."
    return ""


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show storage location and task counts.")
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle"])
registry.register("rm", cmd_rm, help_text="Remove a task: /rm <id>.", aliases=["remove", "del"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id> [new text].")
registry.register("cancel", cmd_cancel, help_text="Leave edit mode: /cancel <id>.")
