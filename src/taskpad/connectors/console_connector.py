# src/taskpad/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..ui.renderer import TaskRow

logger = logging.getLogger(__name__)


def format_row(row: TaskRow) -> str:
    box = "[x]" if row.completed else "[ ]"
    if row.editing:
        return f"{box} {row.task_id}  > {row.text}    (/edit {row.task_id} <new text> | /cancel {row.task_id})"
    return f"{box} {row.task_id}  {row.text}"


class ConsoleDisplay:
    """Line-oriented display: each render prints a header and one line per task."""

    def __init__(self, stream: TextIO | None = None, *, title: str = "Tasks") -> None:
        self._stream = stream
        self._title = title
        self.rows: list[TaskRow] = []

    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def clear(self) -> None:
        self.rows = []
        print(f"\n=== {self._title} ===", file=self._out())

    def show_row(self, row: TaskRow) -> None:
        self.rows.append(row)
        print(format_row(row), file=self._out())


class ConsoleNotifier:
    """Synchronous user-facing alerts, printed inline."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def alert(self, message: str) -> None:
        out = self._stream if self._stream is not None else sys.stdout
        print(f"[!] {message}", file=out, flush=True)


class ConsoleTextField:
    """Holds the last line typed at the prompt."""

    def __init__(self) -> None:
        self._value = ""

    def get_value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        self._value = value


def handle_line(state: AppState, line: str) -> str | None:
    """
    Route one console line.

    Slash commands go to the command registry; anything else is typed into
    the text field and submitted as a new task. Returns a reply to print.
    """
    if line.startswith("/"):
        try:
            return command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            return "Internal error while handling a command."

    state.text_field.set_value(line)
    state.input_handler.submit()
    return None


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    print("[CONSOLE] Type a task and press Enter to add it. Use /help for commands, /exit to quit.")

    # Initial load.
    rows = state.renderer.render()
    if not rows:
        print("(no tasks yet)")

    while True:
        try:
            line = input(">>> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not line:
            continue

        if line.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, line)
        if reply:
            print(reply)

    logger.info("Console connector finished.")
