# tests/test_commands.py

from __future__ import annotations

from taskpad.cli.commands import CommandRegistry, registry
from taskpad.connectors.console_connector import handle_line

from .fakes import FakeDisplay, FakeNotifier


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    seen: dict[str, object] = {}

    def h2(state, args):
        seen["h2"] = args
        return "h2"

    def h3(state, args, rest):
        seen["h3"] = rest
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    assert reg.handle(state, "/a x y") == "h2"
    assert reg.handle(state, "/BEE keep  two   spaces") == "h3"
    assert seen == {"h2": ["x", "y"], "h3": "keep  two   spaces"}


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_plain_line_adds_a_task(state, display: FakeDisplay) -> None:
    assert handle_line(state, "Buy milk") is None
    assert [r.text for r in display.rows] == ["Buy milk"]


def test_whitespace_line_alerts(state, notifier: FakeNotifier) -> None:
    handle_line(state, "   ")
    assert notifier.alerts
    assert state.repository.list() == []


def test_done_edit_rm_flow(state, display: FakeDisplay) -> None:
    handle_line(state, "Buy milk")
    (task,) = state.repository.list()

    assert handle_line(state, f"/done {task.id}") == ""
    assert display.rows[0].completed is True

    assert handle_line(state, f"/edit {task.id}") == ""
    assert display.rows[0].editing is True

    assert handle_line(state, f"/edit {task.id}   Buy oat  milk ") == ""
    assert display.rows[0].text == "Buy oat  milk"
    assert display.rows[0].editing is False
    assert display.rows[0].completed is True

    assert handle_line(state, f"/rm {task.id}") == ""
    assert display.rows == []
    assert state.repository.list() == []


def test_commands_report_bad_or_missing_ids(state) -> None:
    assert handle_line(state, "/done") == "Usage: /done <id>"
    assert handle_line(state, "/rm abc") == "Usage: /rm <id>"
    assert handle_line(state, "/done 12345") == "No task with id 12345."
    assert handle_line(state, "/edit 12345 text") == "No task with id 12345."
    assert handle_line(state, "/cancel 12345") == "Task 12345 is not being edited."


def test_status_and_list(state) -> None:
    handle_line(state, "a")
    handle_line(state, "b")
    (first, _) = state.repository.list()
    handle_line(state, f"/done {first.id}")

    status = handle_line(state, "/status") or ""
    assert "2 total, 1 done, 1 open" in status
    assert "key=tasks" in status

    assert handle_line(state, "/list") == ""


def test_list_on_empty_store(state) -> None:
    assert handle_line(state, "/ls") == "(no tasks yet)"


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/done", "/rm", "/edit", "/cancel", "/list", "/status"):
        assert name in text
