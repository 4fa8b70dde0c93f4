# tests/test_console.py

from __future__ import annotations

import builtins
import json
from collections.abc import Iterable

import pytest

from fakes import FailingSaveStore
from todo_cli.connectors.console_connector import print_banner, run_console_loop
from todo_cli.tasks.task_store import TaskStore


def _feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[object]) -> None:
    """Replace input(): strings are returned, exceptions are raised, EOF at the end."""
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            item = next(it)
        except StopIteration:
            raise EOFError from None
        if isinstance(item, BaseException):
            raise item
        return str(item)

    monkeypatch.setattr(builtins, "input", fake_input)


def test_exit_saves_and_says_goodbye(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["add Buy milk", "", "   ", "list", "exit", "add never reached"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "⚪ 1. Buy milk [TODO]" in out
    assert "✅ Tasks saved successfully!" in out
    assert out.rstrip().endswith("👋 Goodbye!")
    data = json.loads(state.tasks_path.read_text("utf-8"))
    assert data == [{"description": "Buy milk", "status": "Todo"}]
    assert state.task_store.count() == 1


def test_quit_is_an_exit_alias(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["QUIT"])
    run_console_loop(state)
    assert "👋 Goodbye!" in capsys.readouterr().out
    assert state.tasks_path.exists()


def test_failed_save_on_exit_still_terminates(state, monkeypatch, capsys) -> None:
    state.task_store = FailingSaveStore()
    _feed(monkeypatch, ["add keep me", "exit"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "⚠️  Failed to save tasks: Failed to access file:" in out
    assert "👋 Goodbye!" in out
    assert state.task_store.save_calls == 1
    assert state.task_store.count() == 1


def test_unencodable_task_on_exit_is_reported_not_raised(state, monkeypatch, capsys) -> None:
    state.tasks_path.write_text('[{"description": "bad \\ud800", "status": "Todo"}]', "utf-8")
    state.task_store = TaskStore.load(state.tasks_path)
    _feed(monkeypatch, ["exit"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "⚠️  Failed to save tasks: Failed to serialize tasks:" in out
    assert out.rstrip().endswith("👋 Goodbye!")
    assert state.task_store.count() == 1


def test_unknown_command_echoes_input(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["Dance Wildly", "exit"])
    run_console_loop(state)
    assert "❓ Unknown command: 'Dance Wildly'" in capsys.readouterr().out


def test_read_error_is_reported_and_loop_continues(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, [OSError("stdin broke"), "add after error", "exit"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Error reading input" in out
    assert state.task_store.count() == 1


@pytest.mark.parametrize("stop", [EOFError(), KeyboardInterrupt()])
def test_end_of_input_saves_once(state, monkeypatch, capsys, stop) -> None:
    _feed(monkeypatch, ["add from pipe", stop])
    run_console_loop(state)
    assert "👋 Goodbye!" in capsys.readouterr().out
    assert json.loads(state.tasks_path.read_text("utf-8"))[0]["description"] == "from pipe"


def test_crashing_handler_does_not_stop_loop(state, monkeypatch, capsys) -> None:
    def broken(description: str):
        raise RuntimeError("boom")

    monkeypatch.setattr(state.task_store, "add", broken)
    _feed(monkeypatch, ["add x", "list", "exit"])

    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Internal error while handling a command." in out
    assert "No tasks yet" in out
    assert "👋 Goodbye!" in out


def test_banner(capsys) -> None:
    print_banner()
    out = capsys.readouterr().out
    assert "Welcome to the Todo CLI!" in out
    assert "Type 'exit' to quit the application." in out
