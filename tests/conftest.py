# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from fakes import MemoryStore, make_memory_store
from todo_cli.core.state import AppState
from todo_cli.tasks.task_models import TaskStatus
from todo_cli.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        log_to_file=False,
        prompt="> ",
        data_dir=tmp_path / "data",
        tasks_path=tmp_path / "tasks.json",
    )


@pytest.fixture()
def store() -> TaskStore:
    """[Todo, Completed, InProgress, Completed]"""
    s = TaskStore()
    for text in ("Buy milk", "Write report", "Call mom", "Pay rent"):
        s.add(text)
    s.update_status(2, TaskStatus.COMPLETED)
    s.update_status(3, TaskStatus.IN_PROGRESS)
    s.update_status(4, TaskStatus.COMPLETED)
    return s


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return AppState(
        settings=settings,
        task_store=TaskStore(),
        tasks_path=settings.tasks_path,
    )


@pytest.fixture()
def memory_store_cls() -> type[MemoryStore]:
    return make_memory_store()
