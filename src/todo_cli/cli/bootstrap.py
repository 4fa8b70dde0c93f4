# src/todo_cli/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- loads the task list from the data file (or starts empty),
- wires the store into AppState,
- saves the task list on the way out.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_errors import FileError, SerializationError
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]


def load_task_store(
    path: str | Path,
    *,
    store_cls: type[TaskStore] = TaskStore,
    emit: Emitter | None = None,
) -> TaskRepo:
    """
    Load the task list, falling back to an empty one.

    A missing file is the normal first-run case and is not reported.
    An unreadable or malformed file is reported through `emit` and logged.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No task file at %s; starting empty.", path)
        return store_cls()

    try:
        store = store_cls.load(path)
    except (FileError, SerializationError) as e:
        logger.warning("Could not load tasks from %s: %s", path, e)
        if emit:
            emit(f"⚠️  Could not load tasks: {e}")
        return store_cls()

    if emit and not store.is_empty():
        emit(f"✅ Loaded {store.count()} task(s) from {path}")
    return store


def create_initial_state(*, settings=None, emit: Emitter | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    tasks_path = Path(settings.tasks_path)
    return AppState(
        settings=settings,
        task_store=load_task_store(tasks_path, emit=emit),
        tasks_path=tasks_path,
    )


def save_task_store(state: AppState) -> str:
    """Save once and describe the outcome; never raises for I/O or encoding failures."""
    try:
        state.task_store.save(state.tasks_path)
    except (FileError, SerializationError) as e:
        logger.error("Failed to save tasks to %s: %s", state.tasks_path, e)
        return f"⚠️  Failed to save tasks: {e}"
    return "✅ Tasks saved successfully!"
