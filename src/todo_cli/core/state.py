# src/todo_cli/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .ports import TaskRepo


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    # The one task list owned by the session.
    task_store: TaskRepo
    tasks_path: Path
