# src/todo_cli/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI layer.

The command handlers and the console loop depend on this Protocol instead of a
concrete backend, so a flat file, another store or an in-memory fake can stand in.
"""

from pathlib import Path
from typing import Protocol, TypeVar

from ..tasks.task_models import Task, TaskStatus

P = TypeVar("P", bound="Persistable")


class Persistable(Protocol):
    """Shared save/load capability of a task collection."""

    def save(self, path: str | Path) -> None: ...

    @classmethod
    def load(cls: type[P], path: str | Path) -> P: ...


class TaskRepo(Persistable, Protocol):
    # Queries
    def count(self) -> int: ...
    def is_empty(self) -> bool: ...
    def list_tasks(self) -> list[tuple[int, Task]]: ...
    def filter_by_status(self, status: TaskStatus) -> list[tuple[int, Task]]: ...

    # Mutations
    def add(self, description: str) -> Task: ...
    def update_status(self, index: int, new_status: TaskStatus) -> None: ...
    def update_status_from_text(self, index: int, status_text: str) -> None: ...
    def remove(self, index: int) -> Task: ...
    def clear_completed(self) -> int: ...
