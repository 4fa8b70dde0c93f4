# src/todo_cli/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .task_errors import (
    EmptyDescriptionError,
    FileError,
    IndexOutOfBoundError,
    InvalidIndexError,
    SerializationError,
)
from .task_models import Task, TaskStatus

logger = logging.getLogger(__name__)

IndexedTask = tuple[int, Task]


class TaskStore:
    """
    In-memory ordered task list.

    Indexing:
    - every public operation takes and returns 1-based positions
    - the backing list stays 0-based and contiguous; removal shifts later tasks down

    Persistence:
    - save() writes a JSON array of {"description", "status"} records
    - load() builds a fresh store and never touches an existing one
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    # ---- low-level helpers ----

    def _validate_index(self, index: int) -> int:
        """Return the 0-based offset for a 1-based index or raise."""
        if index <= 0:
            raise InvalidIndexError()
        if index > len(self._tasks):
            raise IndexOutOfBoundError(index)
        return index - 1

    # ---- queries ----

    def count(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def list_tasks(self) -> list[IndexedTask]:
        return [(i, task) for i, task in enumerate(self._tasks, start=1)]

    def filter_by_status(self, status: TaskStatus) -> list[IndexedTask]:
        """Tasks with the given status, keeping their unfiltered positions."""
        return [(i, task) for i, task in self.list_tasks() if task.status == status]

    # ---- mutations ----

    def add(self, description: str) -> Task:
        task = Task(description)
        self._tasks.append(task)
        logger.debug("Task added index=%s description=%r", len(self._tasks), task.description)
        return task

    def update_status(self, index: int, new_status: TaskStatus) -> None:
        offset = self._validate_index(index)
        self._tasks[offset].status = new_status
        logger.debug("Task status updated index=%s status=%s", index, new_status.value)

    def update_status_from_text(self, index: int, status_text: str) -> None:
        self.update_status(index, TaskStatus.parse(status_text))

    def remove(self, index: int) -> Task:
        offset = self._validate_index(index)
        task = self._tasks.pop(offset)
        logger.debug("Task removed index=%s description=%r", index, task.description)
        return task

    def clear_completed(self) -> int:
        before = len(self._tasks)
        self._tasks = [t for t in self._tasks if not t.is_completed]
        removed = before - len(self._tasks)
        logger.debug("Cleared completed tasks removed=%s", removed)
        return removed

    # ---- serialization ----

    def to_records(self) -> list[dict[str, str]]:
        return [t.to_record() for t in self._tasks]

    @classmethod
    def from_records(cls, data: Any) -> TaskStore:
        if not isinstance(data, list):
            raise SerializationError("expected a JSON array of tasks")

        tasks: list[Task] = []
        for pos, raw in enumerate(data, start=1):
            if not isinstance(raw, dict):
                raise SerializationError(f"task #{pos} is not an object")
            description = raw.get("description")
            if not isinstance(description, str):
                raise SerializationError(f"task #{pos} has no description")
            try:
                status = TaskStatus(raw.get("status"))
            except ValueError as exc:
                raise SerializationError(
                    f"task #{pos} has unknown status {raw.get('status')!r}"
                ) from exc
            try:
                tasks.append(Task(description, status))
            except EmptyDescriptionError as exc:
                raise SerializationError(f"task #{pos} has an empty description") from exc
        return cls(tasks)

    def save(self, path: str | Path) -> None:
        path = Path(path)
        try:
            payload = json.dumps(self.to_records(), ensure_ascii=False, indent=2)
            data = payload.encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise SerializationError(exc) from exc

        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(data)
            os.replace(tmp, path)
        except OSError as exc:
            try:
                tmp.unlink(missing_ok=True)
            except OSError:
                logger.debug("Could not remove temp file %s", tmp, exc_info=True)
            raise FileError(exc) from exc
        logger.info("Saved tasks: %d to %s", len(self._tasks), path)

    @classmethod
    def load(cls, path: str | Path) -> TaskStore:
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise FileError(exc) from exc

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
            raise SerializationError(exc) from exc

        store = cls.from_records(data)
        logger.info("Loaded tasks: %d from %s", len(store), path)
        return store
