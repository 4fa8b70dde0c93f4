# src/todo_cli/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .task_errors import EmptyDescriptionError, InvalidStatusError


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values are the tags written to the data file; user-facing labels live in
    STATUS_LABELS and accepted input spellings in STATUS_ALIASES.
    """

    TODO = "Todo"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, text: str) -> TaskStatus:
        """Parse user input (case-insensitive alias lookup)."""
        status = STATUS_ALIASES.get(text.strip().lower())
        if status is None:
            raise InvalidStatusError(text)
        return status

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_ALIASES: dict[str, TaskStatus] = {
    "todo": TaskStatus.TODO,
    "to-do": TaskStatus.TODO,
    "in-progress": TaskStatus.IN_PROGRESS,
    "inprogress": TaskStatus.IN_PROGRESS,
    "done": TaskStatus.COMPLETED,
    "completed": TaskStatus.COMPLETED,
}

STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "TODO",
    TaskStatus.IN_PROGRESS: "IN-PROGRESS",
    TaskStatus.COMPLETED: "DONE",
}


@dataclass(slots=True)
class Task:
    """
    A single tracked task.

    The description is trimmed and validated on construction; only the status
    is expected to change afterwards.
    """

    description: str
    status: TaskStatus = TaskStatus.TODO

    def __post_init__(self) -> None:
        text = (self.description or "").strip()
        if not text:
            raise EmptyDescriptionError()
        self.description = text

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    def to_record(self) -> dict[str, str]:
        return {"description": self.description, "status": self.status.value}

    def __str__(self) -> str:
        return f"{self.description} [{self.status.label}]"
