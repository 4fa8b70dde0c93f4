# src/todo_cli/tasks/task_errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for every recoverable task-list error."""


class InvalidIndexError(TodoError):
    def __init__(self) -> None:
        super().__init__("Index must start from 1")


class InvalidStatusError(TodoError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Status {text} not recognized. Use: todo, in-progress, done")


class IndexOutOfBoundError(TodoError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"No task exists at that index {index}")


class EmptyDescriptionError(TodoError, ValueError):
    def __init__(self) -> None:
        super().__init__("Task description cannot be empty")


class SerializationError(TodoError):
    def __init__(self, detail: object) -> None:
        super().__init__(f"Failed to serialize tasks: {detail}")


class FileError(TodoError):
    def __init__(self, detail: object) -> None:
        super().__init__(f"Failed to access file: {detail}")
