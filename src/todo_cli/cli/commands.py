# src/todo_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from ..core.state import AppState
from ..tasks.task_errors import FileError, InvalidStatusError, SerializationError, TodoError
from ..tasks.task_models import Task, TaskStatus

CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")

STATUS_ICONS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "⚪",
    TaskStatus.IN_PROGRESS: "🔵",
    TaskStatus.COMPLETED: "✅",
}

RULE = "─" * 37


class CommandRegistry:
    """Verb registry used by the console loop (help, add, list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, tuple[str, str]] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        usage: str | None = None,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = (usage or key, help_text)
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a line like "update 2 done".
        Returns a reply string, or None for a blank line.
        """
        parts = line.split()
        if not parts:
            return None

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"❓ Unknown command: '{line}'\n💡 Type 'help' to see available commands"

        try:
            return handler(state, args, line)
        except TodoError as e:
            logger.debug("Command %s failed: %s", name, e)
            return f"Error: {e}"

    def build_help(self) -> str:
        rows = [(usage, text) for usage, text in self._help.values()]
        rows.append(("exit", "Save and exit"))
        width = max(len(usage) for usage, _ in rows) + 4

        lines = ["Commands:"]
        for usage, text in rows:
            lines.append(f"  {usage.ljust(width)}{text}")
        lines += [
            "",
            "Examples:",
            "  add Buy groceries",
            "  list done",
            "  update 1 in-progress",
            "  remove 2",
        ]
        return "\n".join(lines)


registry = CommandRegistry()


def is_exit_command(line: str) -> bool:
    parts = line.split()
    return bool(parts) and parts[0].lower() in EXIT_COMMANDS


def _parse_index(raw: str) -> int | None:
    """Task numbers are non-negative decimal integers; anything else is a usage error."""
    if not raw.isascii() or not raw.isdigit():
        return None
    return int(raw)


# ---- rendering ----


def format_task_line(index: int, task: Task) -> str:
    return f"{STATUS_ICONS[task.status]} {index}. {task}"


def render_task_list(tasks: Iterable[tuple[int, Task]], *, filtered: bool = False) -> str:
    rows = [format_task_line(i, t) for i, t in tasks]
    if not rows:
        if filtered:
            return "📝 No tasks with that status"
        return "📝 No tasks yet. Add one with: add <description>"
    return "\n".join(["📋 Your Tasks:", RULE, *rows, RULE])


# ---- handlers ----


def cmd_help(state: AppState, args: list[str], line: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str], line: str) -> str:
    """
    list            -> every task
    list <status>   -> only tasks with that status (original numbering kept)
    """
    if not args:
        return render_task_list(state.task_store.list_tasks())

    try:
        status = TaskStatus.parse(args[0])
    except InvalidStatusError as e:
        return f"⚠️  {e}\nUsage: list [todo|in-progress|done]"
    return render_task_list(state.task_store.filter_by_status(status), filtered=True)


def cmd_add(state: AppState, args: list[str], line: str) -> str:
    if not args:
        return "⚠️  Usage: add <task_description>"
    state.task_store.add(" ".join(args))
    return "✅ Task added successfully!"


def cmd_update(state: AppState, args: list[str], line: str) -> str:
    if len(args) < 2:
        return "⚠️  Usage: update <task_number> <new_status>"
    index = _parse_index(args[0])
    if index is None:
        return "⚠️  Invalid task number."
    state.task_store.update_status_from_text(index, args[1])
    return "✅ Task status updated successfully!"


def cmd_remove(state: AppState, args: list[str], line: str) -> str:
    if not args:
        return "⚠️  Usage: remove <task_number>"
    index = _parse_index(args[0])
    if index is None:
        return "⚠️  Invalid task number."
    task = state.task_store.remove(index)
    return f"✅ Removed: {task.description}"


def cmd_clear(state: AppState, args: list[str], line: str) -> str:
    count = state.task_store.clear_completed()
    if count > 0:
        return f"🗑️  Cleared {count} completed task(s)"
    return "⚠️  No completed tasks to clear"


def cmd_save(state: AppState, args: list[str], line: str) -> str:
    try:
        state.task_store.save(state.tasks_path)
    except (FileError, SerializationError) as e:
        logger.warning("Save to %s failed: %s", state.tasks_path, e)
        return f"Failed to save: {e}"
    return f"💾 Tasks saved to {state.tasks_path}"


registry.register("add", cmd_add, help_text="Add a new task", usage="add <description>")
registry.register(
    "list",
    cmd_list,
    help_text="List all tasks (or filter by status)",
    usage="list [status]",
    aliases=["ls"],
)
registry.register(
    "update",
    cmd_update,
    help_text="Update task status (todo/in-progress/done)",
    usage="update <num> <status>",
    aliases=["status"],
)
registry.register(
    "remove", cmd_remove, help_text="Remove a task", usage="remove <num>", aliases=["delete"]
)
registry.register("clear", cmd_clear, help_text="Remove all completed tasks")
registry.register("save", cmd_save, help_text="Save tasks to file")
registry.register("help", cmd_help, help_text="Show this help message")
