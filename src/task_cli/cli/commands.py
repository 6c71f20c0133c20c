# src/task_cli/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.ports import TaskRepo
from ..tasks.errors import UnknownCommandError, UsageError
from ..tasks.task_models import Task, TaskStatus

CommandHandler = Callable[[TaskRepo, list[str]], str]

logger = logging.getLogger(__name__)

NOT_FOUND = "Task not found"

HELP_COMMANDS = ("help", "-h", "--help")

STATUS_GLYPHS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "[ ]",
    TaskStatus.IN_PROGRESS: "[→]",
    TaskStatus.DONE: "[✓]",
}


class CommandRegistry:
    """Subcommand registry used by the entry point (add, list, mark-done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        return list(self._help)

    def handle(self, store: TaskRepo, argv: list[str]) -> str:
        """
        Run argv[0] as a command with the remaining items as arguments.
        Returns the text to print.
        """
        if not argv:
            raise UsageError("Command required")

        name = argv[0].lower()
        handler = self._handlers.get(name)
        if not handler:
            raise UnknownCommandError(argv[0], self.names())

        logger.debug("Dispatching command=%s nargs=%d", name, len(argv) - 1)
        return handler(store, argv[1:])

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def format_task(task: Task) -> str:
    return f"{STATUS_GLYPHS[task.status]} {task.id}: {task.description}"


def _require_id(args: list[str]) -> str:
    if not args:
        raise UsageError("Task ID required")
    return args[0]


def cmd_help(store: TaskRepo, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(store: TaskRepo, args: list[str]) -> str:
    if not args:
        raise UsageError("Description required")
    task_id = store.add_task(" ".join(args))
    return f"Task added successfully (ID: {task_id})"


def cmd_update(store: TaskRepo, args: list[str]) -> str:
    if len(args) < 2:
        raise UsageError("Task ID and description required")
    task_id, *parts = args
    if store.update_task(task_id, " ".join(parts)):
        return "Task updated successfully"
    return NOT_FOUND


def cmd_delete(store: TaskRepo, args: list[str]) -> str:
    if store.delete_task(_require_id(args)):
        return "Task deleted successfully"
    return NOT_FOUND


def _mark_command(status: TaskStatus, done_text: str) -> CommandHandler:
    def handler(store: TaskRepo, args: list[str]) -> str:
        if store.mark_task(_require_id(args), status):
            return done_text
        return NOT_FOUND

    handler.__name__ = f"cmd_mark_{status.name.lower()}"
    return handler


cmd_mark_todo = _mark_command(TaskStatus.TODO, "Task marked as todo")
cmd_mark_in_progress = _mark_command(TaskStatus.IN_PROGRESS, "Task marked as in progress")
cmd_mark_done = _mark_command(TaskStatus.DONE, "Task marked as done")


def cmd_list(store: TaskRepo, args: list[str]) -> str:
    """
    list         -> every task
    list <status> -> only tasks with that status (todo | in-progress | done)
    """
    status = args[0] if args else None
    tasks = store.list_tasks(status)
    if not tasks:
        return "No tasks found"
    return "\n".join(format_task(t) for t in tasks)


registry.register("add", cmd_add, help_text="Add a task: add <description>.")
registry.register("update", cmd_update, help_text="Change a description: update <id> <description>.")
registry.register("delete", cmd_delete, help_text="Delete a task: delete <id>.")
registry.register("mark-todo", cmd_mark_todo, help_text="Move a task back to todo: mark-todo <id>.")
registry.register(
    "mark-in-progress", cmd_mark_in_progress, help_text="Start a task: mark-in-progress <id>."
)
registry.register("mark-done", cmd_mark_done, help_text="Finish a task: mark-done <id>.")
registry.register(
    "list", cmd_list, help_text="List tasks: list [todo | in-progress | done]."
)
registry.register(
    "help", cmd_help, help_text="Show available commands.", aliases=list(HELP_COMMANDS[1:])
)
