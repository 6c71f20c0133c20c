# tests/test_commands.py

from __future__ import annotations

import pytest

from task_cli.cli.commands import CommandRegistry, format_task, registry
from task_cli.tasks.errors import UnknownCommandError, UsageError, ValidationError
from task_cli.tasks.task_models import Task, TaskStatus
from task_cli.tasks.task_store import TaskStore

from .fakes import FakeTaskRepo


def _task(task_id: int, description: str, status: TaskStatus) -> Task:
    return Task(task_id, description, status, "2024-01-01T00:00:00.000Z", "2024-01-01T00:00:00.000Z")


def test_command_registry_routes_names_and_aliases() -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def h(store, args):
        seen.append(args)
        return "ok"

    reg.register("go", h, "go somewhere", aliases=["g"])

    repo = FakeTaskRepo()
    assert reg.handle(repo, ["go", "x", "y"]) == "ok"
    assert reg.handle(repo, ["G"]) == "ok"
    assert seen == [["x", "y"], []]
    assert reg.names() == ["go"]
    assert "go - go somewhere" in reg.build_help()


def test_command_registry_unknown_and_empty() -> None:
    reg = CommandRegistry()
    reg.register("a", lambda store, args: "a", "a")

    with pytest.raises(UnknownCommandError) as excinfo:
        reg.handle(FakeTaskRepo(), ["nope"])
    assert "nope" in str(excinfo.value)
    assert excinfo.value.available == ("a",)

    with pytest.raises(UsageError):
        reg.handle(FakeTaskRepo(), [])


def test_add_joins_description_words() -> None:
    repo = FakeTaskRepo()
    assert registry.handle(repo, ["add", "Buy", "oat", "milk"]) == "Task added successfully (ID: 42)"
    assert repo.calls == [("add_task", ("Buy oat milk",))]


@pytest.mark.parametrize(
    ("argv", "message"),
    [
        (["add"], "Description required"),
        (["update", "1"], "Task ID and description required"),
        (["delete"], "Task ID required"),
        (["mark-done"], "Task ID required"),
        (["mark-in-progress"], "Task ID required"),
        (["mark-todo"], "Task ID required"),
    ],
)
def test_missing_arguments_raise_usage_error(argv, message) -> None:
    repo = FakeTaskRepo()
    with pytest.raises(UsageError, match=message):
        registry.handle(repo, argv)
    assert repo.calls == []


def test_update_and_delete_report_found_and_not_found() -> None:
    repo = FakeTaskRepo(known_ids={"1"})
    assert registry.handle(repo, ["update", "1", "new", "text"]) == "Task updated successfully"
    assert registry.handle(repo, ["update", "9", "x"]) == "Task not found"
    assert registry.handle(repo, ["delete", "1"]) == "Task deleted successfully"
    assert registry.handle(repo, ["delete", "9"]) == "Task not found"
    assert repo.calls[0] == ("update_task", ("1", "new text"))


@pytest.mark.parametrize(
    ("command", "status", "message"),
    [
        ("mark-todo", TaskStatus.TODO, "Task marked as todo"),
        ("mark-in-progress", TaskStatus.IN_PROGRESS, "Task marked as in progress"),
        ("mark-done", TaskStatus.DONE, "Task marked as done"),
    ],
)
def test_mark_commands(command, status, message) -> None:
    repo = FakeTaskRepo(known_ids={"1"})
    assert registry.handle(repo, [command, "1"]) == message
    assert registry.handle(repo, [command, "2"]) == "Task not found"
    assert repo.calls[0] == ("mark_task", ("1", status))


def test_list_renders_glyph_id_description() -> None:
    repo = FakeTaskRepo(
        tasks=[
            _task(1, "Buy milk", TaskStatus.DONE),
            _task(2, "Walk dog", TaskStatus.TODO),
            _task(3, "Write tests", TaskStatus.IN_PROGRESS),
        ]
    )
    assert registry.handle(repo, ["list"]).splitlines() == [
        "[✓] 1: Buy milk",
        "[ ] 2: Walk dog",
        "[→] 3: Write tests",
    ]
    assert registry.handle(repo, ["list", "todo"]) == "[ ] 2: Walk dog"
    assert registry.handle(repo, ["list", "in-progress"]) == format_task(repo.tasks[2])


def test_list_empty() -> None:
    assert registry.handle(FakeTaskRepo(), ["list"]) == "No tasks found"


def test_list_invalid_status_propagates_validation_error(store: TaskStore) -> None:
    with pytest.raises(ValidationError):
        registry.handle(store, ["list", "someday"])


def test_help_lists_every_command() -> None:
    text = registry.handle(FakeTaskRepo(), ["--help"])
    for name in ("add", "update", "delete", "mark-todo", "mark-in-progress", "mark-done", "list", "help"):
        assert f"  {name} - " in text
