# src/task_cli/tasks/errors.py

"""
Error taxonomy.

"Task not found" is not an error: store mutations return False for it.
OS-level failures (permissions, disk) are never wrapped and reach the caller
as the underlying OSError.
"""

from __future__ import annotations

from collections.abc import Iterable


class TaskCliError(Exception):
    """Base class for every error this package raises on purpose."""


class ValidationError(TaskCliError, ValueError):
    """A status value outside the allowed set."""

    def __init__(self, allowed: Iterable[str]) -> None:
        self.allowed: tuple[str, ...] = tuple(allowed)
        super().__init__(f"Invalid status. Must be one of: {', '.join(self.allowed)}")


class FormatError(TaskCliError, ValueError):
    """The tasks file exists but its content is not a valid task list."""

    def __init__(self, message: str = "Invalid tasks file format") -> None:
        super().__init__(message)


class UsageError(TaskCliError):
    """Command line is missing a required argument."""


class UnknownCommandError(UsageError):
    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available: tuple[str, ...] = tuple(available)
        super().__init__(
            f"Invalid command: {name}. Available commands: {', '.join(self.available)}"
        )
