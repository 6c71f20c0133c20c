# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_cli.tasks.task_store import TaskStore

from .fakes import StepClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the bootstrap and main().

    SimpleNamespace rather than config.Settings keeps tests independent of the
    real environment and any .env file.
    """
    return SimpleNamespace(
        app_name="task-cli",
        log_level="WARNING",
        log_file=None,
        tasks_file=tmp_path / "tasks.json",
    )


@pytest.fixture()
def tasks_file(settings: SimpleNamespace) -> Path:
    return settings.tasks_file


@pytest.fixture()
def store(tasks_file: Path) -> TaskStore:
    s = TaskStore(tasks_file)
    s.load()
    return s


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
