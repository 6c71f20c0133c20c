# src/task_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task store, runs one command and maps the
outcome to an exit status:
- 0 on success, including "Task not found"
- 1 on any TaskCliError or OSError (printed as a single "Error: ..." line)
"""

from __future__ import annotations

import logging
import sys

from ..config import get_settings
from ..logging_setup import resolve_level, setup_logging
from ..tasks.errors import TaskCliError
from .bootstrap import create_task_store
from .commands import HELP_COMMANDS, registry

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, *, settings=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    setup_logging(
        console_level=resolve_level(getattr(settings, "log_level", "WARNING")),
        log_file=getattr(settings, "log_file", None),
    )

    app_name = getattr(settings, "app_name", "task-cli")
    if not argv:
        print(f"Usage: {app_name} <command> [arguments]")
        print(registry.build_help())
        return 0

    # help needs no task file, so a broken one cannot block it
    if argv[0].lower() in HELP_COMMANDS:
        print(registry.build_help())
        return 0

    try:
        store = create_task_store(settings=settings)
        output = registry.handle(store, argv)
    except (TaskCliError, OSError) as e:
        logger.debug("Command failed argv=%s", argv, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
