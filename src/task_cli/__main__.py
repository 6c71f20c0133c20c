# src/task_cli/__main__.py

from .cli.main import run

run()
