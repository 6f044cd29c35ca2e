# src/todo_list/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then either runs the arguments as a
single slash-command or starts the interactive console.

    todo-list add buy milk
    todo-list done 1
    todo-list list
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..logging_setup import setup_logging
from .commands import registry as command_registry
from .console import run_console_loop

logger = logging.getLogger(__name__)


def _shutdown(state) -> None:
    storage = getattr(state, "storage", None)
    if storage is not None and hasattr(storage, "close"):
        storage.close()


def run_once(state, argv: Sequence[str]) -> int:
    line = " ".join(argv)
    if not line.startswith("/"):
        line = "/" + line
    reply = command_registry.handle(state, line)
    if reply is None:
        return 2
    print(reply)
    return 1 if reply.startswith(("Error:", "Unknown command", "Usage:")) else 0


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    # one-shot runs print their own result; keep the console quiet
    if argv:
        console_level = max(console_level, logging.WARNING)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)
    state = create_initial_state(settings=settings)

    try:
        if argv:
            return run_once(state, argv)
        run_console_loop(state)
        return 0
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    sys.exit(main())
