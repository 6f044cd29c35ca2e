# src/todo_list/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..errors import StdError
from ..msg import AddTask, GetTasks
from ..tasks.task_models import TaskResponse, TaskStatus
from ..versioning import get_contract_version

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console and one-shot CLI."""

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

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Host errors are turned into a one-line "Error: ..." reply.
        """
        if not line.startswith("/"):
            return None

        name, _, rest = line[1:].strip().partition(" ")
        if not name:
            return "Empty command. Use /help to list available commands."

        name = name.lower()
        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        args = rest.split()
        # /add and the raw JSON commands take the rest of the line verbatim.
        if name in _RAW_ARG_COMMANDS:
            args = [rest.strip()] if rest.strip() else []

        try:
            return handler(state, args)
        except StdError as e:
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()

_RAW_ARG_COMMANDS = {"add", "exec", "query"}


def _format_response(attributes: list[tuple[str, str]]) -> str:
    return ", ".join(f"{k}={v}" for k, v in attributes)


def format_tasks(resp: TaskResponse) -> str:
    if not resp.tasks:
        return "No tasks."
    lines = [f"Tasks ({len(resp.tasks)}):"]
    for t in resp.tasks:
        mark = "x" if t.status is TaskStatus.COMPLETED else " "
        lines.append(f"  [{mark}] {t.id}. {t.description}")
    return "\n".join(lines)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    description = args[0] if args else ""
    resp = state.host.execute(AddTask(description=description))
    return f"Added. {_format_response(resp.attributes)}"


def cmd_done(state: AppState, args: list[str]) -> str:
    # isdigit() alone accepts non-ASCII digits that int() rejects
    if len(args) != 1 or not (args[0].isascii() and args[0].isdigit()):
        return "Usage: /done <id>"
    try:
        task_id = int(args[0])
    except ValueError:
        # int() refuses very long digit strings
        return "Usage: /done <id>"
    # routed through message parsing so the u64 range check applies
    resp = state.host.execute({"complete_task": {"id": task_id}})
    return f"Completed. {_format_response(resp.attributes)}"


def cmd_list(state: AppState, args: list[str]) -> str:
    raw = state.host.query_json(GetTasks())
    return format_tasks(TaskResponse.from_dict(raw))


def cmd_version(state: AppState, args: list[str]) -> str:
    info = get_contract_version(state.storage)
    return f"{info.contract} {info.version}"


def cmd_exec(state: AppState, args: list[str]) -> str:
    """
    /exec {"add_task": {"description": "..."}}
    /exec {"complete_task": {"id": 1}}
    """
    if not args:
        return "Usage: /exec <json execute message>"
    resp = state.host.execute(args[0])
    return _format_response(resp.attributes) or "ok"


def cmd_query(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /query <json query message>"
    return state.host.query(args[0]).decode("utf-8")


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <description>.")
registry.register("done", cmd_done, help_text="Mark a task completed: /done <id>.", aliases=["complete"])
registry.register("list", cmd_list, help_text="List all tasks.", aliases=["ls"])
registry.register("version", cmd_version, help_text="Show stored contract name and version.")
registry.register("exec", cmd_exec, help_text="Send a raw JSON execute message.")
registry.register("query", cmd_query, help_text="Send a raw JSON query message.")
