# src/todo_list/errors.py

"""
Error taxonomy.

Core errors (ContractError and subclasses) are raised by the entry points.
The host converts them into StdError, its generic error carrying a
human-readable message.
"""

from __future__ import annotations


class ContractError(Exception):
    """Base class for errors produced by the task logic."""


class TaskNotFound(ContractError):
    def __init__(self, task_id: int) -> None:
        super().__init__("Task not found")
        self.task_id = task_id


class SerializationError(ContractError):
    """Encoding the task collection failed; nothing was written."""

    def __init__(self, source: Exception) -> None:
        super().__init__(f"Serialization error: {source}")
        self.source = source


class StdError(Exception):
    """Generic host-side error (message only)."""

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg

    @classmethod
    def generic_err(cls, msg: str) -> StdError:
        return cls(f"Generic error: {msg}")

    @classmethod
    def not_found(cls, kind: str) -> StdError:
        return cls(f"{kind} not found")

    @classmethod
    def parse_err(cls, target: str, msg: str) -> StdError:
        return cls(f"Error parsing into type {target}: {msg}")


def to_std_error(err: Exception) -> StdError:
    if isinstance(err, StdError):
        return err
    return StdError.generic_err(str(err))
