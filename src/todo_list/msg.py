# src/todo_list/msg.py

"""
Incoming messages and their JSON wire form.

Variants are externally tagged with snake_case names:
    {"add_task": {"description": "buy milk"}}
    {"complete_task": {"id": 1}}
    {"get_tasks": {}}
Instantiate takes an empty object.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from .errors import StdError

_U64_MAX = 2**64 - 1


@dataclass(frozen=True, slots=True)
class InstantiateMsg:
    pass


@dataclass(frozen=True, slots=True)
class AddTask:
    description: str


@dataclass(frozen=True, slots=True)
class CompleteTask:
    id: int


@dataclass(frozen=True, slots=True)
class GetTasks:
    pass


ExecuteMsg = AddTask | CompleteTask
QueryMsg = GetTasks

RawMsg = bytes | str | dict[str, Any]


def _as_object(raw: RawMsg, target: str) -> dict[str, Any]:
    if isinstance(raw, dict):
        data: Any = raw
    elif not isinstance(raw, (bytes, bytearray, str)):
        raise StdError.parse_err(target, f"unsupported message type {type(raw).__name__}")
    else:
        try:
            data = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StdError.parse_err(target, f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise StdError.parse_err(target, "expected a JSON object")
    return data


def _single_variant(data: dict[str, Any], target: str) -> tuple[str, dict[str, Any]]:
    if len(data) != 1:
        raise StdError.parse_err(target, "expected exactly one variant")
    ((name, body),) = data.items()
    if not isinstance(body, dict):
        raise StdError.parse_err(target, f"variant `{name}` must be an object")
    return name, body


def _check_fields(body: dict[str, Any], allowed: set[str], target: str) -> None:
    extra = sorted(set(body) - allowed)
    if extra:
        raise StdError.parse_err(target, f"unknown field `{extra[0]}`")
    missing = sorted(allowed - set(body))
    if missing:
        raise StdError.parse_err(target, f"missing field `{missing[0]}`")


def parse_instantiate_msg(raw: RawMsg) -> InstantiateMsg:
    data = _as_object(raw, "InstantiateMsg")
    _check_fields(data, set(), "InstantiateMsg")
    return InstantiateMsg()


def parse_execute_msg(raw: RawMsg) -> ExecuteMsg:
    target = "ExecuteMsg"
    name, body = _single_variant(_as_object(raw, target), target)

    if name == "add_task":
        _check_fields(body, {"description"}, target)
        description = body["description"]
        if not isinstance(description, str):
            raise StdError.parse_err(target, "`description` must be a string")
        return AddTask(description=description)

    if name == "complete_task":
        _check_fields(body, {"id"}, target)
        task_id = body["id"]
        # bool is an int subclass; reject it explicitly
        if isinstance(task_id, bool) or not isinstance(task_id, int) or not 0 <= task_id <= _U64_MAX:
            raise StdError.parse_err(target, "`id` must be an unsigned 64-bit integer")
        return CompleteTask(id=task_id)

    raise StdError.parse_err(target, f"unknown variant `{name}`")


def parse_query_msg(raw: RawMsg) -> QueryMsg:
    target = "QueryMsg"
    name, body = _single_variant(_as_object(raw, target), target)
    if name == "get_tasks":
        _check_fields(body, set(), target)
        return GetTasks()
    raise StdError.parse_err(target, f"unknown variant `{name}`")
