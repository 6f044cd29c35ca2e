# src/todo_list/contract.py

"""
Entry points: instantiate, execute (AddTask / CompleteTask) and query (GetTasks).

Every call loads the whole collection, applies at most one mutation and
writes the whole collection back.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from .core.ports import Storage
from .errors import TaskNotFound
from .msg import AddTask, CompleteTask, ExecuteMsg, GetTasks, InstantiateMsg, QueryMsg
from .tasks.task_models import Task, TaskResponse
from .tasks.task_store import load_tasks, save_tasks
from .versioning import CONTRACT_NAME, CONTRACT_VERSION, set_contract_version

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Response:
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def add_attribute(self, key: str, value: Any) -> Response:
        self.attributes.append((key, str(value)))
        return self

    def attribute(self, key: str) -> str | None:
        for k, v in self.attributes:
            if k == key:
                return v
        return None


def to_json_binary(value: Any) -> bytes:
    if hasattr(value, "to_dict"):
        value = value.to_dict()
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def instantiate(storage: Storage, msg: InstantiateMsg) -> Response:
    set_contract_version(storage, CONTRACT_NAME, CONTRACT_VERSION)
    return Response()


def execute(storage: Storage, msg: ExecuteMsg) -> Response:
    if isinstance(msg, AddTask):
        return execute_add_task(storage, msg.description)
    if isinstance(msg, CompleteTask):
        return execute_complete_task(storage, msg.id)
    raise TypeError(f"unsupported execute message: {type(msg).__name__}")


def execute_add_task(storage: Storage, description: str) -> Response:
    tasks = load_tasks(storage)
    task = Task(id=len(tasks) + 1, description=description, completed=False)
    tasks.append(task)
    save_tasks(storage, tasks)
    logger.info("Task added id=%s total=%s", task.id, len(tasks))
    return (
        Response()
        .add_attribute("method", "execute_add_task")
        .add_attribute("task_count", len(tasks))
    )


def execute_complete_task(storage: Storage, task_id: int) -> Response:
    tasks = load_tasks(storage)
    task = next((t for t in tasks if t.id == task_id), None)
    if task is None:
        logger.info("Complete requested for unknown task id=%s", task_id)
        raise TaskNotFound(task_id)

    # Completing an already completed task rewrites the same state.
    task.completed = True
    save_tasks(storage, tasks)
    logger.info("Task completed id=%s", task_id)
    return (
        Response()
        .add_attribute("method", "execute_complete_task")
        .add_attribute("completed_task_id", task_id)
    )


def query(storage: Storage, msg: QueryMsg) -> bytes:
    if isinstance(msg, GetTasks):
        return to_json_binary(query_tasks(storage))
    raise TypeError(f"unsupported query message: {type(msg).__name__}")


def query_tasks(storage: Storage) -> TaskResponse:
    tasks = load_tasks(storage)
    logger.debug("Query tasks total=%d", len(tasks))
    return TaskResponse(tasks=tasks)
