# src/todo_list/host.py

"""
Minimal execution host.

Runs one entry point per call against a StorageTransaction: writes reach
the backend only if the entry point returns normally. All failures leave
as StdError with a human-readable message.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from . import contract
from .contract import Response
from .core.ports import Storage
from .errors import ContractError, StdError, to_std_error
from .msg import (
    ExecuteMsg,
    InstantiateMsg,
    QueryMsg,
    RawMsg,
    parse_execute_msg,
    parse_instantiate_msg,
    parse_query_msg,
)
from .storage.memory import StorageTransaction

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Host:
    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    @property
    def storage(self) -> Storage:
        return self._storage

    def _run(self, name: str, fn: Callable[[Storage], T]) -> T:
        tx = StorageTransaction(self._storage)
        try:
            result = fn(tx)
        except (ContractError, StdError) as e:
            tx.discard()
            logger.info("%s failed: %s", name, e)
            raise to_std_error(e) from e
        except Exception:
            tx.discard()
            logger.exception("%s crashed", name)
            raise
        tx.commit()
        return result

    def instantiate(self, msg: InstantiateMsg | RawMsg | None = None) -> Response:
        if msg is None:
            msg = InstantiateMsg()
        elif not isinstance(msg, InstantiateMsg):
            msg = parse_instantiate_msg(msg)
        parsed = msg
        return self._run("instantiate", lambda s: contract.instantiate(s, parsed))

    def execute(self, msg: ExecuteMsg | RawMsg) -> Response:
        parsed = msg if isinstance(msg, ExecuteMsg) else parse_execute_msg(msg)
        return self._run(f"execute {type(parsed).__name__}", lambda s: contract.execute(s, parsed))

    def query(self, msg: QueryMsg | RawMsg) -> bytes:
        parsed = msg if isinstance(msg, QueryMsg) else parse_query_msg(msg)
        return self._run(f"query {type(parsed).__name__}", lambda s: contract.query(s, parsed))

    def query_json(self, msg: QueryMsg | RawMsg) -> Any:
        return json.loads(self.query(msg))
