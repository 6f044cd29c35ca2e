# src/todo_list/versioning.py

"""Contract name/version metadata, kept under its own key for migration tooling."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from . import __version__
from .core.ports import Storage
from .errors import StdError

logger = logging.getLogger(__name__)

CONTRACT_INFO_KEY = b"contract_info"
CONTRACT_NAME = "crates.io:todo-list"
CONTRACT_VERSION = __version__


@dataclass(frozen=True, slots=True)
class ContractVersion:
    contract: str
    version: str


def set_contract_version(storage: Storage, name: str, version: str) -> None:
    payload = json.dumps({"contract": name, "version": version}, separators=(",", ":"))
    storage.set(CONTRACT_INFO_KEY, payload.encode("utf-8"))
    logger.info("Contract version set contract=%s version=%s", name, version)


def get_contract_version(storage: Storage) -> ContractVersion:
    raw = storage.get(CONTRACT_INFO_KEY)
    if raw is None:
        raise StdError.not_found("ContractVersion")
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise StdError.parse_err("ContractVersion", str(e)) from e
    if (
        not isinstance(data, dict)
        or not isinstance(data.get("contract"), str)
        or not isinstance(data.get("version"), str)
    ):
        raise StdError.parse_err("ContractVersion", "expected {contract: str, version: str}")
    return ContractVersion(contract=data["contract"], version=data["version"])
