# src/todo_list/tasks/codec.py

"""
Binary encoding of the task collection.

Layout (little-endian, fixed-width integers, no version header):

    collection := u64(count) task*
    task       := u64(id) u64(len) utf8(description) u8(completed)

This is the default bincode layout for a sequence of (u64, String, bool)
records, so blobs written by other bincode users stay readable.
"""

from __future__ import annotations

import struct
from collections.abc import Sequence

from .task_models import Task

_U64 = struct.Struct("<Q")
_U8 = struct.Struct("<B")


class CodecError(ValueError):
    """Blob could not be encoded or decoded."""


def encode_tasks(tasks: Sequence[Task]) -> bytes:
    out = bytearray()
    try:
        out += _U64.pack(len(tasks))
        for task in tasks:
            desc = task.description.encode("utf-8")
            out += _U64.pack(task.id)
            out += _U64.pack(len(desc))
            out += desc
            out += _U8.pack(1 if task.completed else 0)
    except (struct.error, UnicodeEncodeError, AttributeError, TypeError) as e:
        raise CodecError(f"cannot encode task collection: {e}") from e
    return bytes(out)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._pos = 0

    def take(self, n: int) -> bytes:
        end = self._pos + n
        if end > len(self._data):
            raise CodecError(f"unexpected end of input at offset {self._pos} (wanted {n} bytes)")
        chunk = self._data[self._pos : end].tobytes()
        self._pos = end
        return chunk

    def u64(self) -> int:
        (value,) = _U64.unpack(self.take(_U64.size))
        return value

    def u8(self) -> int:
        (value,) = _U8.unpack(self.take(_U8.size))
        return value

    def remaining(self) -> int:
        return len(self._data) - self._pos


def decode_tasks(data: bytes) -> list[Task]:
    reader = _Reader(data)
    count = reader.u64()

    # Every task needs at least 17 bytes; reject absurd counts before allocating.
    if count * 17 > reader.remaining():
        raise CodecError(f"declared {count} tasks but only {reader.remaining()} bytes follow")

    tasks: list[Task] = []
    for _ in range(count):
        task_id = reader.u64()
        raw_desc = reader.take(reader.u64())
        try:
            description = raw_desc.decode("utf-8")
        except UnicodeDecodeError as e:
            raise CodecError(f"invalid utf-8 in description of task {task_id}") from e

        flag = reader.u8()
        if flag not in (0, 1):
            raise CodecError(f"invalid bool byte {flag:#x} for task {task_id}")

        tasks.append(Task(id=task_id, description=description, completed=flag == 1))

    if reader.remaining():
        raise CodecError(f"{reader.remaining()} trailing bytes after task collection")
    return tasks
