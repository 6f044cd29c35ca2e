# tests/test_codec.py

from __future__ import annotations

import struct

import pytest

from todo_list.tasks.codec import CodecError, decode_tasks, encode_tasks
from todo_list.tasks.task_models import Task


def test_encode_layout_matches_bincode() -> None:
    blob = encode_tasks([Task(id=1, description="hi", completed=True)])

    expected = (
        struct.pack("<Q", 1)  # count
        + struct.pack("<Q", 1)  # id
        + struct.pack("<Q", 2)  # description length
        + b"hi"
        + b"\x01"
    )
    assert blob == expected


def test_empty_collection_is_just_a_zero_count() -> None:
    assert encode_tasks([]) == b"\x00" * 8
    assert decode_tasks(b"\x00" * 8) == []


def test_decode_preserves_order_and_unicode() -> None:
    tasks = [
        Task(id=1, description="купить молоко", completed=False),
        Task(id=2, description="", completed=True),
        Task(id=3, description="write report ✓", completed=False),
    ]
    assert decode_tasks(encode_tasks(tasks)) == tasks


@pytest.mark.parametrize(
    "blob",
    [
        b"",
        b"\x01\x00",
        struct.pack("<Q", 1) + struct.pack("<Q", 1),
        struct.pack("<Q", 1_000_000) + b"\x00" * 20,
    ],
    ids=["empty", "short-count", "truncated-task", "count-too-large"],
)
def test_decode_rejects_truncated_input(blob: bytes) -> None:
    with pytest.raises(CodecError):
        decode_tasks(blob)


def test_decode_rejects_invalid_bool_byte() -> None:
    blob = bytearray(encode_tasks([Task(id=1, description="x")]))
    blob[-1] = 2
    with pytest.raises(CodecError, match="bool"):
        decode_tasks(bytes(blob))


def test_decode_rejects_trailing_bytes() -> None:
    with pytest.raises(CodecError, match="trailing"):
        decode_tasks(encode_tasks([Task(id=1, description="x")]) + b"\x00")


def test_decode_rejects_invalid_utf8() -> None:
    blob = struct.pack("<QQQ", 1, 1, 1) + b"\xff" + b"\x00"
    with pytest.raises(CodecError, match="utf-8"):
        decode_tasks(blob)


@pytest.mark.parametrize(
    "task",
    [
        Task(id=-1, description="negative"),
        Task(id=2**64, description="too big"),
        Task(id=1, description="\ud800"),
    ],
    ids=["negative-id", "id-overflow", "lone-surrogate"],
)
def test_encode_rejects_unrepresentable_values(task: Task) -> None:
    with pytest.raises(CodecError):
        encode_tasks([task])
