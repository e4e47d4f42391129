"""Unit tests for the bounded memory window."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from chat_relay.memory.buffer import MemoryBuffer


def test_read_returns_turns_oldest_first():
    buf = MemoryBuffer()
    buf.push("user", "hi")
    buf.push("assistant", "hello")

    assert [(t.role, t.content) for t in buf.read()] == [("user", "hi"), ("assistant", "hello")]


def test_eviction_is_fifo_at_capacity():
    buf = MemoryBuffer(capacity=6)
    for i in range(9):
        buf.push("user", f"m{i}")
        assert len(buf) <= 6

    assert [t.content for t in buf.read()] == ["m3", "m4", "m5", "m6", "m7", "m8"]


def test_read_is_a_snapshot():
    buf = MemoryBuffer(capacity=2)
    buf.push("user", "a")
    snapshot = buf.read()
    buf.push("user", "b")
    buf.push("user", "c")

    assert [t.content for t in snapshot] == ["a"]


def test_turns_are_immutable():
    buf = MemoryBuffer()
    turn = buf.push("user", "fixed")
    with pytest.raises(ValidationError):
        turn.content = "changed"


def test_unknown_role_is_rejected():
    buf = MemoryBuffer()
    with pytest.raises(ValidationError):
        buf.push("bot", "nope")
    assert len(buf) == 0


def test_clear_and_capacity():
    buf = MemoryBuffer(capacity=3)
    buf.push("user", "x")
    buf.clear()

    assert buf.capacity == 3
    assert buf.read() == []


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        MemoryBuffer(capacity=0)
