"""
Bounded in-memory conversation window.

Keeps the last N turns (oldest first) used as context for the next provider
call. There is no per-session keying: every caller sharing an instance reads
and extends the same window, so concurrent end users can see each other's
turns. Key instances by conversation id if isolation is ever needed.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List

from chat_relay.models.schemas import ChatTurn, Role

DEFAULT_CAPACITY = 6


class MemoryBuffer:
    """
    Fixed-capacity FIFO of chat turns.
    Appending past capacity evicts the oldest turn. Not locked; callers on the
    same event loop interleave their pushes freely.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1.")
        self._turns: Deque[ChatTurn] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._turns.maxlen or 0

    def push(self, role: Role, content: str) -> ChatTurn:
        """Append a turn, evicting from the front once capacity is reached."""
        turn = ChatTurn(role=role, content=content)
        self._turns.append(turn)
        return turn

    def read(self) -> List[ChatTurn]:
        """Return a snapshot of the window in chronological order."""
        return list(self._turns)

    def clear(self) -> None:
        self._turns.clear()

    def __len__(self) -> int:
        return len(self._turns)
