"""
Outbound message assembly for the completion provider.

Consumes:
- An optional caller-supplied system prompt (already sanitized)
- The memory window, oldest first, including the latest user turn

Produces:
- The role-tagged message list sent to the chat completions API.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from chat_relay.models.schemas import ChatTurn

# {"role": "system"|"user"|"assistant", "content": "..."}
MessageLike = Dict[str, str]


def build_messages(system_prompt: Optional[str], history: Sequence[ChatTurn]) -> List[MessageLike]:
    """
    Builds the provider message list.

    Notes:
    - The caller's system prompt is the only persona; the server never adds one.
    - An empty system prompt (e.g. one that sanitized down to nothing) adds no entry.
    """
    messages: List[MessageLike] = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})

    messages.extend({"role": turn.role, "content": turn.content} for turn in history)
    return messages
