"""
Chat service orchestrating one relay turn:
- Sanitize the user message and optional system prompt
- Record the user turn in the memory window
- Assemble the outbound messages and call the completion provider
- Optionally enforce markdown structure on the reply
- Record the assistant turn and return an explicit outcome
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import status

from chat_relay.core.config import settings
from chat_relay.core.errors import PROVIDER_FAILURE_REPLY
from chat_relay.memory.buffer import MemoryBuffer
from chat_relay.models.schemas import ChatOutcome, ChatRequest
from chat_relay.services.formatter import enforce_markdown_structure
from chat_relay.services.llm_client import LLMClient
from chat_relay.services.prompt_builder import build_messages
from chat_relay.services.sanitizer import sanitize

# Configure module logger
logger = logging.getLogger("chat_service")

EMPTY_RESPONSE_REPLY = "## ⚠️ AI Error\n- Empty response received"


class ChatService:
    """
    High-level service that handles the end-to-end chat flow.
    Owns no state of its own; the memory window and provider client are passed in.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        memory: MemoryBuffer,
        enforce_structure: Optional[bool] = None,
    ) -> None:
        self._llm = llm_client
        self._memory = memory
        self._enforce_structure = (
            settings.enforce_structure if enforce_structure is None else enforce_structure
        )

    async def handle_message(self, payload: ChatRequest) -> ChatOutcome:
        """
        Main entry point to process a validated request and produce an outcome.
        The user turn is recorded before the provider call and is kept even when
        the call fails.
        """
        user_message = sanitize(payload.message)
        system_prompt = sanitize(payload.system) if payload.system else None

        self._memory.push("user", user_message)
        messages = build_messages(system_prompt, self._memory.read())
        logger.debug(
            "Calling provider with %d messages (system prompt: %s)",
            len(messages),
            bool(system_prompt),
        )

        try:
            content = await self._llm.complete(
                messages,
                temperature=settings.llm_temperature,
                max_tokens=settings.llm_max_tokens,
                top_p=settings.llm_top_p,
            )
        except Exception:
            # ProviderError and anything else raised while awaiting the provider
            logger.exception("Chat completion failed")
            return ChatOutcome(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                reply=PROVIDER_FAILURE_REPLY,
            )

        reply = content or EMPTY_RESPONSE_REPLY
        if self._enforce_structure:
            reply = enforce_markdown_structure(reply)

        self._memory.push("assistant", reply)
        return ChatOutcome(status_code=status.HTTP_200_OK, reply=reply)
