"""
Completion provider client wrapper.
Talks to Groq through its OpenAI-compatible Chat Completions endpoint and
turns every upstream failure into a ProviderError for the chat service.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from openai import AsyncOpenAI, OpenAIError

from chat_relay.core.config import settings
from chat_relay.core.errors import ProviderError
from chat_relay.services.prompt_builder import MessageLike

logger = logging.getLogger("llm_client")


class LLMClient:
    """
    Thin async wrapper around an OpenAI-compatible Chat Completions API.
    Issues exactly one request per call: SDK retries are disabled and only the
    SDK's transport timeout applies.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: str = "llama-3.1-8b-instant",
        timeout_seconds: float = 60.0,
        client: Optional[Any] = None,
    ) -> None:
        self._model = model
        self._client = client or AsyncOpenAI(
            api_key=api_key or settings.groq_api_key,
            base_url=base_url or settings.llm_base_url,
            timeout=timeout_seconds,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self._model

    async def complete(
        self,
        messages: List[MessageLike],
        temperature: float = 0.45,
        max_tokens: int = 900,
        top_p: float = 0.9,
    ) -> Optional[str]:
        """
        Execute a chat completion and return the first choice's content.
        Returns None when the provider answers without any content.
        Raises ProviderError on SDK, network or response-shape failures.
        """
        try:
            resp = await self._client.chat.completions.create(
                model=self._model,
                temperature=temperature,
                max_tokens=max_tokens,
                top_p=top_p,
                messages=messages,
            )
        except OpenAIError as exc:
            raise ProviderError(f"completion request failed: {exc}") from exc

        try:
            choices = resp.choices
        except AttributeError as exc:
            raise ProviderError("completion response has no choices field") from exc

        if not choices:
            logger.warning("Provider returned no choices for model %s", self._model)
            return None

        # A choice without a message counts as an empty answer
        message = getattr(choices[0], "message", None)
        return getattr(message, "content", None)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        close = getattr(self._client, "close", None)
        if close is not None:
            await close()
