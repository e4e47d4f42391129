"""
Provide application-wide dependency providers for conversation memory and the
completion provider client.
Both are created lazily once per process and reused by every request.
"""

from typing import Optional

from chat_relay.core.config import settings
from chat_relay.memory.buffer import MemoryBuffer
from chat_relay.services.llm_client import LLMClient


# Memory: one window shared by every caller of this process
_memory: Optional[MemoryBuffer] = None


def get_memory() -> MemoryBuffer:
    """Return the process-wide memory window."""
    global _memory
    if _memory is None:
        _memory = MemoryBuffer(capacity=settings.memory_capacity)
    return _memory


# Provider: create a single client instance (lazy) and reuse it
_llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """
    Return a process-wide provider client.
    Reusing it keeps one HTTP connection pool for all requests.
    """
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient(
            api_key=settings.groq_api_key,
            base_url=settings.llm_base_url,
            model=settings.llm_model,
            timeout_seconds=settings.llm_timeout_seconds,
        )
    return _llm_client


async def close_llm_client() -> None:
    """Closes the shared provider client so shutdown leaves no open connections."""
    global _llm_client
    if _llm_client is not None:
        await _llm_client.aclose()
        _llm_client = None
