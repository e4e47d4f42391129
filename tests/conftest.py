"""
Pytest fixtures and configuration for the test suite.

Sets up a per-test application with an isolated memory window and a fake
completion provider, overriding dependencies so no network calls are made.
"""

from __future__ import annotations

import os
from typing import List, Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

# Configure environment variables for test execution
os.environ["ENVIRONMENT"] = "test"
os.environ["DEBUG"] = "false"
os.environ["APP_NAME"] = "Chat Relay API (tests)"
os.environ["GROQ_API_KEY"] = os.environ.get("GROQ_API_KEY", "test-no-network")
os.environ["MEMORY_CAPACITY"] = "6"
os.environ["ENFORCE_STRUCTURE"] = "true"
os.environ.pop("STATIC_DIR", None)

# Import the application after environment variables are set
from chat_relay.main import create_app
from chat_relay.core.dependencies import get_llm_client, get_memory
from chat_relay.memory.buffer import MemoryBuffer


class FakeLLMClient:
    """Stands in for LLMClient; records every outbound message list."""

    def __init__(self) -> None:
        self.calls: List[dict] = []
        self.reply: Optional[str] = "**TEST_BOT_REPLY**"
        self.error: Optional[Exception] = None

    async def complete(
        self, messages, temperature: float = 0.45, max_tokens: int = 900, top_p: float = 0.9
    ) -> Optional[str]:
        self.calls.append(
            {
                "messages": list(messages),
                "temperature": temperature,
                "max_tokens": max_tokens,
                "top_p": top_p,
            }
        )
        if self.error is not None:
            raise self.error
        return self.reply

    async def aclose(self) -> None:
        pass


@pytest.fixture
def memory() -> MemoryBuffer:
    return MemoryBuffer(capacity=6)


@pytest.fixture
def fake_llm() -> FakeLLMClient:
    return FakeLLMClient()


@pytest_asyncio.fixture(scope="function")
async def test_client(memory, fake_llm):
    """
    Provides an AsyncClient bound to the ASGI app for test execution.
    Each test gets its own memory window and fake provider client.
    App exceptions are not re-raised so the catch-all handler can be asserted.
    """
    app = create_app()
    app.dependency_overrides[get_memory] = lambda: memory
    app.dependency_overrides[get_llm_client] = lambda: fake_llm

    async with LifespanManager(app):
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client
