"""
Chat API endpoint definitions.

Provides the /chat route: relays the caller's message and optional system
prompt to the completion provider with the shared memory window as context.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from chat_relay.core.dependencies import get_llm_client, get_memory
from chat_relay.core.errors import reply_response
from chat_relay.memory.buffer import MemoryBuffer
from chat_relay.models.schemas import ChatRequest, ChatResponse
from chat_relay.services.chat_service import ChatService
from chat_relay.services.llm_client import LLMClient

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
async def chat_endpoint(
    payload: ChatRequest,
    memory: MemoryBuffer = Depends(get_memory),
    llm_client: LLMClient = Depends(get_llm_client),
) -> JSONResponse:
    """
    Processes a chat turn.

    Workflow:
    - Sanitizes the message and system prompt.
    - Records the user turn in the memory window (kept on failure).
    - Calls the provider with system prompt + memory window.
    - Returns {"reply": ...} with 200, or a retry hint with 500 on provider failure.
    """
    service = ChatService(llm_client=llm_client, memory=memory)
    outcome = await service.handle_message(payload)
    return reply_response(outcome.status_code, outcome.reply)
