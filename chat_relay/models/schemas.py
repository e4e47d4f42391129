"""
Pydantic schemas for chat API requests and responses.

Defines input validation for the relay's chat endpoint, the role-tagged turns
kept in memory, and the explicit outcome type returned by the chat service.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, StrictStr, field_validator

Role = Literal["system", "user", "assistant"]


class ChatTurn(BaseModel):
    """One role-tagged message in a conversation. Immutable once created."""
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str


class ChatRequest(BaseModel):
    """
    Request payload for the chat endpoint.

    Includes the user's message and an optional caller-supplied system prompt.
    Both must be real JSON strings; numbers and other types are rejected.
    """
    message: StrictStr
    system: Optional[StrictStr] = None

    @field_validator("message")
    @classmethod
    def _validate_message(cls, v: str) -> str:
        if not v:
            raise ValueError("message cannot be empty.")
        return v


class ChatResponse(BaseModel):
    """Response payload for the chat endpoint."""
    reply: str


class HealthResponse(BaseModel):
    status: Literal["ok"] = "ok"
    service: str
    uptime: float


class ChatOutcome(BaseModel):
    """
    Result of handling one chat turn.

    Carries the HTTP status to surface alongside the reply text, so provider
    failures travel as values instead of exceptions past the service.
    """
    status_code: int = 200
    reply: str

    @property
    def ok(self) -> bool:
        return self.status_code < 400
