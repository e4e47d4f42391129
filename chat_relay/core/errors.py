"""
Error types and HTTP boundary handlers.

Every failure ends at the HTTP boundary as a JSON body of the form
{"reply": "<markdown text>"} plus a status code, so the front-end can render
errors the same way it renders model replies.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("chat_relay")

INVALID_REQUEST_REPLY = "## ⚠️ Invalid Request\n- Message missing or invalid"
PAYLOAD_TOO_LARGE_REPLY = "## ⚠️ Invalid Request\n- Message too large"
PROVIDER_FAILURE_REPLY = (
    "## ❌ Server Error\n"
    "- AI backend temporarily unavailable\n"
    "- Please click **Retry**"
)
UNEXPECTED_ERROR_REPLY = "## ❌ Unexpected Server Error\n- Please try again later"


class ProviderError(Exception):
    """Raised when the completion provider fails or returns something unusable."""


def reply_response(status_code: int, reply: str) -> JSONResponse:
    """Builds the {"reply": ...} JSON body every route and handler answers with."""
    return JSONResponse(status_code=status_code, content={"reply": reply})


def register_exception_handlers(app: FastAPI) -> None:
    """Installs the client-error and catch-all handlers on the application."""

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request to %s: %s", request.url.path, exc.errors())
        return reply_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_REPLY)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s", request.url.path)
        return reply_response(status.HTTP_500_INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_REPLY)
