"""
FastAPI application entry point.

Configures application lifespan, logging, middleware, health check, and API routes.
Mounts the companion front-end's static files when a directory is configured.
"""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from chat_relay.api.endpoints import router as chat_router
from chat_relay.core.config import settings
from chat_relay.core.dependencies import close_llm_client
from chat_relay.core.errors import register_exception_handlers
from chat_relay.core.middleware import BodySizeLimitMiddleware
from chat_relay.models.schemas import HealthResponse

logger = logging.getLogger("chat_relay")

_STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context.

    Configures logging and announces the listening address and model on startup;
    closes the shared provider client on shutdown.
    """
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("%s running on http://localhost:%s", settings.app_name, settings.port)
    logger.info(
        "Model: %s | memory capacity: %d | structure enforcement: %s",
        settings.llm_model,
        settings.memory_capacity,
        "on" if settings.enforce_structure else "off",
    )

    yield

    await close_llm_client()
    logger.info("%s shutting down", settings.app_name)


def create_app() -> FastAPI:
    """Creates and configures the FastAPI application instance."""
    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=settings.max_body_bytes)

    register_exception_handlers(app)

    @app.get("/", response_model=HealthResponse)
    def health() -> HealthResponse:
        """Liveness probe; never touches conversation memory."""
        return HealthResponse(
            service=settings.app_name,
            uptime=time.monotonic() - _STARTED_AT,
        )

    app.include_router(chat_router)

    if settings.static_dir:
        static_path = Path(settings.static_dir)
        if static_path.is_dir():
            app.mount("/static", StaticFiles(directory=static_path, html=True), name="static")
        else:
            logger.warning("STATIC_DIR %s is not a directory; static files disabled", static_path)

    return app


app = create_app()
