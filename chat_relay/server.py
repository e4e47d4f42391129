"""
Process bootstrap: validate configuration, then serve the app with uvicorn.
Exits with status 1 when required configuration (GROQ_API_KEY) is missing.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from pydantic import ValidationError

logger = logging.getLogger("chat_relay")


def main() -> None:
    """Console entry point: validate settings, then serve the app with uvicorn."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        from chat_relay.core.config import settings
        from chat_relay.main import app
    except ValidationError as exc:
        logger.critical("Invalid configuration, refusing to start (is GROQ_API_KEY set in .env?): %s", exc)
        sys.exit(1)

    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
