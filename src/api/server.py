"""Server entry point: ``meeting-agent`` or ``python -m src.api.server``."""

from __future__ import annotations

import logging

import uvicorn

from src.config import get_settings


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger(__name__)
    logger.info("AI Meeting Agent Server starting on port %d", settings.port)
    logger.info("WebSocket endpoint: ws://localhost:%d/listen", settings.port)
    uvicorn.run("src.api.main:app", host=settings.api_host, port=settings.port)


if __name__ == "__main__":
    main()
