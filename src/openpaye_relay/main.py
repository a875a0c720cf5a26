"""Relay entrypoint: configure logging and serve the app with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from openpaye_relay.api.app import create_app
from openpaye_relay.core.config import AppSettings

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def main() -> None:
    settings = AppSettings()
    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info("MCP server running on port %s", settings.server.port)
    uvicorn.run(
        app,
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
