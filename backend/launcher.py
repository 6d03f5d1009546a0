"""UniCalc launcher: starts the API server."""

from __future__ import annotations

import logging
import socket

import uvicorn

from unicalc.config import settings
from unicalc.logging_config import setup_logging

logger = logging.getLogger("unicalc.launcher")


def find_free_port() -> int:
    """Find a free TCP port to avoid conflicts."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind((settings.host, 0))
        return s.getsockname()[1]


def main() -> None:
    setup_logging(settings.log_level, settings.log_file)
    port = settings.port or find_free_port()
    logger.info("Starting %s on http://%s:%d", settings.app_name, settings.host, port)

    uvicorn.run(
        "unicalc.main:app",
        host=settings.host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
