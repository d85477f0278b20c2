"""Entry point for serving the todo API with uvicorn."""

import logging
import os

import uvicorn

from .logging_utils import configure_logging
from .settings import get_settings

logger = logging.getLogger(__name__)


def get_port() -> int:
    """Return the port the server should bind to."""
    return int(os.getenv("PORT", "8080"))


def get_workers() -> int:
    """Return the number of workers to use for production server."""
    raw_value = os.getenv("WEB_CONCURRENCY", "1")
    try:
        workers = int(raw_value)
    except ValueError:
        logger.warning("Invalid WEB_CONCURRENCY value '%s'; defaulting to 1", raw_value)
        workers = 1
    return max(1, workers)


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    port = get_port()
    workers = get_workers()
    logger.info(
        "Starting on 0.0.0.0:%s (STORAGE=%s, WORKERS=%s)",
        port,
        settings.storage_backend,
        workers,
    )
    uvicorn.run("todo_api.main:app", host="0.0.0.0", port=port, workers=workers)


if __name__ == "__main__":
    main()
