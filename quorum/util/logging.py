"""Stdlib logging bridge.

Most code logs through logfire directly. Libraries (uvicorn, alembic,
asyncpg) and the few modules that hold a stdlib logger are routed into
logfire too, so everything lands in one place.
"""

import logging

import logfire

from quorum.config import Settings

QUIET_LOGGERS = ("sqlalchemy.engine", "websockets", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Send stdlib log records to logfire at the configured level."""
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level, handlers=[logfire.LogfireLoggingHandler()], force=True
    )
    # Request and query spans already cover these
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logfire.debug(
        "Stdlib logging routed to logfire", level=logging.getLevelName(level)
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
