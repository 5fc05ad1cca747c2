"""Structured logging configuration.

Sets up the root handler and the level of the ``promptlab`` package logger
from ``Settings.log_level``.
"""

import logging
import sys
from collections.abc import Iterable

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers held at WARNING whatever the application level
QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def resolve_level(level: str | int) -> int:
    """Translate a level name or number into a logging constant.

    Names are case-insensitive; unknown names resolve to INFO.
    """
    if isinstance(level, int):
        return level
    numeric = logging.getLevelName(level.strip().upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def configure_logging(
    level: str | int = "INFO", quiet_loggers: Iterable[str] = QUIET_LOGGERS
) -> int:
    """Configure logging for the application.

    The root handler is only installed if none exists yet, but the
    ``promptlab`` logger level is always applied.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL) or number
        quiet_loggers: Logger names to raise to WARNING

    Returns:
        The numeric level applied to the ``promptlab`` logger
    """
    numeric_level = resolve_level(level)

    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("promptlab").setLevel(numeric_level)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    return numeric_level
