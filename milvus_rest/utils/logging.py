"""Logging configuration for applications using milvus-rest.

Call :func:`setup_logging` once at application startup.  The level is read
from the ``LOG_LEVEL`` configuration key (default ``"INFO"``) unless one is
passed explicitly.

The ``milvus_rest`` logger always gets the requested level, even when the
host application has already configured the root logger.  ``httpx`` and
``httpcore`` log every request at INFO and are clamped to WARNING.
"""

import logging
import sys
from typing import Optional

from milvus_rest.config import get_settings

#: Name of the package logger every module logger hangs off.
LOGGER_NAME = "milvus_rest"


def resolve_level(name: str) -> int:
    """Map a level name such as ``"debug"`` to its number (INFO if unknown)."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Configure logging for the client and return the package logger.

    Args:
        level: Level name overriding ``LOG_LEVEL`` (e.g. ``"DEBUG"``).

    ``basicConfig`` only installs a stdout handler when the root logger has
    none, so calling this inside an application that already set up logging
    changes nothing but the ``milvus_rest`` and third-party levels.
    """
    settings = get_settings()
    level_value = resolve_level(level or settings.log_level)

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level_value)

    # Suppress chatty third-party loggers
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger
