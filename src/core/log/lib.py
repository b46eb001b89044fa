"""Core logging implementation for event-emitter-codegen."""

import logging
import sys
from typing import Optional

__all__ = ["get_logger", "setup_logging"]

DEFAULT_LOGGER_NAME = "event-emitter-codegen"


def setup_logging(level: int | str = logging.INFO, stream=sys.stderr) -> None:
    """Configure basic logging.

    Args:
        level: Logging level, as an int or a level name ("DEBUG", "INFO").
        stream: Output stream.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=stream,
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Named loggers are nested under the project logger so a single
    level applies to the whole generator.

    Args:
        name: Name of the logger.

    Returns:
        Logger instance.
    """
    if not name:
        return logging.getLogger(DEFAULT_LOGGER_NAME)
    return logging.getLogger(f"{DEFAULT_LOGGER_NAME}.{name}")
