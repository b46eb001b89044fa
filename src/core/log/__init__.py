"""Logging micro API for event-emitter-codegen."""

from .lib import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
