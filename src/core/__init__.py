"""Core utilities shared by every event-emitter-codegen module."""

from .log import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
