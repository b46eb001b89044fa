"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "event-emitter-codegen.test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "event-emitter-codegen"

    @pytest.mark.unit
    def test_named_logger_propagates_to_project_logger(self) -> None:
        """Named loggers are children of the project logger."""
        assert get_logger("emitter").parent is get_logger()

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Verify logging setup."""
        stream = StringIO()
        setup_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op when logging was already configured,
        # so only the API contract is checked here.
        assert logger.level == logging.NOTSET

    @pytest.mark.unit
    def test_setup_logging_accepts_level_name(self) -> None:
        """Level names are accepted as well as numeric levels."""
        setup_logging(level="debug", stream=StringIO())
        setup_logging(level="not-a-level", stream=StringIO())
