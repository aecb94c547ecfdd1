"""Tests for logging setup."""

import io
import logging

import pytest

from hyprhelp.utils.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("hyprhelp")
    handlers, level = list(logger.handlers), logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:

    def test_single_handler(self):
        setup_logging()
        setup_logging()

        assert len(logging.getLogger("hyprhelp").handlers) == 1

    def test_string_level(self):
        setup_logging("debug")

        assert logging.getLogger("hyprhelp").level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        setup_logging("LOUD")

        assert logging.getLogger("hyprhelp").level == logging.WARNING

    def test_closed_stream_from_earlier_call(self):
        """A later call must not touch a stream that was closed in between."""
        first = io.StringIO()
        setup_logging(logging.INFO, stream=first)
        first.close()

        second = io.StringIO()
        setup_logging(logging.INFO, stream=second)
        logging.getLogger("hyprhelp.keybinds").info("loaded")

        assert "loaded" in second.getvalue()
