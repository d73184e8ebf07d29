"""Tests for logging configuration."""

import logging
import sys

import pytest
import structlog
from shared.logging import add_context, clear_context, configure_logging, get_logger, setup_stdlib_logging


@pytest.fixture
def restore_logging():
    yield
    configure_logging()


class TestStdlibLogging:
    def test_logs_go_to_stderr(self, restore_logging):
        setup_stdlib_logging("INFO")
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr

    def test_configure_uses_settings_level(self, monkeypatch, restore_logging):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        configure_logging()
        assert logging.getLogger().level == logging.ERROR


class TestStructlog:
    def test_get_logger_returns_structlog_logger(self):
        logger = get_logger(__name__)
        assert hasattr(logger, "info")

    def test_context_variables(self):
        add_context(cart_id="cart-001")
        assert structlog.contextvars.get_contextvars() == {"cart_id": "cart-001"}
        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
