"""Unit tests for infrastructure.logging.setup.

Tests cover:
- configure_logging in the test environment
- renderer selection outside the test environment
- get_logger name binding
"""

import logging

import pytest
import structlog

from infrastructure.logging import setup
from infrastructure.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_logger,
)


@pytest.mark.unit
class TestConfigureLogging:
    def test_detects_pytest(self):
        assert _is_test_environment() is True

    def test_returns_bound_logger(self, mock_settings, restore_structlog):
        logger = configure_logging(settings=mock_settings)

        assert hasattr(logger, "info")
        assert hasattr(logger, "error")

    def test_suppressed_under_pytest(self, mock_settings, restore_structlog):
        configure_logging(settings=mock_settings)

        assert logging.root.level > logging.CRITICAL

    def test_production_uses_json_renderer(
        self, mock_settings, monkeypatch, restore_structlog
    ):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)

        configure_logging(settings=mock_settings, is_production=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_uses_console_renderer(
        self, mock_settings, monkeypatch, restore_structlog
    ):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)

        configure_logging(settings=mock_settings)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_log_level_override(self, mock_settings, monkeypatch, restore_structlog):
        monkeypatch.setattr(setup, "_is_test_environment", lambda: False)

        configure_logging(settings=mock_settings, log_level="debug")

        assert logging.root.level == logging.DEBUG
        assert logging.getLogger("botocore").level == logging.WARNING


@pytest.mark.unit
class TestGetLogger:
    def test_binds_name(self):
        logger = get_logger("poller")

        assert structlog.get_context(logger)["logger_name"] == "poller"

    def test_without_name(self):
        assert "logger_name" not in structlog.get_context(get_logger().bind())
