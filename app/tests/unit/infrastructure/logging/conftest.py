"""Fixtures for infrastructure.logging tests."""

from unittest.mock import Mock

import pytest
import structlog

from infrastructure.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture
def restore_structlog():
    """Reset structlog and contextvars around a test that reconfigures them."""
    structlog.contextvars.clear_contextvars()
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
