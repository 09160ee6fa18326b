"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides sample environments and consoles for all tests
"""

import io
import os
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

LOG_LEVELS = ["DEBUG", "TRACE", "INFO", "WARNING", "ERROR", "FATAL"]


@pytest.fixture
def mock_console():
    """Provide a mock Rich console for testing."""
    return MagicMock(spec=Console)


@pytest.fixture
def capture_console():
    """Provide a real Rich console writing into a string buffer."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def log_levels():
    """Provide the allowed values for a log level enum."""
    return list(LOG_LEVELS)


@pytest.fixture
def test_env_vars():
    """Provide test environment variables."""
    return {
        "APP_NAME": "guardian",
        "PORT": "8080",
        "DEBUG": "false",
        "LOG_LEVEL": "warning",
        "ALLOWED_HOSTS": '["localhost", "example.com"]',
        "BLANK": "   ",
    }


@pytest.fixture
def mock_env_vars(test_env_vars):
    """Replace the process environment with the test variables."""
    with patch.dict(os.environ, test_env_vars, clear=True):
        yield test_env_vars


@pytest.fixture
def service_guard():
    """Provide a type guard for the sample JSON service object."""

    def is_service(obj):
        return (
            isinstance(obj, dict)
            and isinstance(obj.get("foo"), (int, float))
            and not isinstance(obj.get("foo"), bool)
            and isinstance(obj.get("bar"), str)
            and isinstance(obj.get("baz"), bool)
        )

    return is_service
