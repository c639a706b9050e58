"""
Hello Service Tests - Test Configuration.

Pins the environment before app modules are imported and registers the
custom markers used across the suite.
"""

import logging
import os
from typing import Any, Iterator

import pytest

# Set test environment variables BEFORE importing app modules
os.environ["LOG_LEVEL"] = "INFO"
os.environ["LOG_JSON"] = "false"
os.environ["ENABLE_REQUEST_TRACING"] = "true"
os.environ.pop("PORT", None)
os.environ.pop("HOST", None)

from app.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """
    Drop cached settings around each test.

    Tests that change environment variables get a fresh Settings instance
    the next time get_settings() is called.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way it was after setup_logging runs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def pytest_configure(config: Any) -> None:
    """
    Configure pytest with custom markers.

    Args:
        config: Pytest configuration object
    """
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test",
    )
    config.addinivalue_line(
        "markers",
        "unit: mark test as unit test",
    )
