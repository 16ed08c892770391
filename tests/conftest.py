"""Pytest configuration.

This configuration ensures:
1. Settings load in the testing environment (JSON logs)
2. The cached logger is rebuilt between tests that patch it
3. Async handler tests are marked automatically
"""

import inspect
import os

os.environ.setdefault("ENVIRONMENT", "testing")

import pytest  # noqa: E402

from apicommon.core.container import get_logger  # noqa: E402

@pytest.fixture(autouse=True)
def reset_logger_cache():
    """Clear the logger singleton so patches never leak between tests."""
    get_logger.cache_clear()
    yield
    get_logger.cache_clear()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with no framework wiring")
    config.addinivalue_line(
        "markers", "api: End-to-end tests through a FastAPI TestClient"
    )
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)
