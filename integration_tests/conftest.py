"""Pytest configuration for live-backend integration tests."""

import os

import pytest

BACKEND_ENV = "HEALTH_DASHBOARD_BACKEND_URL"


def pytest_collection_modifyitems(items):
    """Mark tests here as integration and skip them without a backend URL."""
    skip = pytest.mark.skip(reason=f"{BACKEND_ENV} not set")
    for item in items:
        if "integration_tests" not in str(item.fspath):
            continue
        item.add_marker(pytest.mark.integration)
        if not os.environ.get(BACKEND_ENV):
            item.add_marker(skip)


@pytest.fixture
def backend_url() -> str:
    return os.environ[BACKEND_ENV]
