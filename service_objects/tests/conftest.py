"""
Central conftest.py for the service_objects test suite.

This file contains fixtures that are common to all tests.
"""

import pytest

from service_objects.core.config.settings import get_settings
from service_objects.infrastructure.di.container import ServiceManager, reset_container


@pytest.fixture
def manager() -> ServiceManager:
    """Create an empty, unconfigured service manager."""
    return ServiceManager(name="test")


@pytest.fixture(autouse=True)
def isolated_container(monkeypatch):
    """Give every test a fresh process-wide manager and settings."""
    for key in ("SERVICE_OBJECTS_CONFIG_FILES", "SERVICE_OBJECTS_ENV_PREFIX"):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    reset_container()
    yield
    reset_container()
    get_settings.cache_clear()
