"""Shared fixtures for utilkit tests."""

import pytest

from utilkit.core.settings import get_settings

pytest_plugins = ["utilkit.testing.fixtures"]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from UTILKIT_* variables and the settings cache."""
    for name in ("UTILKIT_LOG_LEVEL", "UTILKIT_COLOR_ENABLED", "UTILKIT_CATALOG_TABLE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
