"""Tests for settings."""

import logging

import pytest

from utilkit.core.exceptions import UtilkitConfigurationError
from utilkit.core.settings import UtilkitSettings, get_settings


class TestSettings:
    """Tests for UtilkitSettings and get_settings."""

    def test_defaults(self):
        settings = UtilkitSettings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.color_enabled is True
        assert settings.catalog_table == "information_schema.tables"
        assert settings.log_level_number == logging.INFO

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("UTILKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("UTILKIT_COLOR_ENABLED", "0")

        settings = get_settings()

        assert settings.log_level == "DEBUG"
        assert settings.color_enabled is False

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("UTILKIT_LOG_LEVEL", "LOUD")

        with pytest.raises(UtilkitConfigurationError) as exc_info:
            get_settings()

        assert exc_info.value.setting == "log_level"
