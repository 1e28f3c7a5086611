"""Unit tests for service manager settings."""

import json

import pytest
from pydantic import ValidationError

from service_objects.core.config.settings import Settings, get_settings


class TestSettings:
    """Test suite for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SERVICE_OBJECTS_LOG_LEVEL", raising=False)
        settings = Settings(_env_file=None)

        assert settings.LOG_LEVEL == "INFO"
        assert settings.CONFIG_FILES == []
        assert settings.ENV_PREFIX == "APP_"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("SERVICE_OBJECTS_CONFIG_FILES", json.dumps(["a.yaml", "b.json"]))
        monkeypatch.setenv("SERVICE_OBJECTS_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.CONFIG_FILES == ["a.yaml", "b.json"]
        assert settings.LOG_LEVEL == "DEBUG"

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="VERBOSE")

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

        get_settings.cache_clear()
        assert isinstance(get_settings(), Settings)
