"""Tests for application configuration management."""

import os
import tempfile
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from eldercare_planner.config import (
    Settings,
    get_global_settings,
    get_settings,
    reset_global_settings,
)


class TestSettings:
    """Test cases for Settings class."""

    def test_defaults(self):
        """Settings defaults without environment."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)

            assert settings.app_env == "development"
            assert settings.log_level == "INFO"
            assert settings.enable_detailed_logging is False

    def test_settings_load_from_env_file(self):
        """Settings load from an env file."""
        with tempfile.NamedTemporaryFile(mode="w", suffix=".env", delete=False) as f:
            f.write("APP_ENV=production\n")
            f.write("LOG_LEVEL=DEBUG\n")
            f.write("ENABLE_DETAILED_LOGGING=true\n")
            temp_env_file = f.name

        try:
            with patch.dict(os.environ, {}, clear=True):
                settings = get_settings(env_file=temp_env_file)

                assert settings.app_env == "production"
                assert settings.log_level == "DEBUG"
                assert settings.enable_detailed_logging is True
        finally:
            os.unlink(temp_env_file)

    def test_log_level_is_uppercased(self):
        """Log level is normalized to uppercase."""
        with patch.dict(os.environ, {"LOG_LEVEL": "warning"}, clear=True):
            assert Settings(_env_file=None).log_level == "WARNING"

    def test_invalid_log_level(self):
        """Unknown log levels are rejected."""
        with patch.dict(os.environ, {"LOG_LEVEL": "INVALID"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "LOG_LEVEL must be one of" in str(exc_info.value)

    def test_invalid_app_env(self):
        """Unknown environments are rejected."""
        with patch.dict(os.environ, {"APP_ENV": "staging"}, clear=True):
            with pytest.raises(ValidationError) as exc_info:
                Settings(_env_file=None)

            assert "APP_ENV must be one of" in str(exc_info.value)


class TestGlobalSettings:
    """Test the cached global settings."""

    def test_global_settings_are_cached_until_reset(self):
        """Global settings are cached until reset."""
        reset_global_settings()
        with patch.dict(os.environ, {"APP_ENV": "testing"}, clear=True):
            first = get_global_settings()
            assert get_global_settings() is first

        reset_global_settings()
        with patch.dict(os.environ, {"APP_ENV": "production"}, clear=True):
            assert get_global_settings().app_env == "production"
        reset_global_settings()
