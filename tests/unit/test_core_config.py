"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values (no environment required)
- Loading from PWDIGEST_* environment variables
- Log level validation and the debug override
- Environment detection
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from pwdigest.core.config import Settings, get_settings
from pwdigest.core.enums import Environment


@pytest.mark.unit
class TestSettingsDefaults:
    """Test Settings defaults."""

    def test_defaults_without_environment(self):
        """Test Settings loads with no variables set."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.app_name == "pwdigest"
        assert len(settings.demo_password.get_secret_value()) >= 8

    def test_demo_password_is_masked_in_repr(self):
        """Test the demo password never appears in the settings repr."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.demo_password.get_secret_value() not in repr(settings)


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test loading from environment variables."""

    def test_prefixed_variables_are_loaded(self):
        """Test PWDIGEST_* variables override defaults."""
        env = {
            "PWDIGEST_ENVIRONMENT": "testing",
            "PWDIGEST_LOG_LEVEL": "warning",
            "PWDIGEST_APP_NAME": "demo",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.environment == Environment.TESTING
        assert settings.log_level == "WARNING"
        assert settings.app_name == "demo"

    def test_unprefixed_variables_are_ignored(self):
        """Test variables without the prefix do not apply."""
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
            settings = Settings()

        assert settings.log_level == "INFO"

    def test_invalid_log_level_rejected(self):
        """Test unknown log levels fail validation."""
        with patch.dict(os.environ, {"PWDIGEST_LOG_LEVEL": "LOUD"}, clear=True):
            with pytest.raises(ValidationError, match="log_level must be one of"):
                Settings()

    def test_invalid_environment_rejected(self):
        """Test unknown environments fail validation."""
        with patch.dict(os.environ, {"PWDIGEST_ENVIRONMENT": "staging"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()


@pytest.mark.unit
class TestSettingsProperties:
    """Test derived properties."""

    def test_debug_forces_debug_level(self):
        """Test effective_log_level honors the debug flag."""
        assert Settings(debug=True, log_level="ERROR").effective_log_level == "DEBUG"
        assert Settings(log_level="ERROR").effective_log_level == "ERROR"

    @pytest.mark.parametrize(
        ("environment", "expected"),
        [
            (Environment.DEVELOPMENT, True),
            (Environment.TESTING, False),
            (Environment.CI, False),
            (Environment.PRODUCTION, False),
        ],
    )
    def test_is_development(self, environment, expected):
        """Test is_development is set only for the development environment."""
        assert Settings(environment=environment).is_development is expected


@pytest.mark.unit
class TestGetSettings:
    """Test the cached accessor."""

    def test_returns_cached_instance(self):
        """Test get_settings() returns the same instance."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        """Test clearing the cache picks up new environment values."""
        with patch.dict(os.environ, {"PWDIGEST_APP_NAME": "first"}, clear=True):
            first = get_settings()
            get_settings.cache_clear()
        with patch.dict(os.environ, {"PWDIGEST_APP_NAME": "second"}, clear=True):
            second = get_settings()

        assert first.app_name == "first"
        assert second.app_name == "second"
