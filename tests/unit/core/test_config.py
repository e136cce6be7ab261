import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from smarthome.core.config import Settings, get_settings


def test_settings_defaults():
    """Test that settings load with correct defaults."""
    get_settings.cache_clear()

    settings = Settings()

    assert settings.app_name == "SmartHome Rules"
    assert settings.environment == "development"
    assert settings.debug is False
    assert settings.api_prefix == "/api/v1"
    assert settings.port == 8000
    assert settings.default_home_mode == "NORMAL"
    assert settings.default_rule_priority == 5
    assert settings.default_interpreter_rule == "motion AND hour >= 18"
    assert settings.is_development is True
    assert settings.is_production is False


def test_settings_env_override():
    """Test that environment variables override defaults."""
    get_settings.cache_clear()

    with patch.dict(os.environ, {
        "SMARTHOME_ENVIRONMENT": "production",
        "SMARTHOME_PORT": "9000",
        "SMARTHOME_DEFAULT_HOME_MODE": "night",
        "SMARTHOME_DEFAULT_RULE_PRIORITY": "8",
    }):
        settings = Settings()

        assert settings.environment == "production"
        assert settings.port == 9000
        assert settings.default_home_mode == "NIGHT"
        assert settings.default_rule_priority == 8
        assert settings.is_production is True


def test_invalid_default_home_mode():
    """Test that an unknown home mode is rejected at startup."""
    with pytest.raises(ValidationError):
        Settings(default_home_mode="PARTY")


def test_invalid_environment():
    """Test validation of environment literal."""
    with pytest.raises(ValidationError):
        Settings(environment="staging")


def test_cors_origins_parsing():
    """Test CORS origins parsing from a list."""
    settings = Settings(cors_origins=["http://example.com", "http://test.com"])
    assert settings.cors_origins == ["http://example.com", "http://test.com"]


def test_get_settings_is_cached():
    """Test that get_settings returns the same instance."""
    get_settings.cache_clear()
    assert get_settings() is get_settings()
