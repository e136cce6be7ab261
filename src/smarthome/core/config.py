"""Configuration management for SmartHome Rules.

This module uses Pydantic Settings to load and validate configuration from
environment variables and .env files. Configuration is loaded at application
startup and is immutable during runtime.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HOME_MODE_NAMES = ("NORMAL", "AWAY", "NIGHT", "VACATION")


class Settings(BaseSettings):
    """Application configuration settings.

    Settings are loaded from environment variables and .env files.
    All configuration values are validated at startup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SMARTHOME_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "SmartHome Rules"
    app_version: str = "0.1.0"
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False
    api_prefix: str = "/api/v1"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS Settings
    cors_origins: list[str] = Field(default=["http://localhost:3000", "http://localhost:8000"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = Field(default=["*"])
    cors_allow_headers: list[str] = Field(default=["*"])

    # Logging Settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "console"] = "json"

    # Automation Settings
    default_home_mode: str = Field(
        default="NORMAL",
        description="Home mode the mode store starts in",
    )
    default_rule_priority: int = Field(
        default=5,
        description="Priority given to rules created without one",
    )
    default_interpreter_rule: str = Field(
        default="motion AND hour >= 18",
        description="Expression evaluated when the interpreter receives a blank rule",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Parse CORS origins from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("default_home_mode")
    @classmethod
    def validate_default_home_mode(cls, v: str) -> str:
        """Validate the default home mode names a known mode."""
        normalized = v.strip().upper()
        if normalized not in HOME_MODE_NAMES:
            raise ValueError(
                f"default_home_mode must be one of {', '.join(HOME_MODE_NAMES)}, got {v!r}"
            )
        return normalized

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function caches the settings instance to avoid reloading
    configuration on every call. Settings are loaded once at startup.

    Returns:
        Settings: Cached application settings instance.
    """
    return Settings()
