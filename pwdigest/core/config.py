"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
prefixed with ``PWDIGEST_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Every field has a default, so importing never requires an .env file

Usage:
    from pwdigest.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        # Human-readable logs
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pwdigest.core.enums import Environment

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables (PWDIGEST_*)
        2. Default values
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG log level)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="pwdigest",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Demonstration entry point
    demo_password: SecretStr = Field(
        default=SecretStr("correct horse battery staple"),
        description="Password hashed by the demo entry point when none is given",
    )

    model_config = SettingsConfigDict(
        env_prefix="PWDIGEST_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name, any case.

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
        return level

    @property
    def effective_log_level(self) -> str:
        """
        Log level after applying the debug flag.

        Returns:
            str: "DEBUG" when debug is enabled, otherwise log_level.
        """
        return "DEBUG" if self.debug else self.log_level

    # Environment check (selects the log renderer)
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once per process; call ``get_settings.cache_clear()``
    to reload (tests do this after patching the environment).

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
