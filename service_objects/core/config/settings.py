"""
Service manager settings module.

This module provides the settings the process-wide service manager is
assembled from: which configuration files to merge, which environment
prefix to read, and how verbosely to log.
"""

# Standard Library Imports
import logging
from functools import lru_cache

# Third-Party Imports
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Settings loaded from ``SERVICE_OBJECTS_*`` environment variables and ``.env``."""

    # Environment
    ENVIRONMENT: str = "development"  # development, test, production

    # Logging Settings
    LOG_LEVEL: str = "INFO"

    # Configuration sources, merged in order by get_container()
    CONFIG_FILES: list[str] = Field(default_factory=list)
    ENV_PREFIX: str = "APP_"  # empty string disables the environment source

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_OBJECTS_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log level is one of the valid levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """
    Factory function to get the service manager settings.

    The result is cached; call ``get_settings.cache_clear()`` after changing
    the environment to pick up new values.

    Returns:
        The settings instance
    """
    settings = Settings()
    logger.debug(
        "Loaded settings for %s environment with %d config file(s)",
        settings.ENVIRONMENT,
        len(settings.CONFIG_FILES),
    )
    return settings
