"""Configuration management for screengraph using pydantic-settings.

Supports environment variables, .env files, and type validation.
"""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScreenGraphSettings(BaseSettings):
    """Main configuration settings for screengraph."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SCREENGRAPH_",
        case_sensitive=False,
        extra="ignore",
    )

    # Navigation settings
    element_timeout: float = Field(
        2.0, gt=0.0, description="Seconds to wait for an element before failing a hop"
    )
    poll_interval: float = Field(
        0.1, gt=0.0, description="Seconds between element existence checks"
    )

    # Logging settings
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Log level for screengraph loggers"
    )
    structured_logging: bool = Field(False, description="Render log events as JSON")
    log_file: Path | None = Field(None, description="Optional file to mirror log output to")
    debug_mode: bool = Field(False, description="Enable debug logging")


class TestSettings(ScreenGraphSettings):
    """Test-specific settings."""

    __test__ = False

    element_timeout: float = 0.2
    poll_interval: float = 0.01


# Singleton instance
_settings: ScreenGraphSettings | None = None


def get_settings(env: str | None = None) -> ScreenGraphSettings:
    """Get the singleton settings instance.

    Args:
        env: Environment name ('test' selects TestSettings); defaults to
            the SCREENGRAPH_ENV environment variable

    Returns:
        ScreenGraphSettings instance
    """
    global _settings

    if _settings is None:
        env_name = env or os.getenv("SCREENGRAPH_ENV", "default")
        if env_name == "test":
            _settings = TestSettings()
        else:
            _settings = ScreenGraphSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
