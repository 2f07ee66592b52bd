"""Environment-based configuration using pydantic-settings.

Example:
    >>> from monadic.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # MONADIC_LOG_LEVEL=DEBUG
    # MONADIC_LOG_FORMAT=json
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration for combinator failure reporting."""

    model_config = SettingsConfigDict(
        env_prefix="MONADIC_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force console colors (None = auto-detect)")
    include_traceback: bool = Field(default=True, description="Attach cause traceback to error logs")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class MonadicSettings(BaseSettings):
    """Root settings, loaded from MONADIC_-prefixed environment variables.

    Example environment variables:
        MONADIC_DEBUG=true
        MONADIC_LOG_LEVEL=ERROR
        MONADIC_LOG_INCLUDE_TRACEBACK=false
    """

    model_config = SettingsConfigDict(
        env_prefix="MONADIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> MonadicSettings:
    """Get the global settings instance (cached)."""
    return MonadicSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
