"""Configuration management using pydantic-settings."""

from .settings import LoggingSettings, MonadicSettings, clear_settings_cache, get_settings

__all__ = [
    "LoggingSettings",
    "MonadicSettings",
    "clear_settings_cache",
    "get_settings",
]
