"""Foundation layer: errors and configuration."""

from .config import LoggingSettings, MonadicSettings, clear_settings_cache, get_settings
from .errors import CallbackFailure, FailureKind, JsonDict, JsonValue, MonadicError, NoValueError

__all__ = [
    "LoggingSettings", "MonadicSettings", "clear_settings_cache", "get_settings",
    "CallbackFailure", "FailureKind", "JsonDict", "JsonValue", "MonadicError", "NoValueError",
]
