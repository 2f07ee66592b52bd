"""Structured logging: the sink combinators report recovered failures to."""

from .structured import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    LogEntry,
    LogRenderer,
    LogSink,
    NoOpRenderer,
    configure_logging,
    get_logger,
    log_context,
    logger,
    reset_logging,
    use_renderer,
)

__all__ = [
    "BoundLogger",
    "ConsoleRenderer",
    "JsonRenderer",
    "LogEntry",
    "LogRenderer",
    "LogSink",
    "NoOpRenderer",
    "configure_logging",
    "get_logger",
    "log_context",
    "logger",
    "reset_logging",
    "use_renderer",
]
