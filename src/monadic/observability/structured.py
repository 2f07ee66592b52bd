"""Structured logging sink for combinator failure reporting.

Every failure path inside a combinator routes through a LogSink rather than
propagating. The bundled BoundLogger satisfies LogSink and adds context
binding, level filtering and pluggable renderers:
- Human-readable console output for development
- JSON Lines (orjson) for log aggregation
- Silent renderer for tests

Quick Start:
    >>> from monadic.observability import configure_logging, get_logger
    >>>
    >>> # Configure (once at startup); defaults come from MONADIC_LOG_* settings
    >>> configure_logging(format="json", level="WARNING")
    >>>
    >>> log = get_logger("my-service")
    >>> log.warn("fallback missing")
    >>> log.error("predicate failed", cause=ValueError("bad input"))
"""

from __future__ import annotations

import logging
import sys
import time
import traceback
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

from monadic.foundation.config import get_settings
from monadic.foundation.errors import JsonDict, JsonMapping, JsonValue

if TYPE_CHECKING:
    from types import TracebackType

# Context var for bound context (persists across nested calls)
_log_context: ContextVar[JsonDict] = ContextVar("log_context", default={})


# ─────────────────────────────────────────────────────────────────────────────
# Sink Protocols & Logger
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogSink(Protocol):
    """Minimal capability combinators need: a warning and an error with cause."""

    def warn(self, message: str) -> None: ...
    def error(self, message: str, cause: BaseException | None = None) -> None: ...


@dataclass(slots=True)
class BoundLogger:
    """Structured logger with bound context. Immutable - bind() returns a new logger with merged context.

    Example:
        >>> log = BoundLogger(context={"logger": "monadic.core"})
        >>> log.warn("failed to return other case")
        # => 10:30:45.120 [warning] failed to return other case logger="monadic.core"
    """

    context: JsonDict = field(default_factory=dict)
    _renderer: LogRenderer | None = None
    _level: int = logging.DEBUG

    def bind(self, **kw: JsonValue) -> BoundLogger:
        """Create new logger with additional bound context."""
        return BoundLogger(context={**self.context, **kw}, _renderer=self._renderer, _level=self._level)

    def unbind(self, *keys: str) -> BoundLogger:
        """Create new logger without specified keys."""
        return BoundLogger(context={k: v for k, v in self.context.items() if k not in keys},
                           _renderer=self._renderer, _level=self._level)

    def _log(self, level: int, event: str, **kw: JsonValue) -> None:
        if level < self._level:
            return
        # Merge contexts: global -> bound -> call-site
        merged = {**_log_context.get(), **self.context, **kw}
        (self._renderer or _get_renderer()).render(LogEntry(time.time(), _level_name(level), event, merged))

    def debug(self, event: str, **kw: JsonValue) -> None: self._log(logging.DEBUG, event, **kw)
    def info(self, event: str, **kw: JsonValue) -> None: self._log(logging.INFO, event, **kw)
    def warning(self, event: str, **kw: JsonValue) -> None: self._log(logging.WARNING, event, **kw)

    def warn(self, event: str, **kw: JsonValue) -> None:
        """Alias of warning(), the LogSink spelling."""
        self._log(logging.WARNING, event, **kw)

    def error(self, event: str, cause: BaseException | None = None, **kw: JsonValue) -> None:
        """Log an error, recording the cause's type, message and (optionally) traceback."""
        if cause is not None:
            kw = {"error": str(cause), "error_type": type(cause).__name__, **kw}
            if _include_traceback():
                kw["exc_info"] = "".join(traceback.format_exception(cause)).rstrip()
        self._log(logging.ERROR, event, **kw)

    def exception(self, event: str, **kw: JsonValue) -> None:
        """Log error with the exception currently being handled."""
        self.error(event, cause=sys.exception(), **kw)


@dataclass(slots=True)
class LogEntry:
    """Log entry with all merged context."""

    timestamp: float
    level: str
    event: str
    context: JsonDict

    @property
    def ts_iso(self) -> str:
        """ISO formatted timestamp."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    @property
    def ts_human(self) -> str:
        """Human-readable timestamp (HH:MM:SS.mmm)."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


# ─────────────────────────────────────────────────────────────────────────────
# Renderers
# ─────────────────────────────────────────────────────────────────────────────


@runtime_checkable
class LogRenderer(Protocol):
    """Protocol for log output renderers."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """Human-readable colored console output. Format: timestamp [level] event key=value ..."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None  # None = auto-detect
    show_timestamp: bool = True

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        c = _COLORS if self.colors else _NO_COLORS
        parts = ([f"{c['dim']}{entry.ts_human}{c['reset']}"] if self.show_timestamp else [])
        parts += [f"{_LEVEL_COLORS.get(entry.level, c['dim']) if self.colors else ''}[{entry.level}]{c['reset']}",
                  f"{c['bold']}{entry.event}{c['reset']}"]
        parts += [f"{c['cyan']}{k}{c['reset']}={_format_value(v, c)}"
                  for k, v in sorted(entry.context.items()) if k != "exc_info"]
        print(" ".join(parts), file=self.output)
        if "exc_info" in entry.context:
            print(f"{c['red']}{entry.context['exc_info']}{c['reset']}", file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """JSON Lines output for log aggregation."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        import orjson
        print(orjson.dumps({"timestamp": entry.ts_iso, "level": entry.level, "event": entry.event,
                            **entry.context}, option=orjson.OPT_NON_STR_KEYS, default=str).decode(),
              file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Silent renderer for testing."""

    def render(self, entry: LogEntry) -> None:
        pass


# ─────────────────────────────────────────────────────────────────────────────
# Global Configuration
# ─────────────────────────────────────────────────────────────────────────────


_renderer: ContextVar[LogRenderer | None] = ContextVar("log_renderer", default=None)
_default_level: ContextVar[int | None] = ContextVar("log_level", default=None)
_traceback: ContextVar[bool | None] = ContextVar("log_traceback", default=None)


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    level: str | None = None,
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
    include_traceback: bool | None = None,
) -> LogRenderer:
    """Configure global structured logging. Format: "console" (human), "json" (machine), "none".

    Unset arguments fall back to MONADIC_LOG_* settings. MONADIC_DEBUG=true forces DEBUG.
    """
    settings = get_settings()
    cfg = settings.logging
    format, level = format or cfg.format, level or settings.effective_log_level
    _default_level.set(getattr(logging, level.upper(), logging.WARNING))
    _traceback.set(cfg.include_traceback if include_traceback is None else include_traceback)
    match format:
        case "console":
            renderer: LogRenderer = ConsoleRenderer(output=output or sys.stderr,
                                                    colors=cfg.colors if colors is None else colors)
        case "json": renderer = JsonRenderer(output=output or sys.stdout)
        case "none": renderer = NoOpRenderer()
        case _: raise ValueError(f"Unknown format: {format}. Use 'console', 'json', or 'none'")
    _renderer.set(renderer)
    return renderer


def reset_logging() -> None:
    """Drop any configured renderer/level so the next log call re-reads settings."""
    _renderer.set(None)
    _default_level.set(None)
    _traceback.set(None)


def get_logger(name: str | None = None, **initial_context: JsonValue) -> BoundLogger:
    """Get a structured logger with optional initial context. Name is added to context as 'logger'."""
    ctx = {**initial_context, **({"logger": name} if name else {})}
    return BoundLogger(context=ctx, _level=_get_level())


def logger(scope: str | type) -> BoundLogger:
    """Sink accessor used by combinators: a logger named after a module or class."""
    return get_logger(scope if isinstance(scope, str) else f"{scope.__module__}.{scope.__qualname__}")


def _get_renderer() -> LogRenderer:
    """Get configured renderer or create one from settings."""
    if (renderer := _renderer.get()) is None:
        renderer = configure_logging()
    return renderer


def _get_level() -> int:
    if (level := _default_level.get()) is None:
        configure_logging()
        level = _default_level.get()
    return level if level is not None else logging.WARNING


def _include_traceback() -> bool:
    flag = _traceback.get()
    return get_settings().logging.include_traceback if flag is None else flag


class use_renderer:
    """Context manager installing a renderer (and optionally a level) for the scope, then restoring the previous setup."""

    __slots__ = ("_renderer", "_level", "_tokens")

    def __init__(self, renderer: LogRenderer, level: str | None = None) -> None:
        self._renderer, self._level = renderer, level
        self._tokens: list[Token[object]] = []

    def __enter__(self) -> LogRenderer:
        _get_level()  # settle defaults so exit restores a configured state
        self._tokens.append(_renderer.set(self._renderer))  # type: ignore[arg-type]
        if self._level is not None:
            self._tokens.append(_default_level.set(getattr(logging, self._level.upper())))  # type: ignore[arg-type]
        return self._renderer

    def __exit__(self, *_: object) -> None:
        while self._tokens:
            token = self._tokens.pop()
            token.var.reset(token)


class log_context:
    """Context manager for scoped logging context. Adds key-value pairs to all log entries within the scope."""

    __slots__ = ("_ctx", "_token")

    def __init__(self, **kw: JsonValue) -> None:
        self._ctx: JsonDict = dict(kw)
        self._token: object | None = None

    def __enter__(self) -> log_context:
        self._token = _log_context.set({**_log_context.get(), **self._ctx})
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> None:
        if self._token is not None:
            _log_context.reset(self._token)  # type: ignore[arg-type]


# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


_COLORS = {"reset": "\033[0m", "bold": "\033[1m", "dim": "\033[2m", "red": "\033[31m",
           "green": "\033[32m", "yellow": "\033[33m", "blue": "\033[34m", "cyan": "\033[36m", "white": "\033[37m"}
_NO_COLORS = {k: "" for k in _COLORS}
_LEVEL_COLORS = {"debug": _COLORS["dim"], "info": _COLORS["green"], "warning": _COLORS["yellow"], "error": _COLORS["red"]}


def _level_name(level: int) -> str:
    """Convert logging level int to lowercase name."""
    return logging.getLevelName(level).lower()


def _format_value(v: object, c: dict[str, str]) -> str:
    """Format a value for console output."""
    match v:
        case str(): return f'{c["yellow"]}"{v}"{c["reset"]}'
        case bool(): return f'{c["blue"]}{str(v).lower()}{c["reset"]}'
        case int() | float(): return f'{c["blue"]}{v}{c["reset"]}'
        case dict(): return f'{c["dim"]}{{{len(v)} items}}{c["reset"]}'
        case list() | tuple(): return f'{c["dim"]}[{len(v)} items]{c["reset"]}'
        case _: return f'{c["white"]}{v!r}{c["reset"]}'
