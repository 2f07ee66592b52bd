"""Tests for the structured logging sink."""

from __future__ import annotations

import io

import orjson
import pytest

from monadic import Some
from monadic.observability import (
    BoundLogger,
    ConsoleRenderer,
    JsonRenderer,
    LogSink,
    NoOpRenderer,
    configure_logging,
    get_logger,
    log_context,
    logger,
)
from monadic.testing import LogCapture, capture_logs


def test_bound_logger_satisfies_log_sink() -> None:
    assert isinstance(get_logger("x"), LogSink)


def test_logger_scope_from_class() -> None:
    assert logger(BoundLogger).context["logger"] == "monadic.observability.structured.BoundLogger"
    assert logger("plain").context["logger"] == "plain"


def test_warn_is_warning(logs: LogCapture) -> None:
    get_logger("t").warn("careful")

    assert logs.events("warning") == ["careful"]


def test_error_records_cause(logs: LogCapture) -> None:
    get_logger("t").error("failed", cause=KeyError("k"))

    ctx = logs.errors[0].context
    assert ctx["error_type"] == "KeyError"
    assert ctx["error"] == "'k'"
    assert "exc_info" in ctx


def test_error_traceback_can_be_disabled() -> None:
    sink = io.StringIO()
    configure_logging(format="json", level="ERROR", output=sink, include_traceback=False)

    get_logger("t").error("failed", cause=ValueError("v"))

    record = orjson.loads(sink.getvalue())
    assert record["error_type"] == "ValueError"
    assert "exc_info" not in record


def test_level_filtering() -> None:
    with capture_logs(level="ERROR") as logs:
        log = get_logger("t")
        log.warn("dropped")
        log.error("kept")

    assert logs.events() == ["kept"]


def test_bind_and_log_context(logs: LogCapture) -> None:
    log = get_logger("t").bind(pipeline="checkout")

    with log_context(request_id="r1"):
        log.warn("inside")
    log.unbind("pipeline").warn("outside")

    inside, outside = logs.entries
    assert inside.context["pipeline"] == "checkout" and inside.context["request_id"] == "r1"
    assert "pipeline" not in outside.context and "request_id" not in outside.context


def test_log_context_nests_and_restores(logs: LogCapture) -> None:
    log = get_logger("t")

    with log_context(stage="parse"):
        with log_context(stage="validate", attempt=2):
            log.warn("inner")
        log.warn("outer")
    log.warn("after")

    assert [e.context.get("stage") for e in logs.entries] == ["validate", "parse", None]
    assert [e.context.get("attempt") for e in logs.entries] == [2, None, None]


def test_json_renderer_writes_lines() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="WARNING", output=out)

    Some(1).filter(lambda _: False, None)

    record = orjson.loads(out.getvalue().splitlines()[0])
    assert record["level"] == "warning"
    assert record["event"] == "failed to return other case, other is None"
    assert record["family"] == "Maybe"


def test_console_renderer_without_colors() -> None:
    out = io.StringIO()
    configure_logging(format="console", level="WARNING", output=out, colors=False)

    get_logger("svc").warn("hello", attempt=2)

    line = out.getvalue().strip()
    assert "[warning] hello" in line
    assert 'logger="svc"' in line and "attempt=2" in line
    assert "\033[" not in line


def test_configure_logging_returns_renderer() -> None:
    assert isinstance(configure_logging(format="none"), NoOpRenderer)
    assert isinstance(configure_logging(format="json"), JsonRenderer)
    assert isinstance(configure_logging(format="console", colors=False), ConsoleRenderer)


def test_configure_logging_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")


def test_capture_restores_previous_renderer() -> None:
    out = io.StringIO()
    configure_logging(format="json", level="WARNING", output=out)

    with capture_logs() as logs:
        get_logger("t").warn("captured")
    get_logger("t").warn("rendered")

    assert logs.events() == ["captured"]
    assert orjson.loads(out.getvalue())["event"] == "rendered"
