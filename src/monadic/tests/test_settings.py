"""Tests for environment-driven settings and their effect on logging."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from monadic import Some
from monadic.foundation.config import LoggingSettings, MonadicSettings, clear_settings_cache, get_settings
from monadic.observability import get_logger, reset_logging, use_renderer
from monadic.testing import RecordingRenderer, capture_logs


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("MONADIC_DEBUG", "MONADIC_LOG_LEVEL", "MONADIC_LOG_FORMAT", "MONADIC_LOG_INCLUDE_TRACEBACK"):
        monkeypatch.delenv(var, raising=False)

    settings = MonadicSettings(_env_file=None)

    assert settings.debug is False
    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "console"
    assert settings.logging.include_traceback is True
    assert settings.effective_log_level == "WARNING"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADIC_LOG_LEVEL", "error")
    monkeypatch.setenv("MONADIC_LOG_FORMAT", "json")

    settings = LoggingSettings()

    assert settings.level == "ERROR"
    assert settings.format == "json"


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADIC_DEBUG", "true")

    assert MonadicSettings(_env_file=None).effective_log_level == "DEBUG"


def test_debug_mode_enables_debug_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADIC_DEBUG", "true")
    clear_settings_cache()
    reset_logging()

    with use_renderer(RecordingRenderer()) as renderer:
        log = get_logger("t")
        log.debug("dbg")
        log.info("inf")

    assert [e.event for e in renderer.entries] == ["dbg", "inf"]


def test_invalid_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADIC_LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        LoggingSettings()


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()
    first = get_settings()
    clear_settings_cache()
    assert get_settings() is not first


def test_settings_drive_default_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADIC_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("MONADIC_LOG_FORMAT", "none")
    clear_settings_cache()

    assert get_logger("t")._level == 40


def test_settings_disable_traceback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADIC_LOG_INCLUDE_TRACEBACK", "false")
    clear_settings_cache()

    with capture_logs() as logs:
        Some(1).filter(lambda _: 1 // 0)

    assert logs.errors[0].context["error_type"] == "ZeroDivisionError"
    assert "exc_info" not in logs.errors[0].context
