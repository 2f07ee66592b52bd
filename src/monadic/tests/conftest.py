"""Shared fixtures: isolated logging/settings state and log capture."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from monadic.families import MaybeKind, TryKind
from monadic.foundation.config import clear_settings_cache
from monadic.observability import reset_logging
from monadic.testing import LogCapture, capture_logs

if TYPE_CHECKING:
    from collections.abc import Iterator

    from monadic.core import Adapter


@pytest.fixture(autouse=True)
def clean_logging() -> Iterator[None]:
    """Start every test from settings-driven logging defaults."""
    clear_settings_cache()
    reset_logging()
    yield
    reset_logging()
    clear_settings_cache()


@pytest.fixture
def logs() -> Iterator[LogCapture]:
    """Capture every entry logged during the test."""
    with capture_logs() as capture:
        yield capture


@pytest.fixture(params=[MaybeKind, TryKind], ids=["maybe", "try"])
def adapter(request: pytest.FixtureRequest) -> Adapter:
    """Adapter of each reference family; contract tests run once per family."""
    return request.param.adapter()
