"""Tests for recovery combinators: or_else, or_else_get, or_else_m."""

from __future__ import annotations

from monadic import Nothing, Some
from monadic.core import Adapter
from monadic.families import Failure, Success, Try
from monadic.testing import LogCapture


def _counting(value: object, calls: list[int]):
    def supplier() -> object:
        calls.append(1)
        return value
    return supplier


# ─────────────────────────────────────────────────────────────────
# or_else
# ─────────────────────────────────────────────────────────────────


def test_or_else_present_returns_self(adapter: Adapter) -> None:
    m = adapter.unit(1)

    assert m.or_else(2) is m
    assert m.or_else(adapter.unit(2)) is m


def test_or_else_absent_wraps_value(adapter: Adapter) -> None:
    assert adapter.empty().or_else(10) == adapter.unit(10)


def test_or_else_absent_returns_instance_as_is(adapter: Adapter) -> None:
    other = adapter.unit(10)

    assert adapter.empty().or_else(other) is other


def test_or_else_wraps_callables_without_calling_them() -> None:
    """A plain value fallback is never invoked, even when callable."""
    assert Nothing().or_else(len) == Some(len)


def test_or_else_none_value_is_present() -> None:
    assert Nothing().or_else(None) == Some(None)


# ─────────────────────────────────────────────────────────────────
# or_else_get
# ─────────────────────────────────────────────────────────────────


def test_or_else_get_present_never_calls_supplier(adapter: Adapter) -> None:
    calls: list[int] = []
    m = adapter.unit(1)

    assert m.or_else_get(_counting(2, calls)) is m
    assert calls == []


def test_or_else_get_absent_calls_supplier_once(adapter: Adapter) -> None:
    calls: list[int] = []

    recovered = adapter.empty().or_else_get(_counting(2, calls))

    assert recovered == adapter.unit(2)
    assert calls == [1]


def test_or_else_get_raising_supplier_returns_empty_and_logs_once(adapter: Adapter, logs: LogCapture) -> None:
    def boom() -> int:
        raise RuntimeError("supplier down")

    recovered = adapter.empty().or_else_get(boom)

    assert not recovered.is_present()
    assert len(logs.errors) == 1
    assert logs.errors[0].context["kind"] == "SUPPLIER"
    assert logs.errors[0].context["combinator"] == "or_else_get"
    assert logs.errors[0].context["error"] == "supplier down"


# ─────────────────────────────────────────────────────────────────
# or_else_m
# ─────────────────────────────────────────────────────────────────


def test_or_else_m_present_never_calls_supplier(adapter: Adapter) -> None:
    calls: list[int] = []
    m = adapter.unit(1)

    assert m.or_else_m(_counting(adapter.unit(2), calls)) is m
    assert calls == []


def test_or_else_m_returns_supplied_instance_unwrapped(adapter: Adapter) -> None:
    supplied = adapter.unit(3)

    assert adapter.empty().or_else_m(lambda: supplied) is supplied


def test_or_else_m_may_supply_empty(adapter: Adapter, logs: LogCapture) -> None:
    assert not adapter.empty().or_else_m(adapter.empty).is_present()
    assert len(logs) == 0


def test_or_else_m_raising_supplier_returns_empty(logs: LogCapture) -> None:
    recovered = Nothing().or_else_m(lambda: Some(1 // 0))

    assert recovered is Nothing()
    assert [e.context["combinator"] for e in logs.errors] == ["or_else_m"]


def test_try_recovery_chain() -> None:
    parsed = Try.of(int, "nope").or_else_m(lambda: Try.of(int, "7"))

    assert parsed == Success(7)
    assert isinstance(Try.of(int, "nope").or_else_m(lambda: Try.of(int, "x")), Failure)
