"""The combinator interface shared by every container family.

A family implements three primitives (is_present, map, flat_map) and names its
Witness; every other combinator is derived here from flat_map, is_present and
the family's Adapter:

- Filterable: filter
- Recoverable: or_else, or_else_get, or_else_m
- Tappable: peek*, inspect*

Failure policy:
    map/flat_map never catch; a raising function propagates (families may
    choose otherwise, e.g. Try). filter/recover/observe run their callback
    through attempt(): filter and recover degrade to the family's empty(),
    observe leaves the instance untouched. Every recovered failure is logged.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Final, Generic, TypeVar

from monadic.foundation.errors import CallbackFailure, FailureKind
from monadic.observability import logger

from .outcome import Err, Ok, attempt
from .witness import Adapter, Witness

T = TypeVar("T")
R = TypeVar("R")
W = TypeVar("W", bound=Witness[Any])

Action = Callable[[], object]
Consumer = Callable[[T], object]


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<unset>"


_UNSET: Final = _Unset()


def identity(x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def _nothing() -> None:
    pass


def _ignore(_: object) -> None:
    pass


class Monadic(ABC, Generic[W, T]):
    """A zero-or-one value container tagged with its family W.

    Subclasses set ``witness`` and implement is_present/map/flat_map.
    Instances are immutable: combinators return new instances of the same
    family or pass ``self`` through.

    Example:
        >>> Some(5).map(lambda x: x + 1).filter(lambda x: x > 3)
        Some(6)
        >>> Nothing().or_else(10)
        Some(10)
    """

    __slots__ = ()

    witness: ClassVar[type[Witness[Any]]]

    # ─────────────────────────────────────────────────────────────────
    # Primitives
    # ─────────────────────────────────────────────────────────────────

    @abstractmethod
    def is_present(self) -> bool:
        """Whether a value is held. No side effects."""

    @abstractmethod
    def map(self, f: Callable[[T], R]) -> Monadic[W, R]:
        """Transform the held value, staying in the family.

        Absent instances return the family's absent value without calling f.
        Whether a raising f escapes is family-specific.
        """

    @abstractmethod
    def flat_map(self, f: Callable[[T], Monadic[W, R]]) -> Monadic[W, R]:
        """Chain into another instance of the same family.

        Present: returns f(value) as-is. Absent: absent, f not called.
        """

    def adapter(self) -> Adapter[W]:
        """Construction capability of this instance's family."""
        return self.witness.adapter()  # type: ignore[return-value]

    # ─────────────────────────────────────────────────────────────────
    # Filterable
    # ─────────────────────────────────────────────────────────────────

    def filter(self, cond: Callable[[T], bool], other: Monadic[W, T] | None | _Unset = _UNSET) -> Monadic[W, T]:
        """Keep the value if cond holds, else fall back.

        With ``other`` omitted the fallback is always the family's empty().
        An explicit ``other=None`` logs a warning on rejection and degrades
        to empty(). A raising cond is logged and degrades to empty().
        Absent instances never evaluate cond.
        """
        fallback = self.adapter().empty() if isinstance(other, _Unset) else other

        def select(value: T) -> Monadic[W, T]:
            match attempt(lambda: bool(cond(value))):
                case Ok(True):
                    return self
                case Ok(False):
                    if fallback is not None:
                        return fallback
                    self._warn(FailureKind.MISSING_FALLBACK, "filter",
                               "failed to return other case, other is None")
                    return self.adapter().empty()
                case Err(error):
                    self._report(FailureKind.PREDICATE, "filter", "failed to execute a condition predicate", error)
            return self.adapter().empty()

        return self.flat_map(select)

    # ─────────────────────────────────────────────────────────────────
    # Recoverable
    # ─────────────────────────────────────────────────────────────────

    def or_else(self, other: T | Monadic[W, T]) -> Monadic[W, T]:
        """Fallback to a value (wrapped via unit) or to an instance (returned as-is)."""
        if self.is_present():
            return self
        return other if isinstance(other, Monadic) else self.adapter().unit(other)

    def or_else_get(self, supplier: Callable[[], T]) -> Monadic[W, T]:
        """Lazy value fallback. The supplier runs at most once and never when present."""
        if self.is_present():
            return self
        match attempt(supplier):
            case Ok(value):
                return self.adapter().unit(value)
            case Err(error):
                self._report(FailureKind.SUPPLIER, "or_else_get", "failed to run or_else_get, supplier failed", error)
        return self.adapter().empty()

    def or_else_m(self, supplier: Callable[[], Monadic[W, T]]) -> Monadic[W, T]:
        """Lazy instance fallback; the supplied instance is returned unwrapped."""
        if self.is_present():
            return self
        match attempt(supplier):
            case Ok(fallback):
                return fallback
            case Err(error):
                self._report(FailureKind.SUPPLIER, "or_else_m", "failed to run or_else_m, supplier failed", error)
        return self.adapter().empty()

    # ─────────────────────────────────────────────────────────────────
    # Tappable: zero-argument actions
    # ─────────────────────────────────────────────────────────────────

    def peek_when(self, flag: bool, on_true: Action, on_false: Action) -> Monadic[W, T]:
        """Run exactly one action for its side effect; always return self."""
        match attempt(on_true if flag else on_false):
            case Err(error):
                self._report(FailureKind.OBSERVATION, "peek", "failed to run peek action", error)
        return self

    def peek(self, succeeded: Action, failed: Action) -> Monadic[W, T]:
        return self.peek_when(self.is_present(), succeeded, failed)

    def peek_on_success(self, succeeded: Action) -> Monadic[W, T]:
        return self.peek_when(self.is_present(), succeeded, _nothing)

    def peek_on_failure(self, failed: Action) -> Monadic[W, T]:
        return self.peek_when(self.is_present(), _nothing, failed)

    # ─────────────────────────────────────────────────────────────────
    # Tappable: value consumers
    # ─────────────────────────────────────────────────────────────────

    def inspect_when(self, flag: bool, on_true: Consumer[T], on_false: Consumer[T]) -> Monadic[W, T]:
        """Hand the held value to one consumer; runs only when present.

        A raising consumer is logged; the instance is returned unchanged and
        never degraded to empty().
        """
        def observe(value: T) -> Monadic[W, T]:
            match attempt(on_true if flag else on_false, value):
                case Err(error):
                    self._report(FailureKind.OBSERVATION, "inspect", "failed to run inspect consumer", error)
            return self

        return self.flat_map(observe)

    def inspect(self, succeeded: Consumer[T], failed: Consumer[T]) -> Monadic[W, T]:
        return self.inspect_when(self.is_present(), succeeded, failed)

    def inspect_on_success(self, succeeded: Consumer[T]) -> Monadic[W, T]:
        return self.inspect_when(self.is_present(), succeeded, _ignore)

    def inspect_on_failure(self, failed: Consumer[T]) -> Monadic[W, T]:
        # Consumers only run when present, so this never calls `failed`.
        return self.inspect_when(self.is_present(), _ignore, failed)

    # ─────────────────────────────────────────────────────────────────
    # Failure reporting
    # ─────────────────────────────────────────────────────────────────

    def _report(self, kind: FailureKind, combinator: str, event: str, error: Exception) -> None:
        failure = CallbackFailure.from_exception(kind, combinator, error, family=self.witness.family())
        logger(Monadic).error(event, cause=error, **failure.to_log_context())

    def _warn(self, kind: FailureKind, combinator: str, event: str) -> None:
        failure = CallbackFailure(kind=kind, combinator=combinator, family=self.witness.family(), message=event)
        logger(Monadic).warn(event, **failure.to_log_context())


def cast(m: Monadic[W, Any]) -> Monadic[W, R]:
    """Relabel ``Monadic[W, S]`` as ``Monadic[W, R]`` for S a subtype of R.

    Type-level only: implemented as ``m.map(identity)``; never crosses families.
    """
    return m.map(identity)
