"""Try family: a fallible computation, Success(value) or Failure(exception).

Unlike Maybe, map captures exceptions raised by the supplied function and
turns them into Failure, while flat_map lets them propagate. The family's
empty() is a Failure holding NoValueError, so filter/recover degrading to
empty() still leaves a readable reason behind.

Example:
    >>> Try.of(int, "42").map(lambda x: x * 2)
    Success(84)
    >>> Try.of(int, "x").or_else(0)
    Success(0)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar

from monadic.core import Err, Monadic, Ok, Outcome, Witness, attempt
from monadic.foundation.errors import NoValueError

from .maybe import Maybe, Nothing, Some

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")
P = ParamSpec("P")


class TryKind(Witness["TryKind"]):
    """Witness of the Try family."""

    @classmethod
    def adapter(cls) -> TryAdapter:
        return _ADAPTER


class TryAdapter:
    """unit -> Success(value), empty -> Failure(NoValueError)."""

    __slots__ = ()

    def unit(self, value: T) -> Try[T]:
        return Success(value)

    def empty(self) -> Try[Any]:
        return Failure(NoValueError(TryKind.family()))


_ADAPTER = TryAdapter()


class Try(Monadic[TryKind, T]):
    """Outcome-backed fallible value. Build with Try.of(), Success() or Failure()."""

    __slots__ = ("_outcome",)

    witness = TryKind

    def __init__(self, outcome: Outcome[T, Exception]) -> None:
        self._outcome = outcome

    @staticmethod
    def of(fn: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Try[T]:
        """Run fn now, capturing a raised Exception as Failure."""
        return Try.from_outcome(attempt(fn, *args, **kwargs))

    @staticmethod
    def from_outcome(outcome: Outcome[T, Exception]) -> Try[T]:
        match outcome:
            case Ok(value):
                return Success(value)
            case Err(error):
                return Failure(error)
        raise TypeError(f"not an Outcome variant: {outcome!r}")

    # ─────────────────────────────────────────────────────────────────
    # Primitives
    # ─────────────────────────────────────────────────────────────────

    def is_present(self) -> bool:
        return self._outcome.is_ok()

    def map(self, f: Callable[[T], U]) -> Try[U]:
        """Transform the value; a raising f becomes Failure."""
        match self._outcome:
            case Ok(value):
                return Try.of(f, value)
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[T], Monadic[TryKind, U]]) -> Monadic[TryKind, U]:
        """Chain into another Try. Exceptions raised by f propagate."""
        match self._outcome:
            case Ok(value):
                return f(value)
        return self  # type: ignore[return-value]

    # ─────────────────────────────────────────────────────────────────
    # Extraction & conversion
    # ─────────────────────────────────────────────────────────────────

    def get(self) -> T:
        """Held value.

        Raises:
            NoValueError: If Failure; the held exception is chained as __cause__
        """
        if self._outcome.is_ok():
            return self._outcome.unwrap()
        error = self._outcome.unwrap_err()
        raise NoValueError(TryKind.family(), f"Try failed: {error!r}") from error

    def get_or(self, default: T) -> T:
        return self._outcome.unwrap_or(default)

    def error(self) -> Exception | None:
        """Held exception, None on Success."""
        return self._outcome.err()

    def recover(self, f: Callable[[Exception], T]) -> Try[T]:
        """Turn a Failure into a value computed from its exception."""
        match self._outcome:
            case Err(error):
                return Try.of(f, error)
        return self

    def to_outcome(self) -> Outcome[T, Exception]:
        return self._outcome

    def to_maybe(self) -> Maybe[T]:
        """Some(value) on Success, Nothing on Failure (the exception is dropped)."""
        return self._outcome.match(ok=Some, err=lambda _: Nothing())

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self.is_present()

    def __iter__(self) -> Iterator[T]:
        return iter(self._outcome)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Try):
            return NotImplemented
        return self._outcome == other._outcome

    def __hash__(self) -> int:
        return hash(self._outcome)

    def __repr__(self) -> str:
        return self._outcome.match(ok=lambda v: f"Success({v!r})", err=lambda e: f"Failure({e!r})")


class Success(Try[T]):
    """Present Try. ``case Success(value)`` matches it."""

    __slots__ = ()
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        super().__init__(Ok(value))

    @property
    def value(self) -> T:
        return self.get()


class Failure(Try[Any]):
    """Absent Try carrying the exception that caused it. ``case Failure(exc)`` matches it."""

    __slots__ = ()
    __match_args__ = ("exception",)

    def __init__(self, error: Exception) -> None:
        super().__init__(Err(error))

    @property
    def exception(self) -> Exception:
        return self._outcome.unwrap_err()
