"""Outcome of invoking a user-supplied callback.

Combinators that must not let a callback failure escape (filter, recover,
observe) run the callback through attempt() and pattern-match on the
resulting Outcome instead of wrapping their own logic in try/except:

    >>> match attempt(int, "42"):
    ...     case Ok(value): ...
    ...     case Err(error): ...

Outcome is also the storage of the Try family.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Generic,
    ParamSpec,
    TypeVar,
    cast,
)

if TYPE_CHECKING:
    from collections.abc import Iterator

# Type variables for generic Outcome
T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type
P = ParamSpec("P")


class Outcome(Generic[T, E]):
    """Discriminated union of a callback's success (Ok) or failure (Err).

    Examples:
        >>> attempt(lambda: 1 // 0).is_err()
        True
        >>> Ok(2).map(lambda x: x * 2).unwrap()
        4

    Notes:
        - Uses __slots__; immutable (all operations return new Outcome)
        - Pattern matching via Ok(...)/Err(...) class patterns
    """

    __slots__ = ("_value", "_is_ok")

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        self._value: T | E = value
        self._is_ok: bool = is_ok

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract Ok value, re-raise (or raise) on Err.

        Raises:
            The held exception if Err holds one, RuntimeError otherwise
        """
        if self._is_ok:
            return cast(T, self._value)
        if isinstance(self._value, BaseException):
            raise self._value
        raise RuntimeError(f"Called unwrap() on Err value: {self._value}")

    def unwrap_err(self) -> E:
        """Extract Err value.

        Raises:
            RuntimeError: If Outcome is Ok
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise RuntimeError(f"Called unwrap_err() on Ok value: {self._value}")

    def unwrap_or(self, default: T) -> T:
        """Extract Ok value or return default."""
        return cast(T, self._value) if self._is_ok else default

    def ok(self) -> T | None:
        return cast(T, self._value) if self._is_ok else None

    def err(self) -> E | None:
        return cast(E, self._value) if not self._is_ok else None

    # ─────────────────────────────────────────────────────────────────
    # Functor / Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Outcome[U, E]:
        """Map function over Ok value, preserve Err unchanged."""
        if self._is_ok:
            return Ok(f(cast(T, self._value)))
        return cast("Outcome[U, E]", self)

    def map_err(self, f: Callable[[E], F]) -> Outcome[T, F]:
        """Map function over Err value, preserve Ok unchanged."""
        if not self._is_ok:
            return Err(f(cast(E, self._value)))
        return cast("Outcome[T, F]", self)

    def flat_map(self, f: Callable[[T], Outcome[U, E]]) -> Outcome[U, E]:
        """Monadic bind: chain an operation that can itself fail."""
        if self._is_ok:
            return f(cast(T, self._value))
        return cast("Outcome[U, E]", self)

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case analysis over both variants."""
        if self._is_ok:
            return ok(cast(T, self._value))
        return err(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_ok

    def __repr__(self) -> str:
        return f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Outcome):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        """Yield the Ok value (0 or 1 element)."""
        if self._is_ok:
            yield cast(T, self._value)


class Ok(Outcome[T, E]):
    """Success variant. Usable as a constructor and as a match pattern: ``case Ok(value)``."""

    __slots__ = ()
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        super().__init__(value, True)

    @property
    def value(self) -> T:
        return cast(T, self._value)


class Err(Outcome[T, E]):
    """Failure variant. Usable as a constructor and as a match pattern: ``case Err(error)``."""

    __slots__ = ()
    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        super().__init__(error, False)

    @property
    def error(self) -> E:
        return cast(E, self._value)


def attempt(fn: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Outcome[T, Exception]:
    """Invoke fn, capturing any Exception as Err.

    BaseExceptions that are not Exceptions (KeyboardInterrupt, SystemExit)
    propagate.
    """
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as e:
        return Err(e)
