"""Maybe family: an optional value, Some(value) or Nothing().

map lets exceptions from the mapping function escape; Maybe has no failure
channel to put them in.

Example:
    >>> Some(5).map(lambda x: x + 1).filter(lambda x: x > 3)
    Some(6)
    >>> Maybe.of_optional(None).or_else(10)
    Some(10)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, ClassVar, TypeVar

from monadic.core import Monadic, Witness
from monadic.foundation.errors import NoValueError

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")
U = TypeVar("U")


class MaybeKind(Witness["MaybeKind"]):
    """Witness of the Maybe family."""

    @classmethod
    def adapter(cls) -> MaybeAdapter:
        return _ADAPTER


class MaybeAdapter:
    """unit -> Some(value), empty -> the Nothing singleton."""

    __slots__ = ()

    def unit(self, value: T) -> Maybe[T]:
        return Some(value)

    def empty(self) -> Maybe[Any]:
        return Nothing()


_ADAPTER = MaybeAdapter()


class Maybe(Monadic[MaybeKind, T]):
    """Base of Some/Nothing. Not instantiated directly."""

    __slots__ = ()

    witness = MaybeKind

    @staticmethod
    def of_optional(value: T | None) -> Maybe[T]:
        """Some(value) unless value is None."""
        return Nothing() if value is None else Some(value)

    def get(self) -> T:
        """Held value.

        Raises:
            NoValueError: If Nothing
        """
        raise NoValueError(MaybeKind.family())

    def get_or(self, default: T) -> T:
        return default

    def to_optional(self) -> T | None:
        return None

    def __bool__(self) -> bool:
        return self.is_present()

    def __iter__(self) -> Iterator[T]:
        return iter(())


class Some(Maybe[T]):
    """Present Maybe. ``case Some(value)`` matches it."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        self._value = value

    @property
    def value(self) -> T:
        return self._value

    def is_present(self) -> bool:
        return True

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        return Some(f(self._value))

    def flat_map(self, f: Callable[[T], Monadic[MaybeKind, U]]) -> Monadic[MaybeKind, U]:
        return f(self._value)

    def get(self) -> T:
        return self._value

    def get_or(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def to_optional(self) -> T | None:
        return self._value

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return isinstance(other, Some) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Maybe[Any]):
    """Absent Maybe. A singleton: ``Nothing() is Nothing()``."""

    __slots__ = ()

    _instance: ClassVar[Nothing | None] = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_present(self) -> bool:
        return False

    def map(self, f: Callable[[Any], U]) -> Maybe[U]:  # noqa: ARG002
        return self

    def flat_map(self, f: Callable[[Any], Monadic[MaybeKind, U]]) -> Monadic[MaybeKind, U]:  # noqa: ARG002
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return other is self

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing"
