"""Witness and Adapter: naming a container family without knowing its shape.

A Witness is a zero-data class that stands for "the family of containers I am
working with". Python has no higher-kinded types, so a family is named by a
class parameterised by itself:

    >>> class MaybeKind(Witness["MaybeKind"]):
    ...     @classmethod
    ...     def adapter(cls) -> Adapter[MaybeKind]:
    ...         return _MAYBE_ADAPTER

Generic code declared over ``Monadic[W, T]`` can then construct new instances
of whatever family W is through ``W.adapter().unit(...)`` / ``.empty()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from .monadic import Monadic

T = TypeVar("T")
W = TypeVar("W", bound="Witness[Any]")
W_co = TypeVar("W_co", bound="Witness[Any]", covariant=True)


@runtime_checkable
class Adapter(Protocol[W_co]):
    """Per-family construction capability.

    Invariant: ``unit(v).is_present()`` for every v (None included);
    ``not empty().is_present()``.
    """

    def unit(self, value: T) -> Monadic[W_co, T]:
        """Wrap a present value into the family's representation."""
        ...

    def empty(self) -> Monadic[W_co, Any]:
        """Produce the family's canonical absent instance."""
        ...


class Witness(ABC, Generic[W]):
    """Type-level tag identifying a container family.

    Never instantiated; carries no state. Each family defines exactly one
    subclass and supplies its Adapter through adapter().
    """

    __slots__ = ()

    def __new__(cls, *args: object, **kwargs: object) -> Witness[W]:
        raise TypeError(f"{cls.__name__} is a type-level witness and cannot be instantiated")

    @classmethod
    @abstractmethod
    def adapter(cls) -> Adapter[W]:
        """Construction capability of this family."""

    @classmethod
    def family(cls) -> str:
        """Display name of the family (witness class name without a 'Kind' suffix)."""
        name = cls.__name__
        return name[:-4] if name.endswith("Kind") and len(name) > 4 else name
