"""Collection operations written once against Adapter, is_present and map.

They work for any family because they only construct instances through the
adapter that is passed in explicitly.

Example:
    >>> sequence(MaybeKind.adapter(), [Some(1), Some(2)])
    Some([1, 2])
    >>> traverse(MaybeKind.adapter(), ["1", "x"], parse_int)
    Nothing
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from .witness import Adapter, Witness

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .monadic import Monadic

T = TypeVar("T")
U = TypeVar("U")
W = TypeVar("W", bound=Witness[Any])


def sequence(adapter: Adapter[W], items: Iterable[Monadic[W, T]]) -> Monadic[W, list[T]]:
    """Turn instances into one instance holding a list of their values.

    Fails fast: the first absent item is returned (as the family's absent
    value) and later items are not inspected. Values are collected into a
    single list that is wrapped once, so the cost is linear in the number of items.

    Type signature: [M[W, T]] -> M[W, [T]]
    """
    values: list[T] = []
    for item in items:
        if not item.is_present():
            return item.map(lambda _: values)
        item.map(values.append)
    return adapter.unit(values)


def traverse(adapter: Adapter[W], values: Iterable[T], f: Callable[[T], Monadic[W, U]]) -> Monadic[W, list[U]]:
    """Map f over values and sequence the results, stopping at the first absent result.

    Type signature: [T] -> (T -> M[W, U]) -> M[W, [U]]
    """
    return sequence(adapter, (f(value) for value in values))


def first_present(adapter: Adapter[W], items: Iterable[Monadic[W, T]]) -> Monadic[W, T]:
    """First present instance, or the family's empty()."""
    for item in items:
        if item.is_present():
            return item
    return adapter.empty()
