"""Functional helpers for lists."""

from __future__ import annotations

import functools
from collections.abc import Callable, Hashable, Iterable, Iterator
from typing import Any, Optional, TypeVar

T = TypeVar("T")
V = TypeVar("V")
H = TypeVar("H", bound=Hashable)


def intersect(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """Items of ``a`` that also appear in ``b``, in the order of ``a``."""
    seen = set(b)
    return [item for item in a if item in seen]


def union(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """All items of ``a`` followed by the items of ``b`` not found in ``a``."""
    first = list(a)
    seen = set(first)
    return first + [item for item in b if item not in seen]


def subtract(a: Iterable[H], b: Iterable[H]) -> list[H]:
    """Items of ``a`` that do not appear in ``b``."""
    removed = set(b)
    return [item for item in a if item not in removed]


def map_items(items: Iterable[T], fn: Callable[[T], V]) -> list[V]:
    """Apply ``fn`` to every item."""
    return [fn(item) for item in items]


def filter_items(items: Iterable[T], fn: Callable[[T], bool]) -> list[T]:
    """Keep the items for which ``fn`` is true."""
    return [item for item in items if fn(item)]


def index(items: Iterable[T], fn: Callable[[T], bool]) -> int:
    """Position of the first item satisfying ``fn``, or -1."""
    return next((pos for pos, item in enumerate(items) if fn(item)), -1)


def find(items: Iterable[T], fn: Callable[[T], bool]) -> Optional[T]:
    """First item satisfying ``fn``, or None."""
    return next((item for item in items if fn(item)), None)


def flatten(items: Iterable[Iterable[T]]) -> list[T]:
    """Concatenate the inner sequences."""
    return [item for inner in items for item in inner]


def all_match(items: Iterable[T], fn: Callable[[T], bool]) -> bool:
    """True if every item satisfies ``fn``."""
    return all(fn(item) for item in items)


def any_match(items: Iterable[T], fn: Callable[[T], bool]) -> bool:
    """True if some item satisfies ``fn``."""
    return any(fn(item) for item in items)


def count(items: Iterable[T], fn: Callable[[T], bool]) -> int:
    """Number of items satisfying ``fn``."""
    return sum(1 for item in items if fn(item))


def group_by(items: Iterable[T], fn: Callable[[T], H]) -> dict[H, list[T]]:
    """Group items by the key that ``fn`` gives them."""
    groups: dict[H, list[T]] = {}
    for item in items:
        groups.setdefault(fn(item), []).append(item)
    return groups


def reduce(items: Iterable[T], fn: Callable[[V, T], V], initial: V) -> V:
    """Fold the items into ``initial`` with ``fn``."""
    return functools.reduce(fn, items, initial)


def contains(items: Iterable[Any], pivot: Any) -> bool:
    """True if some item equals ``pivot``."""
    return any(item == pivot for item in items)


def iter_to_list(iterator: Optional[Iterator[T]]) -> list[T]:
    """Drain an iterator into a list; None gives an empty list."""
    if iterator is None:
        return []
    return list(iterator)


def sort_items(items: list[T], less: Callable[[T, T], bool]) -> None:
    """Sort ``items`` in place with a less-than function."""

    def compare(x: T, y: T) -> int:
        if less(x, y):
            return -1
        if less(y, x):
            return 1
        return 0

    items.sort(key=functools.cmp_to_key(compare))