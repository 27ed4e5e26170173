"""Counting function"""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

__all__ = ["count_by"]

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


def count_by(items: Iterable[T], key_fn: Callable[[T], K]) -> dict[K, int]:
    """Count the items of a collection per key derived via a function."""
    result: dict[K, int] = {}
    for item in items:
        key = key_fn(item)
        result[key] = result.get(key, 0) + 1
    return result
