"""Grouping functions"""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

__all__ = ["group_by", "group_by_as_set"]

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


def group_by(items: Iterable[T], key_fn: Callable[[T], K]) -> dict[K, list[T]]:
    """Group an unsorted collection of items by a key derived via a function.

    The items are consumed in a single pass. Every item lands in the bucket of
    the key computed for it, and the buckets keep the original order of the
    items. The key function is called exactly once per item, in order.
    """
    result: dict[K, list[T]] = {}
    for item in items:
        key = key_fn(item)
        bucket = result.get(key)
        if bucket is None:
            result[key] = [item]
        else:
            bucket.append(item)
    return result


def group_by_as_set(items: Iterable[T], key_fn: Callable[[T], K]) -> dict[K, set[T]]:
    """Group a collection of items into sets by a derived key.

    The items must be hashable. Equal items sharing a key are collapsed into
    one set member.
    """
    result: dict[K, set[T]] = {}
    for item in items:
        key = key_fn(item)
        bucket = result.get(key)
        if bucket is None:
            result[key] = {item}
        else:
            bucket.add(item)
    return result
