"""Grouping with reduction to an extremal element per key"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Hashable, TypeVar, cast

from .pyutils import identity_func

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

__all__ = ["group_by_extremum", "group_by_max", "group_by_min"]

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")
F = TypeVar("F")

DEFAULT_FINISHER = cast(Any, identity_func)


def group_by_extremum(
    items: Iterable[T],
    key_fn: Callable[[T], K],
    compare_fn: Callable[[T, T], int],
    finish_fn: Callable[[T], F] = DEFAULT_FINISHER,
    *,
    maximum: bool = True,
) -> dict[K, F]:
    """Group items by a derived key, keeping only the extremal item per key.

    For every key, the item that compares greatest (or least if ``maximum`` is
    false) according to ``compare_fn`` is kept. The comparator follows the
    convention of :func:`functools.cmp_to_key`: a negative result means that
    the first argument is less than the second one, a positive result that it
    is greater, and zero that both are equal.

    A holder is replaced only if a later item is strictly more extremal, so
    among equal items the first one seen wins. Only one item per key is held
    during the pass. When the pass is complete, ``finish_fn`` is applied once
    to each holder and its return value is stored under the key.

    If ``compare_fn`` is not a consistent ordering, the selected item depends
    on the order of the items. This is not checked.
    """
    holders: dict[K, T] = {}
    for item in items:
        key = key_fn(item)
        if key not in holders:
            holders[key] = item
            continue
        order = compare_fn(item, holders[key])
        if (order > 0) if maximum else (order < 0):
            holders[key] = item
    return {key: finish_fn(holder) for key, holder in holders.items()}


def group_by_max(
    items: Iterable[T],
    key_fn: Callable[[T], K],
    compare_fn: Callable[[T, T], int],
    finish_fn: Callable[[T], F] = DEFAULT_FINISHER,
) -> dict[K, F]:
    """Group items by a derived key, keeping the greatest item per key."""
    return group_by_extremum(items, key_fn, compare_fn, finish_fn, maximum=True)


def group_by_min(
    items: Iterable[T],
    key_fn: Callable[[T], K],
    compare_fn: Callable[[T, T], int],
    finish_fn: Callable[[T], F] = DEFAULT_FINISHER,
) -> dict[K, F]:
    """Group items by a derived key, keeping the least item per key."""
    return group_by_extremum(items, key_fn, compare_fn, finish_fn, maximum=False)
