"""Comparator construction"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ["compare_by"]

T = TypeVar("T")


def compare_by(key: Callable[[T], Any]) -> Callable[[T, T], int]:
    """Create a comparator that orders items by a derived key.

    The comparator returns -1, 0 or 1 like the ``cmp`` functions accepted by
    :func:`functools.cmp_to_key`. The derived keys only need to support ``<``.
    """

    def compare(a: T, b: T) -> int:
        key_a, key_b = key(a), key(b)
        if key_a < key_b:
            return -1
        if key_b < key_a:
            return 1
        return 0

    return compare
