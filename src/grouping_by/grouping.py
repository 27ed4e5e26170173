"""Method-style access to the grouping functions"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Hashable, TypeVar

from .count_by import count_by
from .group_by import group_by, group_by_as_set
from .group_by_extremum import DEFAULT_FINISHER, group_by_max, group_by_min

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

__all__ = ["Grouping"]

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")
F = TypeVar("F")


class Grouping(Generic[T]):
    """Wrapper giving any finite iterable the grouping functions as methods.

    All methods are terminal: they consume the wrapped iterable, so an
    iterator can be grouped only once, while a collection can be grouped
    any number of times.

    >>> Grouping([-1, -2, 1, 2]).group_by(abs)
    {1: [-1, 1], 2: [-2, 2]}
    """

    __slots__ = ("items",)

    items: Iterable[T]

    def __init__(self, items: Iterable[T]) -> None:
        try:
            iter(items)
        except TypeError as error:
            raise TypeError(
                f"Expected an iterable to group, but got {type(items).__name__}."
            ) from error
        self.items = items

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.items!r})"

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def group_by(self, key_fn: Callable[[T], K]) -> dict[K, list[T]]:
        """Group the items into lists by the given key function."""
        return group_by(self.items, key_fn)

    def group_by_as_set(self, key_fn: Callable[[T], K]) -> dict[K, set[T]]:
        """Group the hashable items into sets by the given key function."""
        return group_by_as_set(self.items, key_fn)

    def group_by_max(
        self,
        key_fn: Callable[[T], K],
        compare_fn: Callable[[T, T], int],
        finish_fn: Callable[[T], F] = DEFAULT_FINISHER,
    ) -> dict[K, F]:
        """Keep the greatest item of each group, passed through the finisher."""
        return group_by_max(self.items, key_fn, compare_fn, finish_fn)

    def group_by_min(
        self,
        key_fn: Callable[[T], K],
        compare_fn: Callable[[T, T], int],
        finish_fn: Callable[[T], F] = DEFAULT_FINISHER,
    ) -> dict[K, F]:
        """Keep the least item of each group, passed through the finisher."""
        return group_by_min(self.items, key_fn, compare_fn, finish_fn)

    def count_by(self, key_fn: Callable[[T], K]) -> dict[K, int]:
        """Count the items per key."""
        return count_by(self.items, key_fn)
