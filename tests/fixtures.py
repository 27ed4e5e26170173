"""Shared test data"""

from typing import NamedTuple

__all__ = ["Point", "points"]


class Point(NamedTuple):
    x: int
    y: int


points = [Point(1, 2), Point(1, 3), Point(2, 2), Point(2, 2)]
