from collections import Counter
from random import Random

from pytest import mark

from grouping_by import count_by, group_by, group_by_max, group_by_min

from .fixtures import Point


def random_points(seed: int, size: int, spread: int = 10) -> list:
    rand = Random(seed)
    return [
        Point(rand.randrange(spread), rand.randrange(spread)) for _ in range(size)
    ]


def key_fn(point: Point) -> int:
    return point.x


def compare_fn(a: Point, b: Point) -> int:
    return (a.y > b.y) - (a.y < b.y)


def check_properties(items: list) -> None:
    groups = group_by(items, key_fn)

    # every item lands in exactly one bucket
    assert Counter(item for bucket in groups.values() for item in bucket) == Counter(
        items
    )
    # buckets keep the original order
    for key, bucket in groups.items():
        assert bucket == [item for item in items if key_fn(item) == key]
    # keys are correct and complete
    assert set(groups) == {key_fn(item) for item in items}
    assert count_by(items, key_fn) == {key: len(b) for key, b in groups.items()}

    maxima = group_by_max(items, key_fn, compare_fn)
    minima = group_by_min(items, key_fn, compare_fn)
    assert set(maxima) == set(minima) == set(groups)
    for key, bucket in groups.items():
        winner = maxima[key]
        assert all(compare_fn(item, winner) <= 0 for item in bucket)
        # the first of the equal maxima is selected
        assert next(i for i in bucket if compare_fn(i, winner) == 0) is winner
        winner = minima[key]
        assert all(compare_fn(item, winner) >= 0 for item in bucket)
        assert next(i for i in bucket if compare_fn(i, winner) == 0) is winner


def describe_grouping_properties():
    def hold_for_small_inputs():
        for seed in range(20):
            check_properties(random_points(seed, seed * 5))

    def are_deterministic():
        items = random_points(42, 200)
        assert group_by_max(items, key_fn, compare_fn) == group_by_max(
            items, key_fn, compare_fn
        )

    @mark.slow
    def hold_for_large_inputs():
        for seed in range(5):
            check_properties(random_points(seed, 20_000, 100))
