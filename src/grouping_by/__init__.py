"""grouping_by

Grouping operations for any finite iterable, similar to ``GroupBy`` in C# or
``Collectors.groupingBy`` in Java.

All functions consume their input in a single eager pass and return a plain
dictionary. Use the :class:`Grouping` wrapper to call them as methods::

    >>> from grouping_by import Grouping, compare_by
    >>> points = [(1, 2), (1, 3), (2, 2), (2, 2)]
    >>> Grouping(points).group_by(lambda p: p[0])
    {1: [(1, 2), (1, 3)], 2: [(2, 2), (2, 2)]}
    >>> Grouping(points).group_by_max(lambda p: p[0], compare_by(lambda p: p[1]))
    {1: (1, 3), 2: (2, 2)}
"""

# The version of this package

from .version import version, version_info

# Grouping into buckets

from .group_by import group_by, group_by_as_set

# Grouping with reduction to one element per key

from .group_by_extremum import group_by_extremum, group_by_max, group_by_min

# Counting per key

from .count_by import count_by

# Method-style access

from .grouping import Grouping

# Helpers for callers

from .pyutils import compare_by, identity_func

__version__ = version
__version_info__ = version_info


__all__ = [
    "version",
    "version_info",
    "__version__",
    "__version_info__",
    "group_by",
    "group_by_as_set",
    "group_by_extremum",
    "group_by_max",
    "group_by_min",
    "count_by",
    "Grouping",
    "compare_by",
    "identity_func",
]
