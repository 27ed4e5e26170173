"""Python Utils

This package contains dependency-free Python utility functions used by the
grouping functions and useful for calling them.

Each utility should belong in its own file and be the default export.
"""

from .compare_by import compare_by
from .identity_func import identity_func

__all__ = ["compare_by", "identity_func"]
