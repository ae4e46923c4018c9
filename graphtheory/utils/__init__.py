"""Utility helpers used across graphtheory.

This package contains small, self-contained utilities that do not depend on
project internals.
"""

from graphtheory.utils.union_find import UnionFind

__all__ = [
    "UnionFind",
]
