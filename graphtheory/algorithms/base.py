"""Base types and enums shared by the graph algorithms."""

from __future__ import annotations

from enum import Enum
from typing import Union

#: Represents a path length: a sum of edge weights or a hop count.
Cost = Union[int, float]

#: Distance reported when no path exists.
INF_COST: float = float("inf")


class EdgeType(str, Enum):
    """Classification of an edge relative to the depth-first forest.

    Members compare equal to their lowercase names, so results can be keyed
    by plain strings in visualization code.
    """

    #: Target was undiscovered; the traversal descended through this edge.
    TREE = "tree"
    #: Target is on the active traversal stack; the edge closes a cycle.
    BACK = "back"
    #: Target is finished and was discovered before the current node.
    FORWARD = "forward"
    #: Target is finished and was discovered after the current node.
    CROSS = "cross"

    def __str__(self) -> str:
        return self.value
