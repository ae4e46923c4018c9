"""Graph algorithms over `GraphSnapshot` inputs.

Each public function is pure: it reads a snapshot and returns a fresh result
object from `graphtheory.algorithms.types`.
"""

from graphtheory.algorithms.base import Cost, EdgeType
from graphtheory.algorithms.bfs import bfs_shortest_path
from graphtheory.algorithms.connectivity import (
    find_articulation_points,
    find_bridges,
)
from graphtheory.algorithms.dfs import run_dfs
from graphtheory.algorithms.mst import minimum_spanning_tree
from graphtheory.algorithms.paths import shortest_path
from graphtheory.algorithms.scc import find_sccs
from graphtheory.algorithms.spf import dijkstra_shortest_path, spf
from graphtheory.algorithms.types import (
    ArticulationPointsResult,
    BridgesResult,
    DFSResult,
    EdgeClassification,
    MSTResult,
    SCCResult,
    ShortestPathResult,
)

__all__ = [
    "ArticulationPointsResult",
    "BridgesResult",
    "Cost",
    "DFSResult",
    "EdgeClassification",
    "EdgeType",
    "MSTResult",
    "SCCResult",
    "ShortestPathResult",
    "bfs_shortest_path",
    "dijkstra_shortest_path",
    "find_articulation_points",
    "find_bridges",
    "find_sccs",
    "minimum_spanning_tree",
    "run_dfs",
    "shortest_path",
    "spf",
]
