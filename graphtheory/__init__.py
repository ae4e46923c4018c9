"""graphtheory: structural graph analyses for visual graph exploration.

Every analysis takes an immutable `GraphSnapshot` and returns a fresh result
object keyed by node id / edge id.

Primary API:
    GraphSnapshot, Node, Edge - Input graph model
    run_dfs() - Depth-first traversal with edge classification
    find_sccs() - Strongly connected components
    find_bridges(), find_articulation_points() - Cut edges and cut vertices
    shortest_path() - BFS or Dijkstra depending on ``is_weighted``
    minimum_spanning_tree() - Kruskal minimum spanning forest
    run_analyses() - Run several analyses by name

Example:
    from graphtheory import GraphSnapshot, find_bridges

    g = GraphSnapshot(nodes=["A", "B", "C"], edges=[("A", "B"), ("B", "C")])
    find_bridges(g).bridges  # [("A", "B"), ("B", "C")]
"""

from __future__ import annotations

from graphtheory import cli, logging
from graphtheory.algorithms import (
    ArticulationPointsResult,
    BridgesResult,
    DFSResult,
    EdgeClassification,
    EdgeType,
    MSTResult,
    SCCResult,
    ShortestPathResult,
    bfs_shortest_path,
    dijkstra_shortest_path,
    find_articulation_points,
    find_bridges,
    find_sccs,
    minimum_spanning_tree,
    run_dfs,
    shortest_path,
)
from graphtheory.analysis import run_analyses
from graphtheory.config import ANALYSIS_CONFIG, AnalysisConfig
from graphtheory.graph.convert import from_networkx, to_networkx
from graphtheory.graph.io import load_graph_file, parse_graph_text
from graphtheory.graph.snapshot import Edge, GraphSnapshot, Node

__version__ = "0.1.0"

__all__ = [
    # Input model
    "GraphSnapshot",
    "Node",
    "Edge",
    # Analyses
    "run_dfs",
    "find_sccs",
    "find_bridges",
    "find_articulation_points",
    "shortest_path",
    "bfs_shortest_path",
    "dijkstra_shortest_path",
    "minimum_spanning_tree",
    "run_analyses",
    # Results
    "DFSResult",
    "EdgeClassification",
    "EdgeType",
    "SCCResult",
    "BridgesResult",
    "ArticulationPointsResult",
    "ShortestPathResult",
    "MSTResult",
    # Surfaces
    "parse_graph_text",
    "load_graph_file",
    "from_networkx",
    "to_networkx",
    "AnalysisConfig",
    "ANALYSIS_CONFIG",
    "cli",
    "logging",
]
