"""Depth-first traversal with timestamps and edge classification.

The traversal walks the graph per its ``is_directed`` flag (undirected graphs
use a symmetric adjacency), starting from the requested node and then sweeping
every still-undiscovered node in snapshot order. Nodes receive discovery and
finish timestamps from a single counter that is threaded through `_visit` and
returned by it.

The walk uses an explicit stack of ``(node, neighbor iterator)`` pairs. The
order of discoveries, finishes and classifications is identical to that of
the textbook recursive formulation, without depending on the interpreter's
recursion limit.

Classification of an edge ``node -> target``:
    - tree: ``target`` is undiscovered.
    - back: ``target`` is discovered but not finished (self-loops included).
    - forward: ``target`` is finished and ``disc[target] < disc[node]``.
    - cross: ``target`` is finished and ``disc[target] >= disc[node]``.

In an undirected graph each edge is classified once, from whichever endpoint
examines it first.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set, Tuple

from graphtheory.algorithms.base import EdgeType
from graphtheory.algorithms.types import DFSResult, EdgeClassification
from graphtheory.graph.snapshot import Adjacency, EdgeID, GraphSnapshot, NodeID
from graphtheory.logging import get_logger

logger = get_logger(__name__)


@dataclass
class _Forest:
    """Traversal bookkeeping for one `run_dfs` call."""

    visited: List[NodeID] = field(default_factory=list)
    discovery: Dict[NodeID, int] = field(default_factory=dict)
    finish: Dict[NodeID, int] = field(default_factory=dict)
    classifications: List[EdgeClassification] = field(default_factory=list)
    seen_edges: Set[EdgeID] = field(default_factory=set)


def _classify(forest: _Forest, node: NodeID, target: NodeID) -> EdgeType:
    if target not in forest.finish:
        return EdgeType.BACK
    if forest.discovery[target] < forest.discovery[node]:
        return EdgeType.FORWARD
    return EdgeType.CROSS


def _visit(
    adj: Adjacency,
    root: NodeID,
    time: int,
    forest: _Forest,
    once_per_edge: bool,
) -> int:
    """Run one depth-first tree from ``root``.

    Args:
        adj: Adjacency map of ``(neighbor, edge_id)`` pairs.
        root: Undiscovered node to start from.
        time: Last timestamp handed out before this tree.
        forest: Bookkeeping shared by all trees of the traversal.
        once_per_edge: Skip edge ids already classified (undirected graphs).

    Returns:
        The last timestamp handed out by this tree.
    """
    time += 1
    forest.discovery[root] = time
    forest.visited.append(root)
    stack: List[Tuple[NodeID, Iterator[Tuple[NodeID, EdgeID]]]] = [
        (root, iter(adj[root]))
    ]

    while stack:
        node, neighbors = stack[-1]
        descended = False
        for target, edge_id in neighbors:
            if once_per_edge:
                if edge_id in forest.seen_edges:
                    continue
                forest.seen_edges.add(edge_id)

            if target not in forest.discovery:
                forest.classifications.append(
                    EdgeClassification(edge_id, EdgeType.TREE)
                )
                time += 1
                forest.discovery[target] = time
                forest.visited.append(target)
                stack.append((target, iter(adj[target])))
                descended = True
                break

            forest.classifications.append(
                EdgeClassification(edge_id, _classify(forest, node, target))
            )

        if not descended:
            stack.pop()
            time += 1
            forest.finish[node] = time

    return time


def run_dfs(snapshot: GraphSnapshot, start_node: Optional[NodeID] = None) -> DFSResult:
    """Depth-first traversal with edge classification.

    Args:
        snapshot: Graph to traverse.
        start_node: Node to start from. Defaults to the first node. An id that
            is not part of the graph is ignored with a warning.

    Returns:
        DFSResult covering every node of the graph. Empty for an empty graph.
    """
    adj = snapshot.adjacency()
    if not adj:
        return DFSResult()

    if start_node is not None and start_node not in adj:
        logger.warning(
            "DFS start node '%s' is not in the graph; starting from the first node",
            start_node,
        )
        start_node = None

    order = list(adj)
    if start_node is None:
        start_node = order[0]

    forest = _Forest()
    once_per_edge = not snapshot.is_directed
    time = _visit(adj, start_node, 0, forest, once_per_edge)
    for node in order:
        if node not in forest.discovery:
            time = _visit(adj, node, time, forest, once_per_edge)

    logger.debug(
        "DFS visited %d nodes, classified %d edges, last timestamp %d",
        len(forest.visited),
        len(forest.classifications),
        time,
    )
    return DFSResult(
        visited=forest.visited,
        edge_classifications=forest.classifications,
        discovery_time=forest.discovery,
        finish_time=forest.finish,
    )
