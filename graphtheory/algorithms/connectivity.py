"""Bridges and articulation points via low-link DFS.

Both analyses treat the graph as undirected, whatever its ``is_directed``
flag. A single depth-first pass assigns each node a discovery index ``tin``
and a low-link value ``low``: the smallest ``tin`` reachable from the node's
subtree through at most one non-tree edge.

The edge leading back to the DFS parent is excluded by *edge id*, not by
parent node id. A second parallel edge to the parent therefore counts as a
back edge, and a pair of nodes joined by two or more parallel edges never
yields a bridge.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Set, Tuple

from graphtheory.algorithms.types import ArticulationPointsResult, BridgesResult
from graphtheory.graph.snapshot import Adjacency, EdgeID, GraphSnapshot, NodeID
from graphtheory.logging import get_logger

logger = get_logger(__name__)


def _low_link(adj: Adjacency) -> Tuple[Set[EdgeID], Set[NodeID]]:
    """Run the low-link DFS over every component of ``adj``.

    Returns:
        A tuple ``(bridge_edge_ids, articulation_node_ids)``.
    """
    tin: Dict[NodeID, int] = {}
    low: Dict[NodeID, int] = {}
    bridges: Set[EdgeID] = set()
    cut_nodes: Set[NodeID] = set()
    timer = 0

    for root in adj:
        if root in tin:
            continue
        tin[root] = low[root] = timer
        timer += 1
        root_children = 0
        # (node, id of the tree edge used to reach it, neighbor iterator)
        stack: List[
            Tuple[NodeID, Optional[EdgeID], Iterator[Tuple[NodeID, EdgeID]]]
        ] = [(root, None, iter(adj[root]))]

        while stack:
            node, parent_edge, neighbors = stack[-1]
            descended = False
            for target, edge_id in neighbors:
                if edge_id == parent_edge:
                    continue
                if target in tin:
                    low[node] = min(low[node], tin[target])
                    continue
                tin[target] = low[target] = timer
                timer += 1
                stack.append((target, edge_id, iter(adj[target])))
                descended = True
                break
            if descended:
                continue

            stack.pop()
            if not stack:
                break
            parent = stack[-1][0]
            low[parent] = min(low[parent], low[node])
            if low[node] > tin[parent]:
                bridges.add(parent_edge)
            if parent == root:
                root_children += 1
            elif low[node] >= tin[parent]:
                cut_nodes.add(parent)

        if root_children > 1:
            cut_nodes.add(root)

    return bridges, cut_nodes


def find_bridges(snapshot: GraphSnapshot) -> BridgesResult:
    """Find edges whose removal disconnects their component.

    Args:
        snapshot: Graph to analyze, read as undirected.

    Returns:
        BridgesResult with ``(source, target)`` pairs in snapshot edge order.
    """
    bridge_ids, _ = _low_link(snapshot.adjacency(directed=False))
    pairs: List[Tuple[NodeID, NodeID]] = []
    edge_ids: List[EdgeID] = []
    for edge in snapshot.edges:
        if edge.id in bridge_ids:
            pairs.append((edge.source, edge.target))
            edge_ids.append(edge.id)
    logger.debug("Found %d bridges among %d edges", len(pairs), len(snapshot.edges))
    return BridgesResult(bridges=pairs, edge_ids=edge_ids)


def find_articulation_points(snapshot: GraphSnapshot) -> ArticulationPointsResult:
    """Find nodes whose removal increases the number of connected components.

    Args:
        snapshot: Graph to analyze, read as undirected.

    Returns:
        ArticulationPointsResult with points in snapshot node order.
    """
    adj = snapshot.adjacency(directed=False)
    _, cut_nodes = _low_link(adj)
    points = [node for node in adj if node in cut_nodes]
    logger.debug("Found %d articulation points", len(points))
    return ArticulationPointsResult(points=points)
