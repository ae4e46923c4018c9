"""Shortest-path-first (SPF) computation for weighted graphs.

Dijkstra over a binary heap. Each heap entry carries the node's position in
snapshot order, so equal tentative distances are settled in node order and
results are deterministic. Among parallel edges the lightest one is used; on
equal weight the earlier edge wins, since relaxation only accepts strictly
shorter distances.

Notes:
    Negative weights are not rejected. Every node is settled at most once, so
    the computation always terminates, but distances and paths may then be
    non-optimal. A warning is logged when such weights are present.

    The search stops once the destination is settled; its distance is final
    at that point.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Set, Tuple

from graphtheory.algorithms.base import Cost
from graphtheory.algorithms.path_utils import build_path_result
from graphtheory.algorithms.types import ShortestPathResult
from graphtheory.config import ANALYSIS_CONFIG
from graphtheory.graph.snapshot import EdgeID, GraphSnapshot, NodeID
from graphtheory.logging import get_logger

logger = get_logger(__name__)


def spf(
    snapshot: GraphSnapshot,
    src_node: NodeID,
    dst_node: Optional[NodeID] = None,
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, Tuple[NodeID, EdgeID]]]:
    """Compute shortest distances from a source node.

    Args:
        snapshot: Graph to search. Directedness follows ``is_directed``;
            weights follow `GraphSnapshot.edge_weight`.
        src_node: Source node. Must be a node of the graph.
        dst_node: Optional destination. When given, the search ends as soon
            as it is settled.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reached node to its tentative (settled, for every
            node popped before termination) distance from src_node.
          - pred: Maps each reached node except src_node to
            ``(predecessor, edge_id)`` of the edge that gave its distance.

    Raises:
        KeyError: If src_node is not in the graph.
    """
    adj = snapshot.adjacency()
    if src_node not in adj:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")

    edges = snapshot.get_edges()
    rank = {node_id: idx for idx, node_id in enumerate(adj)}

    if ANALYSIS_CONFIG.warn_on_negative_weights and any(
        snapshot.edge_weight(edge) < 0 for edge in snapshot.edges
    ):
        logger.warning(
            "Graph has negative edge weights; shortest path results may be incorrect"
        )

    costs: Dict[NodeID, Cost] = {src_node: 0}
    pred: Dict[NodeID, Tuple[NodeID, EdgeID]] = {}
    settled: Set[NodeID] = set()
    min_pq: List[Tuple[Cost, int, NodeID]] = [(0, rank[src_node], src_node)]

    while min_pq:
        current_cost, _, node_id = heappop(min_pq)
        if node_id in settled:
            continue
        settled.add(node_id)
        if node_id == dst_node:
            break

        for neighbor_id, edge_id in adj[node_id]:
            if neighbor_id in settled:
                continue
            new_cost = current_cost + snapshot.edge_weight(edges[edge_id])
            if neighbor_id not in costs or new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = (node_id, edge_id)
                heappush(min_pq, (new_cost, rank[neighbor_id], neighbor_id))

    logger.debug("SPF from '%s' settled %d nodes", src_node, len(settled))
    return costs, pred


def dijkstra_shortest_path(
    snapshot: GraphSnapshot, start: NodeID, end: NodeID
) -> ShortestPathResult:
    """Minimum-weight path from ``start`` to ``end``.

    Missing weights count as the configured default weight (1). Returns the
    "no path" result when either endpoint is absent or ``end`` is unreachable.
    """
    node_ids = snapshot.node_ids()
    if start not in node_ids or end not in node_ids:
        return ShortestPathResult.no_path()

    costs, pred = spf(snapshot, start, dst_node=end)
    if end not in costs:
        return ShortestPathResult.no_path()
    return build_path_result(start, end, costs[end], pred)
