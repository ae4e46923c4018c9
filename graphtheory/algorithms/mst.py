"""Minimum spanning forest (Kruskal).

Edges are read as undirected. Each edge is weighted by
`GraphSnapshot.edge_weight` (its own weight on a weighted graph, 1 otherwise)
and the edge list is stably sorted by weight, so ties keep snapshot edge
order. An edge is accepted iff its endpoints are still in different sets of
a `UnionFind` owned by the call. Disconnected graphs yield a forest;
self-loops are never accepted.
"""

from __future__ import annotations

from typing import List

from graphtheory.algorithms.base import Cost
from graphtheory.algorithms.types import MSTResult
from graphtheory.graph.snapshot import EdgeID, GraphSnapshot
from graphtheory.logging import get_logger
from graphtheory.utils.union_find import UnionFind

logger = get_logger(__name__)


def minimum_spanning_tree(snapshot: GraphSnapshot) -> MSTResult:
    """Compute a minimum spanning forest.

    Args:
        snapshot: Graph to span. Directedness is ignored.

    Returns:
        MSTResult with accepted edge ids in acceptance order and their total
        weight. Empty with weight 0 for a graph without edges.
    """
    sets = UnionFind(snapshot.node_ids())
    weighted = [(snapshot.edge_weight(edge), edge) for edge in snapshot.edges]
    weighted.sort(key=lambda item: item[0])

    accepted: List[EdgeID] = []
    total: Cost = 0
    for weight, edge in weighted:
        if sets.union(edge.source, edge.target):
            accepted.append(edge.id)
            total += weight

    logger.debug(
        "MST accepted %d of %d edges, %d trees, total weight %s",
        len(accepted),
        len(weighted),
        sets.count_sets(),
        total,
    )
    return MSTResult(edges=accepted, total_weight=total)
