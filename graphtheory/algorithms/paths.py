"""Single-pair shortest path dispatch.

Weighted snapshots use Dijkstra (`graphtheory.algorithms.spf`); unweighted
ones use breadth-first search (`graphtheory.algorithms.bfs`). Either way the
result lists, for each consecutive pair of path nodes, the id of the edge
actually traversed, and an unreachable or absent endpoint produces the
explicit "no path" result instead of an exception.
"""

from __future__ import annotations

from graphtheory.algorithms.bfs import bfs_shortest_path
from graphtheory.algorithms.spf import dijkstra_shortest_path
from graphtheory.algorithms.types import ShortestPathResult
from graphtheory.graph.snapshot import GraphSnapshot, NodeID
from graphtheory.logging import get_logger

logger = get_logger(__name__)


def shortest_path(
    snapshot: GraphSnapshot, start: NodeID, end: NodeID
) -> ShortestPathResult:
    """Shortest path from ``start`` to ``end``.

    Args:
        snapshot: Graph to search.
        start: Start node id.
        end: End node id.

    Returns:
        ShortestPathResult. ``found`` is False when no path exists.
    """
    if snapshot.is_weighted:
        result = dijkstra_shortest_path(snapshot, start, end)
    else:
        result = bfs_shortest_path(snapshot, start, end)

    if result.found:
        logger.debug(
            "Shortest path %s -> %s: %d hops, distance %s",
            start,
            end,
            len(result.edges),
            result.distance,
        )
    else:
        logger.debug("No path from %s to %s", start, end)
    return result
