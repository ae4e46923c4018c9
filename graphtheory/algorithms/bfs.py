from __future__ import annotations

from collections import deque
from typing import Dict, Tuple

from graphtheory.algorithms.path_utils import build_path_result
from graphtheory.algorithms.types import ShortestPathResult
from graphtheory.graph.snapshot import EdgeID, GraphSnapshot, NodeID


def bfs_shortest_path(
    snapshot: GraphSnapshot, start: NodeID, end: NodeID
) -> ShortestPathResult:
    """
    Fewest-edges path from ``start`` to ``end``, respecting directedness.

    Weights are ignored; the reported distance is the hop count. Returns the
    "no path" result when either endpoint is absent or ``end`` is unreachable.
    """
    adj = snapshot.adjacency()
    if start not in adj or end not in adj:
        return ShortestPathResult.no_path()

    costs: Dict[NodeID, int] = {start: 0}
    pred: Dict[NodeID, Tuple[NodeID, EdgeID]] = {}
    queue = deque([start])
    while queue:
        node_id = queue.popleft()
        if node_id == end:
            break
        for neighbor_id, edge_id in adj[node_id]:
            if neighbor_id not in costs:
                # first discovery is the shortest in hop count
                costs[neighbor_id] = costs[node_id] + 1
                pred[neighbor_id] = (node_id, edge_id)
                queue.append(neighbor_id)

    if end not in costs:
        return ShortestPathResult.no_path()
    return build_path_result(start, end, costs[end], pred)
