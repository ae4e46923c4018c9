from __future__ import annotations

from typing import Dict, List, Tuple

from graphtheory.algorithms.base import Cost
from graphtheory.algorithms.types import ShortestPathResult
from graphtheory.graph.snapshot import EdgeID, NodeID


def build_path_result(
    src_node: NodeID,
    dst_node: NodeID,
    distance: Cost,
    pred: Dict[NodeID, Tuple[NodeID, EdgeID]],
) -> ShortestPathResult:
    """
    Rebuild the src_node -> dst_node path from a single-predecessor map.

    Args:
        src_node: Source node ID.
        dst_node: Destination node ID, reachable from src_node.
        distance: Settled distance of dst_node.
        pred: Maps each reached node (except src_node) to the node it was
            reached from and the id of the edge used.

    Returns:
        A found ShortestPathResult with nodes and edge ids in path order.
    """
    nodes: List[NodeID] = [dst_node]
    edges: List[EdgeID] = []
    node_id = dst_node
    while node_id != src_node:
        node_id, edge_id = pred[node_id]
        nodes.append(node_id)
        edges.append(edge_id)
    nodes.reverse()
    edges.reverse()
    return ShortestPathResult(path=nodes, distance=distance, edges=edges, found=True)
