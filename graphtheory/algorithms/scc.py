"""Strongly connected components (Kosaraju's two-pass algorithm).

Edges are always read as directed (source -> target), even on a snapshot
flagged undirected.

Pass 1 runs depth-first over the forward adjacency from every undiscovered
node in snapshot order and records nodes in post-order. Pass 2 walks the
reverse adjacency, taking roots from the end of that finish list; every tree
it grows is one component. Both passes use explicit stacks.
"""

from __future__ import annotations

from typing import Iterator, List, Set, Tuple

from graphtheory.algorithms.types import SCCResult
from graphtheory.graph.snapshot import Adjacency, EdgeID, GraphSnapshot, NodeID
from graphtheory.logging import get_logger

logger = get_logger(__name__)


def _finish_order(adj: Adjacency) -> List[NodeID]:
    """Return all nodes of ``adj`` in DFS post-order."""
    visited: Set[NodeID] = set()
    order: List[NodeID] = []
    for root in adj:
        if root in visited:
            continue
        visited.add(root)
        stack: List[Tuple[NodeID, Iterator[Tuple[NodeID, EdgeID]]]] = [
            (root, iter(adj[root]))
        ]
        while stack:
            node, neighbors = stack[-1]
            for target, _ in neighbors:
                if target not in visited:
                    visited.add(target)
                    stack.append((target, iter(adj[target])))
                    break
            else:
                stack.pop()
                order.append(node)
    return order


def _collect(adj: Adjacency, root: NodeID, assigned: Set[NodeID]) -> List[NodeID]:
    """Return the unassigned nodes reachable from ``root``, in preorder."""
    assigned.add(root)
    component = [root]
    stack: List[Iterator[Tuple[NodeID, EdgeID]]] = [iter(adj[root])]
    while stack:
        for target, _ in stack[-1]:
            if target not in assigned:
                assigned.add(target)
                component.append(target)
                stack.append(iter(adj[target]))
                break
        else:
            stack.pop()
    return component


def find_sccs(snapshot: GraphSnapshot) -> SCCResult:
    """Partition the graph's nodes into strongly connected components.

    Args:
        snapshot: Graph to analyze. Edges are read source -> target.

    Returns:
        SCCResult with components in the order their roots were taken from the
        end of the pass-1 finish list. Empty for an empty graph.
    """
    forward = snapshot.adjacency(directed=True)
    if not forward:
        return SCCResult()
    reverse = snapshot.adjacency(directed=True, reverse=True)

    finished = _finish_order(forward)
    assigned: Set[NodeID] = set()
    components: List[List[NodeID]] = []
    for node in reversed(finished):
        if node not in assigned:
            components.append(_collect(reverse, node, assigned))

    logger.debug(
        "Found %d strongly connected components over %d nodes",
        len(components),
        len(finished),
    )
    return SCCResult(components=components)
