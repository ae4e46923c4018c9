"""Result containers returned by the graph algorithms.

Every analysis returns one of these immutable dataclasses. They are created
fresh per call and keyed by node id / edge id so that a visualization layer
can look up styling without re-deriving graph structure. ``to_dict()`` gives
a JSON-serializable form.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from graphtheory.algorithms.base import INF_COST, Cost, EdgeType
from graphtheory.graph.snapshot import EdgeID, NodeID


@dataclass(frozen=True)
class EdgeClassification:
    """DFS classification of a single edge."""

    edge_id: EdgeID
    type: EdgeType


@dataclass(frozen=True)
class DFSResult:
    """Depth-first traversal summary.

    Attributes:
        visited: Node ids in visitation (discovery) order.
        edge_classifications: One entry per classified edge, in the order the
            traversal examined them.
        discovery_time: Node id -> discovery timestamp (1-indexed).
        finish_time: Node id -> finish timestamp, sharing the discovery counter.
    """

    visited: List[NodeID] = field(default_factory=list)
    edge_classifications: List[EdgeClassification] = field(default_factory=list)
    discovery_time: Dict[NodeID, int] = field(default_factory=dict)
    finish_time: Dict[NodeID, int] = field(default_factory=dict)

    def edge_types(self) -> Dict[EdgeID, EdgeType]:
        """Return a mapping of edge id to its classification."""
        return {c.edge_id: c.type for c in self.edge_classifications}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "visited": list(self.visited),
            "edge_classifications": [
                {"edge_id": c.edge_id, "type": c.type.value}
                for c in self.edge_classifications
            ],
            "discovery_time": dict(self.discovery_time),
            "finish_time": dict(self.finish_time),
        }


@dataclass(frozen=True)
class SCCResult:
    """Strongly connected components, a partition of the node set."""

    components: List[List[NodeID]] = field(default_factory=list)

    def component_of(self) -> Dict[NodeID, int]:
        """Return a mapping of node id to the index of its component."""
        return {
            node_id: idx
            for idx, component in enumerate(self.components)
            for node_id in component
        }

    def to_dict(self) -> Dict[str, Any]:
        return {"components": [list(c) for c in self.components]}


@dataclass(frozen=True)
class BridgesResult:
    """Bridge edges of the undirected interpretation of a graph.

    Attributes:
        bridges: ``(source, target)`` endpoint pairs, in edge order.
        edge_ids: Ids of the bridge edges, aligned with ``bridges``.
    """

    bridges: List[Tuple[NodeID, NodeID]] = field(default_factory=list)
    edge_ids: List[EdgeID] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bridges": [list(pair) for pair in self.bridges],
            "edge_ids": list(self.edge_ids),
        }


@dataclass(frozen=True)
class ArticulationPointsResult:
    """Articulation points (cut vertices), in snapshot node order."""

    points: List[NodeID] = field(default_factory=list)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.points

    def to_dict(self) -> Dict[str, Any]:
        return {"points": list(self.points)}


@dataclass(frozen=True)
class ShortestPathResult:
    """Single-pair shortest path.

    A result with ``found=False`` is the explicit "no path" outcome: empty
    path and edge lists, infinite distance. Use `ShortestPathResult.no_path`
    to build it.

    Attributes:
        path: Node ids from start to end inclusive.
        distance: Sum of edge weights, or hop count for unweighted graphs.
        edges: Edge ids used, one per consecutive node pair in ``path``.
        found: Whether the end node is reachable from the start node.
    """

    path: List[NodeID] = field(default_factory=list)
    distance: Cost = INF_COST
    edges: List[EdgeID] = field(default_factory=list)
    found: bool = False

    @classmethod
    def no_path(cls) -> "ShortestPathResult":
        return cls(path=[], distance=INF_COST, edges=[], found=False)

    def __bool__(self) -> bool:
        return self.found

    def to_dict(self) -> Dict[str, Any]:
        # JSON has no infinity; an unreachable end is reported as null
        distance = None if math.isinf(self.distance) else self.distance
        return {
            "found": self.found,
            "path": list(self.path),
            "distance": distance,
            "edges": list(self.edges),
        }


@dataclass(frozen=True)
class MSTResult:
    """Minimum spanning forest.

    Attributes:
        edges: Accepted edge ids, in acceptance order.
        total_weight: Sum of the accepted edges' weights.
    """

    edges: List[EdgeID] = field(default_factory=list)
    total_weight: Cost = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"edges": list(self.edges), "total_weight": self.total_weight}
