"""Immutable graph snapshot consumed by every analysis.

`GraphSnapshot` is the input contract between the graph editor and the
algorithm library: an ordered node list, an ordered edge list and two flags
(`is_directed`, `is_weighted`). Algorithms never mutate it; they derive
adjacency maps from it through `GraphSnapshot.adjacency()`.

Edges may reference node ids that are missing from ``nodes``. Such ids are
treated as implicit nodes, appended after the declared nodes in order of
first appearance in the edge list. Callers that prefer rejection can call
`GraphSnapshot.validate()` before running an analysis.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Iterable, List, Optional, Set, Tuple, Union

from graphtheory.config import ANALYSIS_CONFIG
from graphtheory.logging import get_logger

logger = get_logger(__name__)

NodeID = str
EdgeID = Hashable
Weight = Union[int, float]
# node -> [(neighbor, edge_id), ...]; key order is the traversal order of nodes
Adjacency = Dict[NodeID, List[Tuple[NodeID, EdgeID]]]


@dataclass(frozen=True)
class Node:
    """A graph node. ``label`` and position are display-only."""

    id: NodeID
    label: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None


@dataclass(frozen=True)
class Edge:
    """A graph edge with a caller-supplied identifier."""

    id: EdgeID
    source: NodeID
    target: NodeID
    weight: Optional[Weight] = None
    label: Optional[str] = None

    @property
    def is_self_loop(self) -> bool:
        return self.source == self.target


def make_edge_id(source: NodeID, target: NodeID, taken: Set[EdgeID]) -> str:
    """Return ``"source-target"``, suffixed with ``#n`` if already taken.

    The chosen id is added to ``taken``.
    """
    base = f"{source}-{target}"
    edge_id = base
    counter = 1
    while edge_id in taken:
        counter += 1
        edge_id = f"{base}#{counter}"
    taken.add(edge_id)
    return edge_id


def _coerce_node(item: Union[Node, NodeID]) -> Node:
    if isinstance(item, Node):
        return item
    return Node(id=item, label=item)


def _coerce_edges(items: Iterable[Any]) -> Tuple[Edge, ...]:
    edges: List[Edge] = []
    taken: Set[EdgeID] = {item.id for item in items if isinstance(item, Edge)}
    for item in items:
        if isinstance(item, Edge):
            edges.append(item)
            continue
        if len(item) == 2:
            source, target = item
            weight = None
        elif len(item) == 3:
            source, target, weight = item
        else:
            raise ValueError(
                "Edge tuple must be (source, target) or (source, target, weight), "
                f"got {item!r}"
            )
        edges.append(
            Edge(
                id=make_edge_id(source, target, taken),
                source=source,
                target=target,
                weight=weight,
            )
        )
    return tuple(edges)


@dataclass(frozen=True)
class GraphSnapshot:
    """Immutable view of a graph for a single analysis.

    Plain strings in ``nodes`` are accepted as node ids, and
    ``(source, target)`` or ``(source, target, weight)`` tuples in ``edges``
    are accepted as edges with generated ``"source-target"`` ids.

    Attributes:
        nodes: Ordered nodes. Order drives traversal sweeps and tie-breaking.
        edges: Ordered edges. Order drives adjacency order and MST tie-breaking.
        is_directed: Whether edges are traversed source->target only.
        is_weighted: Whether edge weights are meaningful.
    """

    nodes: Tuple[Node, ...] = ()
    edges: Tuple[Edge, ...] = ()
    is_directed: bool = False
    is_weighted: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(_coerce_node(n) for n in self.nodes))
        object.__setattr__(self, "edges", _coerce_edges(list(self.edges)))

    #
    # Node and edge access
    #
    def declared_node_ids(self) -> List[NodeID]:
        """Return declared node ids in order, duplicates removed."""
        return list(dict.fromkeys(node.id for node in self.nodes))

    def implicit_node_ids(self) -> List[NodeID]:
        """Return ids referenced by edges but missing from ``nodes``."""
        declared = set(self.declared_node_ids())
        implicit: Dict[NodeID, None] = {}
        for edge in self.edges:
            for node_id in (edge.source, edge.target):
                if node_id not in declared:
                    implicit.setdefault(node_id, None)
        return list(implicit)

    def node_ids(self) -> List[NodeID]:
        """Return all node ids: declared ones first, then implicit ones."""
        return self.declared_node_ids() + self.implicit_node_ids()

    def get_edges(self) -> Dict[EdgeID, Edge]:
        """Return a mapping of edge id to edge. Later duplicates win."""
        return {edge.id: edge for edge in self.edges}

    def edge_weight(self, edge: Edge) -> Weight:
        """Return the weight an algorithm should use for ``edge``.

        The edge's own weight on a weighted graph, the configured default
        weight otherwise.
        """
        if self.is_weighted and edge.weight is not None:
            return edge.weight
        return ANALYSIS_CONFIG.default_weight

    def validate(self) -> None:
        """Reject snapshots whose edges reference undeclared node ids.

        Raises:
            ValueError: If any edge endpoint is not a declared node.
        """
        implicit = self.implicit_node_ids()
        if implicit:
            raise ValueError(
                f"Edges reference undeclared node ids: {', '.join(map(str, implicit))}"
            )

    #
    # Adjacency construction
    #
    def adjacency(
        self, directed: Optional[bool] = None, reverse: bool = False
    ) -> Adjacency:
        """Build an adjacency map of ``(neighbor, edge_id)`` pairs.

        Every node (implicit ones included) is a key, in `node_ids()` order.
        Neighbor lists follow edge order.

        Args:
            directed: Treat edges as one-way. Defaults to ``is_directed``.
            reverse: For a directed adjacency, follow edges target->source.

        Returns:
            The adjacency map.
        """
        if directed is None:
            directed = self.is_directed

        node_ids = self.node_ids()
        if ANALYSIS_CONFIG.warn_on_implicit_nodes and len(node_ids) > len(
            self.declared_node_ids()
        ):
            logger.warning(
                "Edges reference undeclared nodes, treating them as implicit: %s",
                ", ".join(map(str, self.implicit_node_ids())),
            )

        adj: Adjacency = {node_id: [] for node_id in node_ids}
        for edge in self.edges:
            src, dst = edge.source, edge.target
            if directed:
                if reverse:
                    src, dst = dst, src
                adj[src].append((dst, edge.id))
            else:
                adj[src].append((dst, edge.id))
                if src != dst:
                    adj[dst].append((src, edge.id))
        return adj
