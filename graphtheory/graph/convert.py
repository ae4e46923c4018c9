"""Graph conversion utilities between GraphSnapshot and NetworkX graphs.

Snapshots map onto NetworkX multigraphs so that parallel edges survive the
round trip: edge keys carry the snapshot edge ids and ``weight`` attributes
carry edge weights.
"""

from __future__ import annotations

from typing import Optional, Set, Union

import networkx as nx

from graphtheory.graph.snapshot import (
    Edge,
    EdgeID,
    GraphSnapshot,
    Node,
    make_edge_id,
)

NxMultiGraph = Union[nx.MultiGraph, nx.MultiDiGraph]


def to_networkx(snapshot: GraphSnapshot) -> NxMultiGraph:
    """Convert a GraphSnapshot to a NetworkX multigraph.

    Returns a ``MultiDiGraph`` for directed snapshots and a ``MultiGraph``
    otherwise. Implicit nodes are included. Node labels and positions become
    node attributes; the ``is_weighted`` flag is stored as a graph attribute.

    Args:
        snapshot: The snapshot to convert.

    Returns:
        A NetworkX multigraph keyed by snapshot edge ids.
    """
    nx_graph: NxMultiGraph = (
        nx.MultiDiGraph() if snapshot.is_directed else nx.MultiGraph()
    )
    nx_graph.graph["is_weighted"] = snapshot.is_weighted

    for node in snapshot.nodes:
        if node.id in nx_graph:
            continue
        attrs = {
            k: v
            for k, v in (("label", node.label), ("x", node.x), ("y", node.y))
            if v is not None
        }
        nx_graph.add_node(node.id, **attrs)
    nx_graph.add_nodes_from(snapshot.implicit_node_ids())

    for edge in snapshot.edges:
        attrs = {}
        if edge.weight is not None:
            attrs["weight"] = edge.weight
        if edge.label is not None:
            attrs["label"] = edge.label
        nx_graph.add_edge(edge.source, edge.target, key=edge.id, **attrs)
    return nx_graph


def from_networkx(
    nx_graph: nx.Graph, weighted: Optional[bool] = None
) -> GraphSnapshot:
    """Convert a NetworkX graph to a GraphSnapshot.

    Any of ``Graph``, ``DiGraph``, ``MultiGraph`` or ``MultiDiGraph`` is
    accepted. Node ids are converted with ``str()``. Multigraph edge keys
    that are strings are reused as edge ids; other edges get generated
    ``"source-target"`` ids.

    Args:
        nx_graph: The NetworkX graph to convert.
        weighted: ``is_weighted`` of the result. Defaults to the graph's
            ``is_weighted`` attribute, else to whether any edge has a weight.

    Returns:
        A GraphSnapshot with NetworkX node and edge iteration order.
    """
    nodes = [
        Node(
            id=str(node_id),
            label=data.get("label", str(node_id)),
            x=data.get("x"),
            y=data.get("y"),
        )
        for node_id, data in nx_graph.nodes(data=True)
    ]

    if nx_graph.is_multigraph():
        edge_iter = (
            (u, v, key, data)
            for u, v, key, data in nx_graph.edges(keys=True, data=True)
        )
    else:
        edge_iter = ((u, v, None, data) for u, v, data in nx_graph.edges(data=True))

    taken: Set[EdgeID] = set()
    edges = []
    for u, v, key, data in edge_iter:
        source, target = str(u), str(v)
        if isinstance(key, str) and key not in taken:
            taken.add(key)
            edge_id = key
        else:
            edge_id = make_edge_id(source, target, taken)
        edges.append(
            Edge(
                id=edge_id,
                source=source,
                target=target,
                weight=data.get("weight"),
                label=data.get("label"),
            )
        )

    if weighted is None:
        weighted = nx_graph.graph.get(
            "is_weighted", any(edge.weight is not None for edge in edges)
        )

    return GraphSnapshot(
        nodes=tuple(nodes),
        edges=tuple(edges),
        is_directed=nx_graph.is_directed(),
        is_weighted=bool(weighted),
    )
