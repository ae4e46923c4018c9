"""Graph snapshot serialization and the editor's text format.

Text format, one item per non-blank line, tokens separated by whitespace::

    A           # a node
    A B         # an edge A -> B
    A B 5       # an edge A -> B with weight 5

A third token that does not parse as a number leaves the edge unweighted.
Lines with more than three tokens are skipped. Edge ids are ``"A-B"``; a
repeated pair gets ``"A-B#2"``, ``"A-B#3"`` and so on.

Node-link format (JSON/YAML friendly)::

    {"graph": {"directed": bool, "weighted": bool},
     "nodes": [{"id": ..., "label": ..., "x": ..., "y": ...}, ...],
     "links": [{"id": ..., "source": ..., "target": ..., "weight": ...}, ...]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, Union

import yaml

from graphtheory.graph.snapshot import (
    Edge,
    EdgeID,
    GraphSnapshot,
    Node,
    NodeID,
    make_edge_id,
)
from graphtheory.logging import get_logger

logger = get_logger(__name__)


def _parse_weight(token: str) -> Optional[Union[int, float]]:
    try:
        value = float(token)
    except ValueError:
        return None
    if value != value:  # NaN
        return None
    return int(value) if value.is_integer() and "." not in token else value


def parse_graph_text(
    text: Union[str, Iterable[str]],
    directed: bool = False,
    weighted: bool = False,
) -> GraphSnapshot:
    """Build a snapshot from the editor's line-oriented text format.

    Args:
        text: Whole text or an iterable of lines.
        directed: ``is_directed`` of the resulting snapshot.
        weighted: ``is_weighted`` of the resulting snapshot.

    Returns:
        GraphSnapshot with nodes in first-appearance order.
    """
    lines = text.splitlines() if isinstance(text, str) else list(text)
    nodes: Dict[NodeID, Node] = {}
    edges: List[Edge] = []
    taken: Set[EdgeID] = set()

    for line_no, raw in enumerate(lines, start=1):
        parts = raw.split()
        if not parts:
            continue
        if len(parts) == 1:
            nodes.setdefault(parts[0], Node(id=parts[0], label=parts[0]))
            continue
        if len(parts) > 3:
            logger.debug(
                "Skipping line %d with %d tokens: %r", line_no, len(parts), raw
            )
            continue

        source, target = parts[0], parts[1]
        weight = _parse_weight(parts[2]) if len(parts) == 3 else None
        for node_id in (source, target):
            nodes.setdefault(node_id, Node(id=node_id, label=node_id))
        edges.append(
            Edge(
                id=make_edge_id(source, target, taken),
                source=source,
                target=target,
                weight=weight,
            )
        )

    logger.debug("Parsed %d nodes and %d edges", len(nodes), len(edges))
    return GraphSnapshot(
        nodes=tuple(nodes.values()),
        edges=tuple(edges),
        is_directed=directed,
        is_weighted=weighted,
    )


def snapshot_to_node_link(snapshot: GraphSnapshot) -> Dict[str, Any]:
    """Return a node-link representation suitable for JSON serialization."""

    def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in data.items() if v is not None}

    return {
        "graph": {
            "directed": snapshot.is_directed,
            "weighted": snapshot.is_weighted,
        },
        "nodes": [
            _drop_none({"id": n.id, "label": n.label, "x": n.x, "y": n.y})
            for n in snapshot.nodes
        ],
        "links": [
            _drop_none(
                {
                    "id": e.id,
                    "source": e.source,
                    "target": e.target,
                    "weight": e.weight,
                    "label": e.label,
                }
            )
            for e in snapshot.edges
        ],
    }


def _flag(graph_attr: Dict[str, Any], name: str) -> bool:
    value = graph_attr.get(name, False)
    if not isinstance(value, bool):
        raise ValueError(f"Graph attribute '{name}' must be a boolean, got {value!r}")
    return value


def _sequence(data: Dict[str, Any], key: str) -> List[Any]:
    items = data.get(key) or []
    if not isinstance(items, list):
        raise ValueError(f"'{key}' must be a list, got {type(items).__name__}")
    return items


def node_link_to_snapshot(data: Dict[str, Any]) -> GraphSnapshot:
    """Take a node-link representation and return a GraphSnapshot.

    Nodes may be given as mappings or bare ids. Links without an ``id`` get
    a generated ``"source-target"`` id.

    Raises:
        ValueError: If ``graph`` is not a mapping or its ``directed`` and
            ``weighted`` flags are not booleans, if a node mapping lacks
            ``id``, or if a link is not a mapping with ``source`` and
            ``target``.
    """
    graph_attr = data.get("graph") or {}
    if not isinstance(graph_attr, dict):
        raise ValueError(
            f"'graph' must be a mapping of graph attributes, got {graph_attr!r}"
        )

    nodes: List[Node] = []
    for idx, item in enumerate(_sequence(data, "nodes")):
        if isinstance(item, dict):
            if "id" not in item:
                raise ValueError(f"Node #{idx} must have an 'id': {item!r}")
            node_id = str(item["id"])
            nodes.append(
                Node(
                    id=node_id,
                    label=item.get("label", node_id),
                    x=item.get("x"),
                    y=item.get("y"),
                )
            )
        else:
            nodes.append(Node(id=str(item), label=str(item)))

    links = _sequence(data, "links")
    for idx, link in enumerate(links):
        if not isinstance(link, dict) or "source" not in link or "target" not in link:
            raise ValueError(f"Link #{idx} must have 'source' and 'target': {link!r}")

    taken: Set[EdgeID] = {link["id"] for link in links if "id" in link}
    edges: List[Edge] = []
    for link in links:
        source, target = str(link["source"]), str(link["target"])
        edge_id = link["id"] if "id" in link else make_edge_id(source, target, taken)
        edges.append(
            Edge(
                id=edge_id,
                source=source,
                target=target,
                weight=link.get("weight"),
                label=link.get("label"),
            )
        )

    return GraphSnapshot(
        nodes=tuple(nodes),
        edges=tuple(edges),
        is_directed=_flag(graph_attr, "directed"),
        is_weighted=_flag(graph_attr, "weighted"),
    )


def load_graph_file(
    path: Union[str, Path],
    directed: Optional[bool] = None,
    weighted: Optional[bool] = None,
) -> GraphSnapshot:
    """Load a snapshot from disk.

    ``.yaml``/``.yml`` and ``.json`` files hold the node-link mapping; any
    other file is read as the text format. Explicit ``directed``/``weighted``
    values override what the file says.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If a structured file does not hold a mapping.
    """
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()

    if suffix in (".yaml", ".yml", ".json"):
        data = json.loads(content) if suffix == ".json" else yaml.safe_load(content)
        if not isinstance(data, dict):
            raise ValueError(f"{path}: expected a node-link mapping at top level")
        snapshot = node_link_to_snapshot(data)
        if directed is None and weighted is None:
            return snapshot
        return GraphSnapshot(
            nodes=snapshot.nodes,
            edges=snapshot.edges,
            is_directed=snapshot.is_directed if directed is None else directed,
            is_weighted=snapshot.is_weighted if weighted is None else weighted,
        )

    return parse_graph_text(
        content, directed=bool(directed), weighted=bool(weighted)
    )
