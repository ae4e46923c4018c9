"""Graph primitives and helpers.

This package provides the immutable `GraphSnapshot` input type and helper
modules for NetworkX conversion (`convert`) and serialization (`io`).
"""

from graphtheory.graph.snapshot import (
    Adjacency,
    Edge,
    EdgeID,
    GraphSnapshot,
    Node,
    NodeID,
    Weight,
)

__all__ = [
    "Adjacency",
    "Edge",
    "EdgeID",
    "GraphSnapshot",
    "Node",
    "NodeID",
    "Weight",
]
