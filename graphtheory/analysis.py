"""Registry of named analyses and a runner for a selection of them.

Maps analysis names to the algorithm functions so that callers (the CLI, a
UI toggling overlays) can request several independent analyses of one
snapshot by name. Each analysis still runs in isolation; no state is shared
between them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from graphtheory.algorithms import (
    find_articulation_points,
    find_bridges,
    find_sccs,
    minimum_spanning_tree,
    run_dfs,
    shortest_path,
)
from graphtheory.graph.snapshot import GraphSnapshot, NodeID
from graphtheory.logging import get_logger

logger = get_logger(__name__)


@dataclass
class AnalysisSpec:
    """Binding of an analysis name to its function.

    Attributes:
        func: Analysis callable taking the snapshot first.
        needs_endpoints: Whether the analysis needs ``start`` and ``end``.
        accepts_start: Whether the analysis takes an optional ``start_node``.
        description: One-line summary for help output.
    """

    func: Callable[..., Any]
    needs_endpoints: bool = False
    accepts_start: bool = False
    description: str = ""


@dataclass
class AnalysisRegistry:
    """Collection of analyses keyed by name, in registration order."""

    _specs: Dict[str, AnalysisSpec] = field(default_factory=dict)

    def register(self, name: str, func: Callable[..., Any], **kwargs: Any) -> None:
        if name in self._specs:
            raise ValueError(f"Analysis '{name}' is already registered.")
        self._specs[name] = AnalysisSpec(func=func, **kwargs)

    def get(self, name: str) -> AnalysisSpec:
        try:
            return self._specs[name]
        except KeyError:
            valid = ", ".join(self._specs)
            raise ValueError(
                f"Unknown analysis '{name}'. Valid analyses are: {valid}"
            ) from None

    def names(self) -> List[str]:
        return list(self._specs)

    def run(
        self,
        snapshot: GraphSnapshot,
        names: Optional[Iterable[str]] = None,
        start: Optional[NodeID] = None,
        end: Optional[NodeID] = None,
    ) -> Dict[str, Any]:
        """Run the named analyses on ``snapshot``.

        Args:
            snapshot: Graph to analyze.
            names: Analyses to run, in order. Defaults to all of them, with
                endpoint-based analyses skipped unless ``start`` and ``end``
                are both given.
            start: Start node for DFS and shortest path.
            end: End node for shortest path.

        Returns:
            Mapping of analysis name to its result object.

        Raises:
            ValueError: If a name is unknown, or an endpoint-based analysis is
                requested explicitly without both endpoints.
        """
        explicit = names is not None
        selected = list(names) if explicit else self.names()
        specs = {name: self.get(name) for name in selected}

        results: Dict[str, Any] = {}
        for name, spec in specs.items():
            if spec.needs_endpoints:
                if start is None or end is None:
                    if explicit:
                        raise ValueError(
                            f"Analysis '{name}' requires both start and end nodes."
                        )
                    logger.debug("Skipping '%s': no start/end given", name)
                    continue
                results[name] = spec.func(snapshot, start, end)
            elif spec.accepts_start:
                results[name] = spec.func(snapshot, start)
            else:
                results[name] = spec.func(snapshot)
            logger.debug("Analysis '%s' done", name)
        return results


def get_default_registry() -> AnalysisRegistry:
    """Return the registry of all built-in analyses."""
    reg = AnalysisRegistry()
    reg.register(
        "dfs",
        run_dfs,
        accepts_start=True,
        description="Depth-first traversal with edge classification",
    )
    reg.register("scc", find_sccs, description="Strongly connected components")
    reg.register("bridges", find_bridges, description="Bridge edges")
    reg.register(
        "articulation_points",
        find_articulation_points,
        description="Articulation points",
    )
    reg.register(
        "shortest_path",
        shortest_path,
        needs_endpoints=True,
        description="Shortest path between start and end",
    )
    reg.register("mst", minimum_spanning_tree, description="Minimum spanning forest")
    return reg


def run_analyses(
    snapshot: GraphSnapshot,
    names: Optional[Iterable[str]] = None,
    start: Optional[NodeID] = None,
    end: Optional[NodeID] = None,
) -> Dict[str, Any]:
    """Run analyses from the default registry. See `AnalysisRegistry.run`."""
    return get_default_registry().run(snapshot, names, start=start, end=end)
