import pytest

from graphtheory.algorithms.types import (
    ArticulationPointsResult,
    BridgesResult,
    DFSResult,
    MSTResult,
    SCCResult,
    ShortestPathResult,
)
from graphtheory.analysis import AnalysisRegistry, get_default_registry, run_analyses


def test_default_registry_names():
    assert get_default_registry().names() == [
        "dfs",
        "scc",
        "bridges",
        "articulation_points",
        "shortest_path",
        "mst",
    ]


def test_run_all_skips_shortest_path_without_endpoints(bowtie):
    results = run_analyses(bowtie)
    assert list(results) == ["dfs", "scc", "bridges", "articulation_points", "mst"]
    assert isinstance(results["dfs"], DFSResult)
    assert isinstance(results["scc"], SCCResult)
    assert isinstance(results["bridges"], BridgesResult)
    assert isinstance(results["articulation_points"], ArticulationPointsResult)
    assert isinstance(results["mst"], MSTResult)


def test_run_all_with_endpoints(weighted_square):
    results = run_analyses(weighted_square, start="D", end="A")
    path = results["shortest_path"]
    assert isinstance(path, ShortestPathResult)
    assert path.path == ["D", "C", "B", "A"]
    assert results["dfs"].visited[0] == "D"


def test_run_selected_in_given_order(path3):
    results = run_analyses(path3, ["mst", "bridges"])
    assert list(results) == ["mst", "bridges"]
    assert results["bridges"].edge_ids == ["A-B", "B-C"]


def test_explicit_shortest_path_requires_endpoints(path3):
    with pytest.raises(ValueError, match="requires both start and end"):
        run_analyses(path3, ["shortest_path"], start="A")


def test_unknown_analysis(path3):
    with pytest.raises(ValueError, match="Unknown analysis 'flow'"):
        run_analyses(path3, ["dfs", "flow"])


def test_results_match_direct_calls(two_sccs):
    from graphtheory.algorithms import find_sccs, run_dfs

    results = run_analyses(two_sccs, ["dfs", "scc"], start="C")
    assert results["dfs"] == run_dfs(two_sccs, "C")
    assert results["scc"] == find_sccs(two_sccs)


def test_duplicate_registration_rejected():
    registry = AnalysisRegistry()
    registry.register("count", len)
    with pytest.raises(ValueError, match="already registered"):
        registry.register("count", len)


def test_custom_registry_runs_plain_function(path3):
    registry = AnalysisRegistry()
    registry.register("edge_count", lambda g: len(g.edges), description="Edges")
    assert registry.run(path3) == {"edge_count": 2}
    assert registry.get("edge_count").description == "Edges"
