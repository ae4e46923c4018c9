import random

import networkx as nx
import pytest

from graphtheory.algorithms.mst import minimum_spanning_tree
from graphtheory.config import ANALYSIS_CONFIG
from graphtheory.graph.snapshot import Edge, GraphSnapshot


def test_mst_weighted_square(weighted_square):
    result = minimum_spanning_tree(weighted_square)
    assert result.edges == ["A-B", "C-D", "B-C"]
    assert result.total_weight == 4


def test_mst_empty_graph(empty_graph):
    result = minimum_spanning_tree(empty_graph)
    assert result.edges == []
    assert result.total_weight == 0


def test_mst_nodes_without_edges():
    result = minimum_spanning_tree(GraphSnapshot(nodes=["A", "B"]))
    assert result.edges == []
    assert result.total_weight == 0


def test_mst_disconnected_graph_is_a_forest(disconnected):
    result = minimum_spanning_tree(disconnected)
    assert result.edges == ["cd", "de", "ab"]
    assert result.total_weight == 6
    # |V| - (#components) edges: 6 nodes, 3 components
    assert len(result.edges) == 3


def test_mst_ignores_self_loops():
    g = GraphSnapshot(
        nodes=["A", "B"],
        edges=[Edge("aa", "A", "A", weight=0), Edge("ab", "A", "B", weight=4)],
        is_weighted=True,
    )
    result = minimum_spanning_tree(g)
    assert result.edges == ["ab"]
    assert result.total_weight == 4


def test_mst_picks_lightest_parallel_edge():
    g = GraphSnapshot(
        nodes=["A", "B"],
        edges=[Edge("heavy", "A", "B", weight=9), Edge("light", "A", "B", weight=2)],
        is_weighted=True,
    )
    result = minimum_spanning_tree(g)
    assert result.edges == ["light"]
    assert result.total_weight == 2


def test_mst_ties_keep_edge_order():
    g = GraphSnapshot(
        nodes=["A", "B", "C"],
        edges=[
            Edge("bc", "B", "C", weight=1),
            Edge("ab", "A", "B", weight=1),
            Edge("ca", "C", "A", weight=1),
        ],
        is_weighted=True,
    )
    assert minimum_spanning_tree(g).edges == ["bc", "ab"]


def test_mst_unweighted_graph_counts_each_edge_as_one():
    # Weights present but the graph is not flagged weighted
    g = GraphSnapshot(
        nodes=["A", "B", "C"],
        edges=[
            Edge("ab", "A", "B", weight=10),
            Edge("bc", "B", "C", weight=10),
            Edge("ca", "C", "A", weight=1),
        ],
    )
    result = minimum_spanning_tree(g)
    assert result.edges == ["ab", "bc"]
    assert result.total_weight == 2


def test_mst_missing_weight_uses_default():
    g = GraphSnapshot(
        nodes=["A", "B", "C"],
        edges=[Edge("ab", "A", "B", weight=5), Edge("bc", "B", "C")],
        is_weighted=True,
    )
    result = minimum_spanning_tree(g)
    assert result.edges == ["bc", "ab"]
    assert result.total_weight == 5 + ANALYSIS_CONFIG.default_weight


def test_mst_ignores_direction(directed_cycle3):
    result = minimum_spanning_tree(directed_cycle3)
    assert result.edges == ["e1", "e2"]
    assert result.total_weight == 2


def test_mst_negative_weights():
    g = GraphSnapshot(
        nodes=["A", "B", "C"],
        edges=[
            Edge("ab", "A", "B", weight=3),
            Edge("bc", "B", "C", weight=-2),
            Edge("ca", "C", "A", weight=1),
        ],
        is_weighted=True,
    )
    result = minimum_spanning_tree(g)
    assert result.edges == ["bc", "ca"]
    assert result.total_weight == -1


@pytest.mark.parametrize("seed", range(10))
def test_mst_weight_matches_networkx(seed):
    rng = random.Random(seed)
    nodes = [f"N{i}" for i in range(10)]
    edges = [
        Edge(f"e{i}", rng.choice(nodes), rng.choice(nodes), weight=rng.randint(1, 20))
        for i in range(25)
    ]
    snapshot = GraphSnapshot(nodes=nodes, edges=edges, is_weighted=True)

    g = nx.MultiGraph()
    g.add_nodes_from(nodes)
    for e in edges:
        g.add_edge(e.source, e.target, key=e.id, weight=e.weight)
    forest = nx.minimum_spanning_tree(g, algorithm="kruskal")

    result = minimum_spanning_tree(snapshot)
    assert result.total_weight == forest.size(weight="weight")
    assert len(result.edges) == len(nodes) - nx.number_connected_components(g)

    # Accepted edges form an acyclic subgraph
    chosen = nx.MultiGraph()
    chosen.add_nodes_from(nodes)
    by_id = {e.id: e for e in edges}
    chosen.add_edges_from((by_id[i].source, by_id[i].target) for i in result.edges)
    assert nx.is_forest(chosen)
