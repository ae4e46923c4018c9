import logging

import pytest

from graphtheory.config import ANALYSIS_CONFIG
from graphtheory.graph.snapshot import Edge, GraphSnapshot, Node, make_edge_id


def test_plain_ids_and_tuples_are_coerced():
    g = GraphSnapshot(nodes=["A", "B"], edges=[("A", "B"), ("B", "A", 3)])
    assert g.nodes == (Node("A", "A"), Node("B", "B"))
    assert g.edges == (Edge("A-B", "A", "B"), Edge("B-A", "B", "A", weight=3))


def test_tuple_edges_avoid_explicit_ids():
    g = GraphSnapshot(nodes=["A", "B"], edges=[Edge("A-B", "A", "B"), ("A", "B")])
    assert [e.id for e in g.edges] == ["A-B", "A-B#2"]


def test_bad_edge_tuple_raises():
    with pytest.raises(ValueError, match="Edge tuple"):
        GraphSnapshot(nodes=["A"], edges=[("A",)])


def test_snapshot_is_immutable(path3):
    with pytest.raises(AttributeError):
        path3.is_directed = True  # type: ignore[misc]


def test_make_edge_id_suffixes_repeats():
    taken = set()
    assert make_edge_id("A", "B", taken) == "A-B"
    assert make_edge_id("A", "B", taken) == "A-B#2"
    assert make_edge_id("A", "B", taken) == "A-B#3"
    assert make_edge_id("B", "A", taken) == "B-A"
    assert taken == {"A-B", "A-B#2", "A-B#3", "B-A"}


def test_node_ids_dedupe_and_append_implicit():
    g = GraphSnapshot(
        nodes=["B", "A", "B"],
        edges=[Edge("x", "A", "Z"), Edge("y", "Y", "Z")],
    )
    assert g.declared_node_ids() == ["B", "A"]
    assert g.implicit_node_ids() == ["Z", "Y"]
    assert g.node_ids() == ["B", "A", "Z", "Y"]


def test_validate(path3):
    path3.validate()
    g = GraphSnapshot(nodes=["A"], edges=[Edge("x", "A", "Q")])
    with pytest.raises(ValueError, match="undeclared node ids: Q"):
        g.validate()


def test_edge_weight_respects_weighted_flag():
    edge = Edge("x", "A", "B", weight=7)
    bare = Edge("y", "A", "B")
    weighted = GraphSnapshot(nodes=["A", "B"], edges=[edge, bare], is_weighted=True)
    unweighted = GraphSnapshot(nodes=["A", "B"], edges=[edge, bare])

    assert weighted.edge_weight(edge) == 7
    assert weighted.edge_weight(bare) == ANALYSIS_CONFIG.default_weight
    assert unweighted.edge_weight(edge) == ANALYSIS_CONFIG.default_weight


def test_get_edges_by_id(weighted_square):
    edges = weighted_square.get_edges()
    assert list(edges) == ["A-B", "B-C", "A-C", "C-D"]
    assert edges["C-D"].weight == 1


def test_adjacency_undirected(path3):
    assert path3.adjacency() == {
        "A": [("B", "A-B")],
        "B": [("A", "A-B"), ("C", "B-C")],
        "C": [("B", "B-C")],
    }


def test_adjacency_directed_and_reversed(directed_cycle3):
    assert directed_cycle3.adjacency() == {
        "A": [("B", "e1")],
        "B": [("C", "e2")],
        "C": [("A", "e3")],
    }
    assert directed_cycle3.adjacency(reverse=True) == {
        "A": [("C", "e3")],
        "B": [("A", "e1")],
        "C": [("B", "e2")],
    }


def test_adjacency_overrides_directedness(directed_cycle3, path3):
    assert directed_cycle3.adjacency(directed=False)["A"] == [("B", "e1"), ("C", "e3")]
    assert path3.adjacency(directed=True)["B"] == [("C", "B-C")]


def test_adjacency_self_loop_listed_once():
    g = GraphSnapshot(nodes=["A"], edges=[Edge("aa", "A", "A")])
    assert g.adjacency() == {"A": [("A", "aa")]}


def test_adjacency_keeps_isolated_nodes(two_sccs):
    assert two_sccs.adjacency()["E"] == []


def test_adjacency_warns_about_implicit_nodes(caplog):
    g = GraphSnapshot(nodes=["A"], edges=[Edge("az", "A", "Z")])
    with caplog.at_level(logging.WARNING, logger="graphtheory"):
        adj = g.adjacency()
    assert adj == {"A": [("Z", "az")], "Z": [("A", "az")]}
    assert "implicit" in caplog.text
    assert "Z" in caplog.text


def test_implicit_node_warning_can_be_disabled(caplog, monkeypatch):
    monkeypatch.setattr(ANALYSIS_CONFIG, "warn_on_implicit_nodes", False)
    g = GraphSnapshot(nodes=["A"], edges=[Edge("az", "A", "Z")])
    with caplog.at_level(logging.WARNING, logger="graphtheory"):
        g.adjacency()
    assert "implicit" not in caplog.text


def test_self_loop_property():
    assert Edge("aa", "A", "A").is_self_loop
    assert not Edge("ab", "A", "B").is_self_loop
