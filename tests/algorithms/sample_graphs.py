import pytest

from graphtheory.graph.snapshot import Edge, GraphSnapshot


@pytest.fixture
def empty_graph():
    return GraphSnapshot()


@pytest.fixture
def directed_cycle3():
    #  A ───► B
    #  ▲      │
    #  └─ C ◄─┘
    return GraphSnapshot(
        nodes=["A", "B", "C"],
        edges=[
            Edge("e1", "A", "B"),
            Edge("e2", "B", "C"),
            Edge("e3", "C", "A"),
        ],
        is_directed=True,
    )


@pytest.fixture
def path3():
    #  A ─── B ─── C
    return GraphSnapshot(
        nodes=["A", "B", "C"],
        edges=[Edge("A-B", "A", "B"), Edge("B-C", "B", "C")],
    )


@pytest.fixture
def weighted_square():
    #       [1]
    #   A ─────── B
    #    \        │
    #  [5]\       │[2]
    #      \      │
    #       └──── C ─── D
    #                [1]
    return GraphSnapshot(
        nodes=["A", "B", "C", "D"],
        edges=[
            Edge("A-B", "A", "B", weight=1),
            Edge("B-C", "B", "C", weight=2),
            Edge("A-C", "A", "C", weight=5),
            Edge("C-D", "C", "D", weight=1),
        ],
        is_weighted=True,
    )


@pytest.fixture
def bowtie():
    # Two triangles sharing C, plus a pendant edge E-F hanging off E.
    #
    #  A       D
    #  │ \   / │
    #  │   C   │
    #  │ /   \ │
    #  B       E ─── F
    return GraphSnapshot(
        nodes=["A", "B", "C", "D", "E", "F"],
        edges=[
            Edge("ab", "A", "B"),
            Edge("bc", "B", "C"),
            Edge("ca", "C", "A"),
            Edge("cd", "C", "D"),
            Edge("de", "D", "E"),
            Edge("ec", "E", "C"),
            Edge("ef", "E", "F"),
        ],
    )


@pytest.fixture
def two_sccs():
    #  A ⇄ B ───► C ⇄ D      E (isolated)
    return GraphSnapshot(
        nodes=["A", "B", "C", "D", "E"],
        edges=[
            Edge("ab", "A", "B"),
            Edge("ba", "B", "A"),
            Edge("bc", "B", "C"),
            Edge("cd", "C", "D"),
            Edge("dc", "D", "C"),
        ],
        is_directed=True,
    )


@pytest.fixture
def parallel_pair():
    #  A ═══ B ─── C   (two parallel edges between A and B)
    return GraphSnapshot(
        nodes=["A", "B", "C"],
        edges=[
            Edge("ab1", "A", "B"),
            Edge("ab2", "A", "B"),
            Edge("bc", "B", "C"),
        ],
    )


@pytest.fixture
def disconnected():
    #  A ─── B     C ─── D ─── E     F
    return GraphSnapshot(
        nodes=["A", "B", "C", "D", "E", "F"],
        edges=[
            Edge("ab", "A", "B", weight=3),
            Edge("cd", "C", "D", weight=1),
            Edge("de", "D", "E", weight=2),
        ],
        is_weighted=True,
    )
