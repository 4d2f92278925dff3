"""
Tests for breadth-first neighborhood queries.
"""

import pytest

from pathway_patterns.graph import Direction, Graph, bfs, neighborhood
from pathway_patterns.model import (
    BiochemicalReaction,
    Complex,
    Control,
    InMemoryModel,
    Protein,
)


@pytest.fixture
def chain_model():
    """p1 -> conv1 -> p2 -> conv2 -> p3, with an enzyme controlling conv1."""
    return InMemoryModel(
        [
            Protein(uri="p1"),
            Protein(uri="p2"),
            Protein(uri="p3"),
            Protein(uri="enzyme"),
            BiochemicalReaction(uri="conv1", left=["p1"], right=["p2"]),
            BiochemicalReaction(uri="conv2", left=["p2"], right=["p3"]),
            Control(uri="ctrl", controller=["enzyme"], controlled=["conv1"], control_type="ACTIVATION"),
        ]
    )


def _uris(elements):
    return sorted(e.uri for e in elements)


def test_only_breadth_nodes_spend_the_limit(chain_model):
    """Conversions and controls are crossed for free; each physical entity costs one step."""
    graph = Graph(chain_model)
    start = graph.get_graph_object(chain_model.get("p1"))

    dist = {node.key: d for node, d in bfs(graph, [start], Direction.DOWNSTREAM, 1).items()}
    assert dist == {"p1": 0, "conv1": 0, "p2": 1, "conv2": 1}

    dist = {node.key: d for node, d in bfs(graph, [start], Direction.DOWNSTREAM, 2).items()}
    assert dist["p3"] == 2


def test_limit_zero_reaches_only_free_nodes(chain_model):
    graph = Graph(chain_model)
    start = graph.get_graph_object(chain_model.get("enzyme"))
    reached = bfs(graph, [start], Direction.DOWNSTREAM, 0)
    assert sorted(node.key for node in reached) == ["conv1", "ctrl", "enzyme"]


def test_upstream_and_bothstream(chain_model):
    graph = Graph(chain_model)
    assert _uris(neighborhood(graph, [chain_model.get("p2")], Direction.UPSTREAM, 1)) == [
        "conv1",
        "ctrl",
        "enzyme",
        "p1",
        "p2",
    ]
    both = _uris(neighborhood(graph, [chain_model.get("p2")], Direction.BOTHSTREAM, 1))
    assert "p3" in both and "p1" in both and "enzyme" in both


def test_equivalents_share_the_distance():
    """A complex containing a reached protein is reached at the same distance."""
    model = InMemoryModel(
        [
            Protein(uri="a"),
            Protein(uri="b"),
            Complex(uri="cx", component=["b"]),
            BiochemicalReaction(uri="conv", left=["a"], right=["b"]),
        ]
    )
    graph = Graph(model)
    dist = {n.key: d for n, d in bfs(graph, [graph.get_graph_object(model.get("a"))], Direction.DOWNSTREAM, 1).items()}
    assert dist["b"] == 1
    assert dist["cx"] == 1


def test_negative_limit_is_rejected(chain_model):
    graph = Graph(chain_model)
    with pytest.raises(ValueError):
        bfs(graph, [], Direction.DOWNSTREAM, -1)


def test_complex_siblings_are_not_equivalents():
    """A protein reaches its own complex for free, but not the other components."""
    members = [Protein(uri=f"m{i}") for i in range(50)]
    model = InMemoryModel(
        [Protein(uri="a"), *members, Complex(uri="cx", component=["a"] + [m.uri for m in members])]
    )
    graph = Graph(model)
    assert _uris(neighborhood(graph, [model.get("a")], Direction.DOWNSTREAM, 0)) == ["a", "cx"]


def test_complex_reaches_its_components_and_their_containers():
    """Going down from a complex never climbs back up into a sibling's other complexes."""
    model = InMemoryModel(
        [
            Protein(uri="a"),
            Protein(uri="b"),
            Complex(uri="inner", component=["a"]),
            Complex(uri="outer", component=["inner", "b"]),
            Complex(uri="other", component=["b"]),
        ]
    )
    graph = Graph(model)
    assert _uris(neighborhood(graph, [model.get("inner")], Direction.DOWNSTREAM, 0)) == ["a", "inner", "outer"]
    assert _uris(neighborhood(graph, [model.get("outer")], Direction.DOWNSTREAM, 0)) == ["a", "b", "inner", "outer"]
