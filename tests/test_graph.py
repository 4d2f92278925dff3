"""
Tests for the wrapper graph: construction, edge signs and edge symmetry.
"""

import pytest

from pathway_patterns.errors import GraphError
from pathway_patterns.graph import (
    ControlWrapper,
    ConversionWrapper,
    Direction,
    Graph,
    PhysicalEntityWrapper,
    Sign,
    TemplateReactionWrapper,
    path_sign,
)
from pathway_patterns.model import (
    BiochemicalReaction,
    Complex,
    Control,
    ControlType,
    InMemoryModel,
    Modulation,
    Pathway,
    Protein,
    ProteinReference,
)


def _control_graph(control_type):
    model = InMemoryModel(
        [
            Protein(uri="p/ctrl"),
            Protein(uri="p/in"),
            BiochemicalReaction(uri="conv", left=["p/in"]),
            Control(uri="c", controller=["p/ctrl"], controlled=["conv"], control_type=control_type),
        ]
    )
    return model, Graph(model)


@pytest.mark.parametrize("control_type", list(ControlType))
def test_control_sign_covers_the_vocabulary(control_type):
    """Every control type maps to exactly one sign: the activation family is positive, the rest negative."""
    model, graph = _control_graph(control_type)
    node = graph.get_graph_object(model.get("c"))
    expected = Sign.POSITIVE if control_type.value.startswith("ACTIVATION") else Sign.NEGATIVE
    assert node.sign is expected


@pytest.mark.parametrize("control_type", [None, "UNHEARD-OF"])
def test_missing_or_unknown_control_type_is_negative(control_type):
    model, graph = _control_graph(control_type)
    assert graph.get_graph_object(model.get("c")).sign is Sign.NEGATIVE


def test_edge_sign_is_the_source_sign():
    model, graph = _control_graph("INHIBITION")
    ctrl = graph.get_graph_object(model.get("c"))
    (edge,) = ctrl.downstream
    assert edge.target.element == model.get("conv")
    assert edge.sign is Sign.NEGATIVE

    (upstream_edge,) = ctrl.upstream
    assert upstream_edge.source.element == model.get("p/ctrl")
    assert upstream_edge.sign is Sign.POSITIVE


def test_sign_algebra():
    assert Sign.NEGATIVE * Sign.NEGATIVE is Sign.POSITIVE
    assert Sign.POSITIVE * Sign.NEGATIVE is Sign.NEGATIVE
    assert -Sign.POSITIVE is Sign.NEGATIVE
    assert Sign.compose([]) is Sign.POSITIVE
    assert Sign.compose([Sign.NEGATIVE, Sign.NEGATIVE, Sign.NEGATIVE]) is Sign.NEGATIVE


def test_path_sign_through_an_inhibited_inhibitor():
    """An inhibitor of an inhibitor has a positive net effect on the controlled process."""
    model = InMemoryModel(
        [
            Protein(uri="p/a"),
            Protein(uri="p/b"),
            BiochemicalReaction(uri="conv"),
            Control(uri="c/inner", controller=["p/b"], controlled=["conv"], control_type="INHIBITION"),
            Modulation(uri="c/outer", controller=["p/a"], controlled=["c/inner"], control_type="INHIBITION"),
        ]
    )
    graph = Graph(model)
    outer = graph.get_graph_object(model.get("c/outer"))
    inner = graph.get_graph_object(model.get("c/inner"))

    (outer_to_inner,) = outer.downstream
    assert outer_to_inner.target is inner
    (inner_to_conv,) = inner.downstream
    assert path_sign([outer_to_inner, inner_to_conv]) is Sign.POSITIVE


def test_edges_are_registered_on_both_ends(state_change_model):
    graph = Graph(state_change_model)
    assert graph.edges
    for edge in graph.edges:
        assert edge in edge.source.downstream
        assert edge in edge.target.upstream
    assert sum(len(n.downstream) for n in graph) == len(graph.edges)
    assert sum(len(n.upstream) for n in graph) == len(graph.edges)


def test_wrapper_kinds(state_change_model, expression_model):
    graph = Graph(state_change_model)
    assert isinstance(graph.get_graph_object(state_change_model.get("p/TP53")), PhysicalEntityWrapper)
    assert isinstance(graph.get_graph_object(state_change_model.get("ctrl/phos")), ControlWrapper)
    assert isinstance(graph.get_graph_object(state_change_model.get("conv/phos")), ConversionWrapper)
    assert graph.get_graph_object(state_change_model.get("ref/TP53")) is None

    graph = Graph(expression_model)
    assert isinstance(graph.get_graph_object(expression_model.get("tr/CCND1")), TemplateReactionWrapper)


def test_conversion_edges(state_change_model):
    """Inputs and controls point into a conversion, which points to its outputs."""
    graph = Graph(state_change_model)
    conv = graph.get_graph_object(state_change_model.get("conv/phos"))
    upstream = [n.element.uri for n in conv.neighbors(Direction.UPSTREAM)]
    downstream = [n.element.uri for n in conv.neighbors(Direction.DOWNSTREAM)]
    assert upstream == ["p/MDM2", "ctrl/phos"]
    assert downstream == ["p/MDM2-P"]
    assert [n.element.uri for n in conv.neighbors(Direction.BOTHSTREAM)] == ["p/MDM2", "ctrl/phos", "p/MDM2-P"]


def test_template_reaction_edges(expression_model):
    graph = Graph(expression_model)
    tr = graph.get_graph_object(expression_model.get("tr/CCND1"))
    assert [n.element.uri for n in tr.neighbors(Direction.UPSTREAM)] == ["trr/MYC"]
    assert [n.element.uri for n in tr.neighbors(Direction.DOWNSTREAM)] == ["p/CCND1"]


def test_pathway_controllers_are_not_bound():
    model = InMemoryModel(
        [
            Pathway(uri="pw"),
            Protein(uri="p/x"),
            BiochemicalReaction(uri="conv"),
            Control(uri="c", controller=["pw", "p/x"], controlled=["conv"], control_type="ACTIVATION"),
        ]
    )
    graph = Graph(model)
    ctrl = graph.get_graph_object(model.get("c"))
    assert [n.element.uri for n in ctrl.neighbors(Direction.UPSTREAM)] == ["p/x"]


def test_graph_object_is_unique_per_element(state_change_model):
    graph = Graph(state_change_model)
    tp53 = state_change_model.get("p/TP53")
    assert graph.get_graph_object(tp53) is graph.get_graph_object(tp53)
    assert len(graph) == 5
    assert tp53 in graph


def test_element_outside_the_model_is_an_error(state_change_model):
    graph = Graph(state_change_model)
    with pytest.raises(GraphError):
        graph.get_graph_object(Protein(uri="p/elsewhere"))
    assert graph.get_graph_object(ProteinReference(uri="ref/elsewhere")) is None


def test_graph_is_frozen_after_build(state_change_model):
    graph = Graph(state_change_model)
    a = graph.get_graph_object(state_change_model.get("p/TP53"))
    b = graph.get_graph_object(state_change_model.get("p/MDM2"))
    with pytest.raises(GraphError):
        graph.bind(a, b)
    assert all(node.initialized for node in graph)


def test_complex_equivalents():
    model = InMemoryModel(
        [
            Protein(uri="p/a"),
            Protein(uri="p/generic", member_physical_entity=["p/a"]),
            Complex(uri="cx", component=["p/generic"]),
        ]
    )
    graph = Graph(model)
    a = graph.get_graph_object(model.get("p/a"))
    generic = graph.get_graph_object(model.get("p/generic"))
    cx = graph.get_graph_object(model.get("cx"))

    assert a.upper_equivalent() == (generic,)
    assert generic.upper_equivalent() == (cx,)
    assert generic.lower_equivalent() == (a,)
    assert cx.lower_equivalent() == (generic,)
    assert a.is_breadth_node()
