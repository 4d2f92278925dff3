"""Node types of the wrapper graph, one per kind of wrapped element."""

import logging

from ..model import (
    BioPAXElement,
    Complex,
    Control,
    Conversion,
    Pathway,
    PhysicalEntity,
    TemplateReaction,
    is_activation,
)
from .base import AbstractNode, Graph, Sign

logger = logging.getLogger(__name__)


def _bind_upstream(graph: Graph, element: BioPAXElement, node: AbstractNode) -> None:
    source = graph.get_graph_object(element)
    if source is None:
        return
    if source is node:
        logger.debug("Ignoring self reference on %s", node.key)
        return
    graph.bind(source, node)


def _bind_downstream(graph: Graph, node: AbstractNode, element: BioPAXElement) -> None:
    target = graph.get_graph_object(element)
    if target is None:
        return
    if target is node:
        logger.debug("Ignoring self reference on %s", node.key)
        return
    graph.bind(node, target)


class PhysicalEntityWrapper(AbstractNode):
    """
    Node for a physical entity.

    Physical entities are the breadth nodes of the graph: a breadth-first walk
    spends one step of its limit on each of them. Complexes and generic
    entities are linked through equivalents rather than edges.
    """

    def __init__(self, pe: PhysicalEntity, graph: Graph):
        super().__init__(graph)
        self.pe = pe
        self._upper: tuple[PhysicalEntityWrapper, ...] = ()
        self._lower: tuple[PhysicalEntityWrapper, ...] = ()

    @property
    def element(self) -> PhysicalEntity:
        return self.pe

    def is_breadth_node(self) -> bool:
        return True

    def init(self) -> None:
        model = self.graph.model
        upper = model.component_of(self.pe) + model.member_of(self.pe)
        lower = model.members(self.pe)
        if isinstance(self.pe, Complex):
            lower = model.components(self.pe) + lower
        self._upper = self._wrap_all(upper)
        self._lower = self._wrap_all(lower)

    def _wrap_all(self, elements) -> tuple["PhysicalEntityWrapper", ...]:
        nodes: dict[str, PhysicalEntityWrapper] = {}
        for element in elements:
            node = self.graph.get_graph_object(element)
            if node is not None and node is not self:
                nodes.setdefault(node.key, node)
        return tuple(nodes.values())

    def upper_equivalent(self):
        return self._upper

    def lower_equivalent(self):
        return self._lower


class ControlWrapper(AbstractNode):
    """
    Node for a control.

    The sign is positive for the activation family of control types and
    negative for everything else, including a missing or unknown type.
    """

    def __init__(self, ctrl: Control, graph: Graph):
        super().__init__(graph)
        self.ctrl = ctrl
        self._sign = Sign.NEGATIVE

    @property
    def element(self) -> Control:
        return self.ctrl

    @property
    def sign(self) -> Sign:
        return self._sign

    def init(self) -> None:
        self._sign = Sign.POSITIVE if is_activation(self.ctrl.control_type) else Sign.NEGATIVE

        model = self.graph.model
        for controller in model.controllers(self.ctrl):
            if isinstance(controller, Pathway):
                continue
            _bind_upstream(self.graph, controller, self)

        # Controls regulating this control.
        for control in model.controlled_of(self.ctrl):
            _bind_upstream(self.graph, control, self)


class ConversionWrapper(AbstractNode):
    """Node for a conversion. Inputs point to it, it points to its outputs."""

    def __init__(self, conv: Conversion, graph: Graph):
        super().__init__(graph)
        self.conv = conv

    @property
    def element(self) -> Conversion:
        return self.conv

    def init(self) -> None:
        model = self.graph.model
        for pe in model.inputs(self.conv):
            _bind_upstream(self.graph, pe, self)
        for control in model.controlled_of(self.conv):
            _bind_upstream(self.graph, control, self)
        for pe in model.outputs(self.conv):
            _bind_downstream(self.graph, self, pe)


class TemplateReactionWrapper(AbstractNode):
    """Node for a template reaction (transcription or translation)."""

    def __init__(self, temp_reac: TemplateReaction, graph: Graph):
        super().__init__(graph)
        self.temp_reac = temp_reac

    @property
    def element(self) -> TemplateReaction:
        return self.temp_reac

    def init(self) -> None:
        model = self.graph.model
        template = model.template(self.temp_reac)
        if template is not None:
            _bind_upstream(self.graph, template, self)
        for control in model.controlled_of(self.temp_reac):
            _bind_upstream(self.graph, control, self)
        for product in model.products(self.temp_reac):
            _bind_downstream(self.graph, self, product)


# Order matters: the first matching element class decides the wrapper.
_WRAPPERS: tuple[tuple[type, type[AbstractNode]], ...] = (
    (Control, ControlWrapper),
    (Conversion, ConversionWrapper),
    (TemplateReaction, TemplateReactionWrapper),
    (PhysicalEntity, PhysicalEntityWrapper),
)


def is_wrappable(element: BioPAXElement) -> bool:
    return any(isinstance(element, cls) for cls, _ in _WRAPPERS)


def wrap(element: BioPAXElement, graph: Graph) -> AbstractNode | None:
    """Create the node for `element`, or None if elements of its kind are not part of the graph."""
    for cls, wrapper in _WRAPPERS:
        if isinstance(element, cls):
            return wrapper(element, graph)
    return None
