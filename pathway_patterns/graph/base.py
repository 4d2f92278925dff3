"""
Wrapper graph over a pathway model.

Every physical entity, control, conversion and template reaction of a model is
wrapped in exactly one node. Nodes are linked by directed edges that point
from cause to effect: a controller points to its control, a control to the
process it regulates, an input to its conversion and a conversion to its
outputs.

The graph is built in two explicit phases. First every wrappable element gets
a node. Then every node is initialized exactly once, binding the edges it owns.
After that the graph is frozen and is never mutated again for the life of the
search session that owns it.

Edges are always bound through `Graph.bind`, which registers the same `Edge`
instance on the source's downstream list and the target's upstream list.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from functools import reduce
from typing import TYPE_CHECKING, Iterable, Iterator

from ..errors import GraphError
from ..model import BioPAXElement, ModelInterface

if TYPE_CHECKING:
    from .wrappers import PhysicalEntityWrapper

logger = logging.getLogger(__name__)


class Sign(Enum):
    """Effect of a relation. Signs multiply along a path: two negatives make a positive."""

    POSITIVE = 1
    NEGATIVE = -1

    def __mul__(self, other: "Sign") -> "Sign":
        return Sign(self.value * other.value)

    def __neg__(self) -> "Sign":
        return Sign(-self.value)

    @classmethod
    def compose(cls, signs: Iterable["Sign"]) -> "Sign":
        return reduce(lambda a, b: a * b, signs, cls.POSITIVE)


class Direction(str, Enum):
    UPSTREAM = "upstream"
    DOWNSTREAM = "downstream"
    BOTHSTREAM = "bothstream"


class Edge:
    """Directed link between two nodes of one graph."""

    __slots__ = ("source", "target")

    def __init__(self, source: "AbstractNode", target: "AbstractNode"):
        self.source = source
        self.target = target

    @property
    def sign(self) -> Sign:
        """Sign of the source node: negative when it leaves an inhibitory control."""
        return self.source.sign

    @property
    def key(self) -> str:
        return f"{self.source.key}|{self.target.key}"

    def __repr__(self) -> str:
        return f"Edge({self.source.key!r} -> {self.target.key!r}, {self.sign.name})"


class AbstractNode(ABC):
    """
    A graph node wrapping one model element.

    Attributes:
        graph: The graph owning this node
        upstream: Edges whose target is this node
        downstream: Edges whose source is this node
    """

    def __init__(self, graph: "Graph"):
        self.graph = graph
        self.upstream: list[Edge] = []
        self.downstream: list[Edge] = []
        self.initialized = False

    @property
    @abstractmethod
    def element(self) -> BioPAXElement:
        pass

    @abstractmethod
    def init(self) -> None:
        """Bind the edges owned by this node. Called once by the graph."""
        pass

    @property
    def key(self) -> str:
        return self.element.uri

    @property
    def sign(self) -> Sign:
        return Sign.POSITIVE

    def is_breadth_node(self) -> bool:
        """Whether reaching this node counts as a step in a breadth-first walk."""
        return False

    def upper_equivalent(self) -> tuple["PhysicalEntityWrapper", ...]:
        return ()

    def lower_equivalent(self) -> tuple["PhysicalEntityWrapper", ...]:
        return ()

    def neighbors(self, direction: Direction) -> list["AbstractNode"]:
        """Nodes one edge away, in edge order and without repeats."""
        found: dict[str, AbstractNode] = {}
        if direction in (Direction.UPSTREAM, Direction.BOTHSTREAM):
            for edge in self.upstream:
                found.setdefault(edge.source.key, edge.source)
        if direction in (Direction.DOWNSTREAM, Direction.BOTHSTREAM):
            for edge in self.downstream:
                found.setdefault(edge.target.key, edge.target)
        return list(found.values())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.key!r})"


class Graph:
    """
    Nodes and edges of one search session.

    The graph maps each wrappable element of the model to exactly one node and
    is the only creator of nodes and edges.

    Example:
        >>> graph = Graph(model)
        >>> node = graph.get_graph_object(control)
        >>> node.sign
        <Sign.NEGATIVE: -1>
    """

    def __init__(self, model: ModelInterface):
        self.model = model
        self._nodes: dict[str, AbstractNode] = {}
        self._edges: list[Edge] = []
        self._frozen = False
        self._build()

    def _build(self) -> None:
        from .wrappers import wrap

        # Phase 1: one node per wrappable element.
        for element in self.model.elements():
            node = wrap(element, self)
            if node is not None:
                self._nodes[element.uri] = node

        # Phase 2: every node binds the edges it owns, exactly once.
        for node in self._nodes.values():
            node.init()
            node.initialized = True

        self._frozen = True
        logger.debug("Built graph with %d nodes and %d edges", len(self._nodes), len(self._edges))

    def get_graph_object(self, element: BioPAXElement) -> AbstractNode | None:
        """
        Return the node wrapping `element`.

        Returns None for element kinds that are never wrapped (entity references,
        pathways). Raises GraphError for a wrappable element outside this graph's model.
        """
        node = self._nodes.get(element.uri)
        if node is not None:
            return node

        from .wrappers import is_wrappable

        if is_wrappable(element):
            raise GraphError(f"{element!r} is not part of the model this graph was built from")
        return None

    def bind(self, source: AbstractNode, target: AbstractNode) -> Edge:
        """Create an edge and register it on both of its ends."""
        if self._frozen:
            raise GraphError("Cannot bind edges after the graph has been built")
        if source is target:
            raise GraphError(f"Refusing to bind a self-edge on {source!r}")
        edge = Edge(source, target)
        source.downstream.append(edge)
        target.upstream.append(edge)
        self._edges.append(edge)
        return edge

    @property
    def nodes(self) -> list[AbstractNode]:
        return list(self._nodes.values())

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[AbstractNode]:
        return iter(self._nodes.values())

    def __contains__(self, element: object) -> bool:
        return isinstance(element, BioPAXElement) and element.uri in self._nodes


def path_sign(edges: Iterable[Edge]) -> Sign:
    """Net sign of a chain of edges."""
    return Sign.compose(edge.sign for edge in edges)
