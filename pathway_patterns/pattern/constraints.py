"""
Constraints relating the variables of a pattern.

A constraint maps to an ordered tuple of pattern variables. It can always test
a full assignment of those variables (`satisfies`). A generating constraint can
also propose candidates for its last variable from the earlier ones
(`generate`); the searcher uses that to bind a label the first time it appears.

Constraints are stateless. Everything they read comes from the element tuple
and the `SearchContext` (model and wrapper graph) passed to them, so one
instance can be shared by any number of patterns and searches.

Structural relations come in two flavours: ones read from the model accessors
(entity references, complex membership, conversion sides) and ones read from
the wrapper graph (controllers, controlled processes, neighborhoods).
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Iterable, NamedTuple

from pydantic import BaseModel, ConfigDict

from ..graph import Direction, Graph, bfs
from ..graph.wrappers import ControlWrapper
from ..model import (
    BioPAXElement,
    Complex,
    Control,
    Conversion,
    EntityReference,
    Interaction,
    ModelInterface,
    Pathway,
    PhysicalEntity,
    SimplePhysicalEntity,
    TemplateReaction,
)


class SearchContext(BaseModel):
    """The model and wrapper graph of one search session."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    model: ModelInterface
    graph: Graph


def unique(elements: Iterable[BioPAXElement]) -> list[BioPAXElement]:
    """Drop repeats, keeping first-seen order."""
    return list(dict.fromkeys(elements))


class Constraint(ABC):
    """
    Base class of all constraints.

    Attributes:
        size: Number of pattern variables the constraint is mapped to
    """

    size: int = 1

    def can_generate(self) -> bool:
        return False

    def generate(self, bound: tuple, ctx: SearchContext) -> list[BioPAXElement]:
        """Candidates for the last variable, given the values of the others."""
        raise TypeError(f"{type(self).__name__} cannot generate candidates")

    @abstractmethod
    def satisfies(self, elements: tuple, ctx: SearchContext) -> bool:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class GeneratingConstraint(Constraint):
    """A constraint whose test is membership in its own candidate list."""

    size = 2

    def can_generate(self) -> bool:
        return True

    @abstractmethod
    def generate(self, bound: tuple, ctx: SearchContext) -> list[BioPAXElement]:
        pass

    def satisfies(self, elements: tuple, ctx: SearchContext) -> bool:
        return elements[-1] in self.generate(elements[:-1], ctx)


class MappedConst(NamedTuple):
    """A constraint together with the variable indexes it is mapped to."""

    constraint: Constraint
    inds: tuple[int, ...]


# ============================================================================
# Filters
# ============================================================================


class Type(Constraint):
    """The variable is an instance of `cls`."""

    def __init__(self, cls: type):
        self.cls = cls

    def satisfies(self, elements, ctx):
        return isinstance(elements[0], self.cls)

    def __repr__(self):
        return f"Type({self.cls.__name__})"


class Equality(Constraint):
    """The two variables are (or are not) the same element."""

    size = 2

    def __init__(self, equal: bool):
        self.equal = equal

    def satisfies(self, elements, ctx):
        return (elements[0] == elements[1]) == self.equal

    def __repr__(self):
        return f"Equality({self.equal})"


class NOT(Constraint):
    """Negation of another constraint, mapped to the same variables."""

    def __init__(self, con: Constraint):
        self.con = con
        self.size = con.size

    def satisfies(self, elements, ctx):
        return not self.con.satisfies(elements, ctx)

    def __repr__(self):
        return f"NOT({self.con!r})"


class OR(Constraint):
    """
    Satisfied when any branch is.

    Branch indexes are relative to the variables the OR itself is mapped to.
    The OR can generate when every branch generates its last variable and that
    variable is the OR's last one; the candidates are the union of the branches'.
    """

    def __init__(self, *branches: MappedConst):
        if not branches:
            raise ValueError("OR needs at least one branch")
        self.branches = branches
        self.size = max(max(b.inds) for b in branches) + 1

    def can_generate(self) -> bool:
        return all(b.constraint.can_generate() and b.inds[-1] == self.size - 1 for b in self.branches)

    def generate(self, bound, ctx):
        if not self.can_generate():
            return super().generate(bound, ctx)
        candidates: list[BioPAXElement] = []
        for branch in self.branches:
            args = tuple(bound[i] for i in branch.inds[:-1])
            candidates.extend(branch.constraint.generate(args, ctx))
        return unique(candidates)

    def satisfies(self, elements, ctx):
        return any(b.constraint.satisfies(tuple(elements[i] for i in b.inds), ctx) for b in self.branches)

    def __repr__(self):
        return f"OR({', '.join(repr(b.constraint) for b in self.branches)})"


class SizeType(str, Enum):
    EQUAL = "=="
    GREATER = ">"
    GREATER_OR_EQUAL = ">="
    LESS = "<"
    LESS_OR_EQUAL = "<="


class Size(Constraint):
    """The number of candidates another constraint generates is compared to `size_limit`."""

    def __init__(self, con: Constraint, size_limit: int, kind: SizeType = SizeType.EQUAL):
        if not con.can_generate():
            raise TypeError(f"Size needs a generating constraint, got {con!r}")
        self.con = con
        self.size_limit = size_limit
        self.kind = kind
        self.size = con.size - 1

    def satisfies(self, elements, ctx):
        n = len(self.con.generate(tuple(elements), ctx))
        if self.kind == SizeType.EQUAL:
            return n == self.size_limit
        if self.kind == SizeType.GREATER:
            return n > self.size_limit
        if self.kind == SizeType.GREATER_OR_EQUAL:
            return n >= self.size_limit
        if self.kind == SizeType.LESS:
            return n < self.size_limit
        return n <= self.size_limit

    def __repr__(self):
        return f"Size({self.con!r} {self.kind.value} {self.size_limit})"


class Empty(Size):
    """The wrapped constraint generates nothing."""

    def __init__(self, con: Constraint):
        super().__init__(con, 0, SizeType.EQUAL)


class NonUbiquitous(Constraint):
    """The element, and its entity reference, are not on a blacklist of URIs."""

    def __init__(self, blacklist: Iterable[str]):
        self.blacklist = frozenset(blacklist)

    def satisfies(self, elements, ctx):
        element = elements[0]
        if element.uri in self.blacklist:
            return False
        if isinstance(element, SimplePhysicalEntity) and element.entity_reference in self.blacklist:
            return False
        return True


# ============================================================================
# Relations read from the model
# ============================================================================


class Relation(GeneratingConstraint):
    """
    Navigate one model relation from the first variable to the second.

    Args:
        name: Short name used in reprs and error messages
        accessor: Callable returning the related elements of an element
    """

    def __init__(self, name: str, accessor: Callable[[SearchContext, BioPAXElement], Iterable[BioPAXElement]]):
        self.name = name
        self.accessor = accessor

    def generate(self, bound, ctx):
        return unique(self.accessor(ctx, bound[0]))

    def __repr__(self):
        return f"Relation({self.name})"


class LinkType(str, Enum):
    UP = "up"
    DOWN = "down"


def linked_entities(model: ModelInterface, pe: PhysicalEntity, link: LinkType) -> list[PhysicalEntity]:
    """The entity itself plus every complex/generic entity above it, or every component/member below it."""
    result: dict[str, PhysicalEntity] = {pe.uri: pe}
    stack = [pe]
    while stack:
        current = stack.pop()
        if link == LinkType.UP:
            nxt = model.component_of(current) + model.member_of(current)
        else:
            nxt = model.members(current)
            if isinstance(current, Complex):
                nxt = model.components(current) + nxt
        for other in nxt:
            if other.uri not in result:
                result[other.uri] = other
                stack.append(other)
    return list(result.values())


class LinkedPE(GeneratingConstraint):
    """
    Link a physical entity to its more general or more specific forms.

    UP reaches the complexes containing the entity and the generic entities
    listing it as a member; DOWN reaches components and members. The entity
    itself is always a candidate, so the second label may reuse the element.
    """

    def __init__(self, link: LinkType):
        self.link = link

    def generate(self, bound, ctx):
        pe = bound[0]
        if not isinstance(pe, PhysicalEntity):
            return []
        return linked_entities(ctx.model, pe, self.link)

    def __repr__(self):
        return f"LinkedPE({self.link.value})"


class RelType(str, Enum):
    INPUT = "input"
    OUTPUT = "output"


class Participant(GeneratingConstraint):
    """Conversion to its inputs or outputs, taking `conversion_direction` into account."""

    def __init__(self, rel: RelType):
        self.rel = rel

    def generate(self, bound, ctx):
        conv = bound[0]
        if not isinstance(conv, Conversion):
            return []
        sides = ctx.model.inputs(conv) if self.rel == RelType.INPUT else ctx.model.outputs(conv)
        return unique(sides)

    def __repr__(self):
        return f"Participant({self.rel.value})"


class ParticipatesInConv(GeneratingConstraint):
    """Physical entity to the conversions it is an input (or output) of."""

    def __init__(self, rel: RelType):
        self.rel = rel

    def generate(self, bound, ctx):
        pe = bound[0]
        if not isinstance(pe, PhysicalEntity):
            return []
        found = []
        for inter in ctx.model.participant_of(pe):
            if not isinstance(inter, Conversion):
                continue
            side = ctx.model.inputs(inter) if self.rel == RelType.INPUT else ctx.model.outputs(inter)
            if pe in side:
                found.append(inter)
        return unique(found)

    def __repr__(self):
        return f"ParticipatesInConv({self.rel.value})"


class ConversionSideType(str, Enum):
    SAME_SIDE = "same"
    OTHER_SIDE = "other"


class ConversionSide(GeneratingConstraint):
    """(PE, Conversion) to the entities on the same or the other side of that conversion."""

    size = 3

    def __init__(self, side: ConversionSideType):
        self.side = side

    def generate(self, bound, ctx):
        pe, conv = bound[0], bound[1]
        if not isinstance(conv, Conversion):
            return []
        left, right = ctx.model.left(conv), ctx.model.right(conv)
        found: list[BioPAXElement] = []
        if pe in left:
            found.extend(right if self.side == ConversionSideType.OTHER_SIDE else [e for e in left if e != pe])
        if pe in right:
            found.extend(left if self.side == ConversionSideType.OTHER_SIDE else [e for e in right if e != pe])
        return unique(found)

    def __repr__(self):
        return f"ConversionSide({self.side.value})"


def interaction_participants(model: ModelInterface, inter: BioPAXElement) -> list[PhysicalEntity]:
    """Physical entities taking part in an interaction, controllers excluded."""
    if isinstance(inter, Conversion):
        found = model.left(inter) + model.right(inter)
    elif isinstance(inter, TemplateReaction):
        template = model.template(inter)
        found = ([template] if template is not None else []) + model.products(inter)
    else:
        found = []
    if isinstance(inter, Interaction) and not isinstance(inter, Control):
        found += [e for e in (model.get(uri) for uri in inter.participant) if isinstance(e, PhysicalEntity)]
    return unique(found)


class InterToPartER(GeneratingConstraint):
    """Interaction to the entity references of its participants, through complexes and generics."""

    def generate(self, bound, ctx):
        inter = bound[0]
        refs = []
        for pe in interaction_participants(ctx.model, inter):
            for spe in linked_entities(ctx.model, pe, LinkType.DOWN):
                if isinstance(spe, SimplePhysicalEntity):
                    er = ctx.model.entity_reference(spe)
                    if er is not None:
                        refs.append(er)
        return unique(refs)


# ============================================================================
# Relations read from the wrapper graph
# ============================================================================


class Neighbor(GeneratingConstraint):
    """Elements one graph edge away in `direction`, optionally only instances of `node_type`."""

    def __init__(self, direction: Direction, node_type: type | None = None):
        self.direction = direction
        self.node_type = node_type

    def generate(self, bound, ctx):
        node = ctx.graph.get_graph_object(bound[0])
        if node is None:
            return []
        return [
            n.element
            for n in node.neighbors(self.direction)
            if self.node_type is None or isinstance(n.element, self.node_type)
        ]

    def __repr__(self):
        name = self.node_type.__name__ if self.node_type else "*"
        return f"Neighbor({self.direction.value}, {name})"


class ControlToInteraction(GeneratingConstraint):
    """
    Control to the processes it regulates, directly or through a chain of controls.

    The chain is followed along downstream graph edges through control nodes
    only; each control is visited once, so cyclic control chains terminate.
    """

    def __init__(self, target_type: type = Interaction):
        self.target_type = target_type

    def generate(self, bound, ctx):
        start = ctx.graph.get_graph_object(bound[0])
        if not isinstance(start, ControlWrapper):
            return []
        found: list[BioPAXElement] = []
        visited = {start.key}
        queue = [start]
        while queue:
            node = queue.pop(0)
            for nxt in node.neighbors(Direction.DOWNSTREAM):
                if isinstance(nxt, ControlWrapper):
                    if nxt.key not in visited:
                        visited.add(nxt.key)
                        queue.append(nxt)
                elif isinstance(nxt.element, self.target_type):
                    found.append(nxt.element)
        return unique(found)

    def __repr__(self):
        return f"ControlToInteraction({self.target_type.__name__})"


class InteractionToControl(GeneratingConstraint):
    """Process to the controls regulating it, including controls of those controls."""

    def generate(self, bound, ctx):
        start = ctx.graph.get_graph_object(bound[0])
        if start is None:
            return []
        found: list[BioPAXElement] = []
        visited = {start.key}
        queue = [start]
        while queue:
            node = queue.pop(0)
            for prev in node.neighbors(Direction.UPSTREAM):
                if isinstance(prev, ControlWrapper) and prev.key not in visited:
                    visited.add(prev.key)
                    found.append(prev.element)
                    queue.append(prev)
        return found


class ControlToController(GeneratingConstraint):
    """Control to its controlling physical entities (pathway controllers are not followed)."""

    def generate(self, bound, ctx):
        node = ctx.graph.get_graph_object(bound[0])
        if not isinstance(node, ControlWrapper):
            return []
        return [
            n.element
            for n in node.neighbors(Direction.UPSTREAM)
            if isinstance(n.element, PhysicalEntity) and not isinstance(n.element, Pathway)
        ]


class NeighborhoodOf(GeneratingConstraint):
    """
    Elements reachable within `limit` breadth steps.

    Only physical entities spend the limit; controls and conversions in
    between are crossed for free. The start element is not a candidate.
    """

    def __init__(self, direction: Direction, limit: int = 1, node_type: type = PhysicalEntity):
        self.direction = direction
        self.limit = limit
        self.node_type = node_type

    def generate(self, bound, ctx):
        node = ctx.graph.get_graph_object(bound[0])
        if node is None:
            return []
        reached = bfs(ctx.graph, [node], self.direction, self.limit)
        return [
            n.element for n in reached if n is not node and isinstance(n.element, self.node_type)
        ]

    def __repr__(self):
        return f"NeighborhoodOf({self.direction.value}, {self.limit})"


def entity_reference_of(ctx: SearchContext, element: BioPAXElement) -> list[BioPAXElement]:
    if isinstance(element, EntityReference):
        return ctx.model.entity_reference_of(element)
    return []


def entity_reference(ctx: SearchContext, element: BioPAXElement) -> list[BioPAXElement]:
    if isinstance(element, SimplePhysicalEntity):
        er = ctx.model.entity_reference(element)
        return [er] if er is not None else []
    return []
