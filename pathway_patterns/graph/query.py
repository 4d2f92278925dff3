"""
Breadth-first neighborhood queries on the wrapper graph.

Only breadth nodes (physical entities) spend the distance limit. Controls,
conversions and template reactions are crossed for free, so a limit of 1 from
a protein reaches the proteins one reaction away however many controls sit in
between. Equivalent physical entities (complexes and generics containing an
entity, its components and members) are visited at the same distance as the
entity itself. Siblings inside a shared complex are not equivalents.
"""

from collections import deque
from typing import Iterable

from ..model import BioPAXElement
from .base import AbstractNode, Direction, Graph


def _closure(node: AbstractNode, step, seen: dict[str, AbstractNode]) -> None:
    stack = [node]
    while stack:
        current = stack.pop()
        for other in step(current):
            if other.key not in seen:
                seen[other.key] = other
                stack.append(other)


def _equivalents(node: AbstractNode) -> list[AbstractNode]:
    """
    The node plus its upper and lower equivalents, transitively.

    Containers are followed upwards only and parts downwards only, so the
    other components of a complex are not equivalents of one component.
    """
    seen: dict[str, AbstractNode] = {node.key: node}
    _closure(node, lambda n: n.upper_equivalent(), seen)
    _closure(node, lambda n: n.lower_equivalent(), seen)
    return list(seen.values())


def bfs(
    graph: Graph,
    sources: Iterable[AbstractNode],
    direction: Direction,
    limit: int,
) -> dict[AbstractNode, int]:
    """
    Walk from `sources` and return every reached node with its distance.

    Args:
        graph: Graph the sources belong to
        sources: Start nodes, all at distance 0
        direction: Follow downstream edges, upstream edges, or both
        limit: Largest distance to reach; only breadth nodes increase the distance

    Returns:
        Dictionary of node to the shortest distance at which it was reached,
        in discovery order
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    dist: dict[AbstractNode, int] = {}
    queue: deque[AbstractNode] = deque()

    for source in sources:
        for node in _equivalents(source):
            if node not in dist:
                dist[node] = 0
                queue.append(node)

    while queue:
        node = queue.popleft()
        d = dist[node]
        for neighbor in node.neighbors(direction):
            step = 1 if neighbor.is_breadth_node() else 0
            nd = d + step
            if nd > limit:
                continue
            for reached in _equivalents(neighbor):
                if reached not in dist or dist[reached] > nd:
                    dist[reached] = nd
                    # Free steps go to the front so shorter distances settle first.
                    if step == 0:
                        queue.appendleft(reached)
                    else:
                        queue.append(reached)
    return dist


def neighborhood(
    graph: Graph,
    elements: Iterable[BioPAXElement],
    direction: Direction = Direction.BOTHSTREAM,
    limit: int = 1,
) -> list[BioPAXElement]:
    """Elements within `limit` breadth steps of `elements`, starting elements included."""
    sources = [n for n in (graph.get_graph_object(e) for e in elements) if n is not None]
    return [node.element for node in bfs(graph, sources, direction, limit)]
