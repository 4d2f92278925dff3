"""
Exhaustive backtracking search of a pattern over a model.

For every element of the pattern's start type the searcher walks the
constraints in their declared order. A generating constraint whose last
variable is still unbound proposes candidates, and each candidate is tried in
turn; any other constraint only tests the current assignment. Every complete
assignment becomes one `Match`, and the search always continues after it, so
all matches are returned, in a deterministic order.

The engine itself imposes no cycle limit. Labels declared with
``allow_revisit=False`` are checked against a visited set of the elements
bound so far; otherwise acyclicity is whatever the pattern's constraints say.
"""

import logging
from collections import Counter

from ..errors import GraphError, PatternError
from ..graph import Graph
from ..model import BioPAXElement, ModelInterface
from .constraints import SearchContext
from .match import Match
from .pattern import Pattern

logger = logging.getLogger(__name__)


class _SearchState:
    """Bindings of one in-flight search plus a count of the elements bound."""

    def __init__(self, size: int, start: BioPAXElement):
        self.bindings: list[BioPAXElement | None] = [None] * size
        self.visited: Counter = Counter()
        self.bind(0, start)

    def bind(self, index: int, element: BioPAXElement) -> None:
        self.bindings[index] = element
        self.visited[element] += 1

    def unbind(self, index: int) -> None:
        element = self.bindings[index]
        self.bindings[index] = None
        self.visited[element] -= 1
        if not self.visited[element]:
            del self.visited[element]


class Searcher:
    """
    Searches one model, over one wrapper graph.

    The graph is built here unless one is given; it belongs to this searcher
    and must not be shared with a concurrent search.
    """

    def __init__(self, model: ModelInterface, graph: Graph | None = None):
        if graph is None:
            graph = Graph(model)
        elif graph.model is not model:
            raise GraphError("The graph was built from a different model")
        self.model = model
        self.graph = graph
        self.ctx = SearchContext(model=model, graph=graph)

    def search(self, pattern: Pattern) -> dict[BioPAXElement, list[Match]]:
        """Matches of `pattern`, grouped by the element they start from."""
        result: dict[BioPAXElement, list[Match]] = {}
        for element in self.model.elements(pattern.start_type):
            matches = self.search_from(element, pattern)
            if matches:
                result[element] = matches
        logger.debug(
            "Pattern %r: %d matches from %d start elements",
            pattern.name,
            sum(len(v) for v in result.values()),
            len(result),
        )
        return result

    def search_from(self, element: BioPAXElement, pattern: Pattern) -> list[Match]:
        """Every match of `pattern` whose first variable is `element`."""
        out: list[Match] = []
        state = _SearchState(pattern.size, element)
        self._recurse(pattern, state, 0, out)
        return out

    def search_plain(self, pattern: Pattern) -> list[Match]:
        """All matches in one list."""
        return [m for matches in self.search(pattern).values() for m in matches]

    def collect(self, pattern: Pattern, label: str) -> list[BioPAXElement]:
        """Distinct elements bound to `label` over all matches."""
        index = pattern.index_of(label)
        return list(dict.fromkeys(m.variables[index] for m in self.search_plain(pattern)))

    def _recurse(self, pattern: Pattern, state: _SearchState, index: int, out: list[Match]) -> None:
        constraints = pattern.constraints
        if index == len(constraints):
            out.append(Match(pattern=pattern, variables=tuple(state.bindings)))
            return

        constraint, inds = constraints[index]
        for i in inds[:-1]:
            if state.bindings[i] is None:
                raise PatternError(
                    pattern.name,
                    pattern.label_of(i),
                    f"{type(constraint).__name__} reads a label that is not bound at this point",
                )

        last = inds[-1]
        if state.bindings[last] is None:
            if not constraint.can_generate():
                raise PatternError(
                    pattern.name,
                    pattern.label_of(last),
                    f"{type(constraint).__name__} cannot generate candidates for this label",
                )
            bound = tuple(state.bindings[i] for i in inds[:-1])
            revisit = pattern.allows_revisit(last)
            for candidate in constraint.generate(bound, self.ctx):
                if not revisit and candidate in state.visited:
                    continue
                state.bind(last, candidate)
                self._recurse(pattern, state, index + 1, out)
                state.unbind(last)
        elif constraint.satisfies(tuple(state.bindings[i] for i in inds), self.ctx):
            self._recurse(pattern, state, index + 1, out)


def search(model: ModelInterface, pattern: Pattern, graph: Graph | None = None) -> dict[BioPAXElement, list[Match]]:
    """Search `model` for `pattern` with a fresh (or the given) wrapper graph."""
    return Searcher(model, graph).search(pattern)


def search_plain(model: ModelInterface, pattern: Pattern, graph: Graph | None = None) -> list[Match]:
    return Searcher(model, graph).search_plain(pattern)
