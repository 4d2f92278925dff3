"""
Declarative graph patterns.

A pattern is an ordered list of labeled variables and the constraints mapped
onto them. It starts with one label restricted to a type; every later
constraint may read any label bound before it and may introduce at most one
new label, its last one, which it must be able to generate candidates for.

Example:
    >>> p = Pattern(Complex, "complex", name="members")
    >>> p.add(LinkedPE(LinkType.DOWN), "complex", "member", allow_revisit=False)
    >>> p.add(Type(Protein), "member")

Patterns are validated as they are built, so a constraint reading a label
that nothing binds yet fails immediately rather than during a search.
"""

from ..errors import PatternError
from .constraints import Constraint, MappedConst, Type


class Pattern:
    """
    Ordered labeled variables and the constraints relating them.

    Args:
        start_type: Element class of the first variable; the search starts from every instance
        label: Label of the first variable
        name: Name used in error messages and logs
        allow_revisit: Default for labels added without an explicit flag. When False,
            a label may not be bound to an element already bound to another label.
    """

    def __init__(self, start_type: type, label: str, name: str | None = None, allow_revisit: bool = True):
        self.start_type = start_type
        self.name = name or f"{start_type.__name__} pattern"
        self.allow_revisit = allow_revisit
        self._labels: list[str] = []
        self._index: dict[str, int] = {}
        self._revisit: list[bool] = []
        self._constraints: list[MappedConst] = []

        self._new_label(label, allow_revisit)
        self._constraints.append(MappedConst(Type(start_type), (0,)))

    def _new_label(self, label: str, allow_revisit: bool) -> None:
        self._index[label] = len(self._labels)
        self._labels.append(label)
        self._revisit.append(allow_revisit)

    def add(self, constraint: Constraint, *labels: str, allow_revisit: bool | None = None) -> "Pattern":
        """
        Map `constraint` to `labels` and append it.

        The last label may be new; every other label must already be bound.

        Raises:
            PatternError: The mapping is inconsistent with the labels bound so far
        """
        cname = type(constraint).__name__
        if not labels:
            raise PatternError(self.name, None, f"{cname} was added without labels")
        if len(labels) != constraint.size:
            raise PatternError(
                self.name, labels[-1], f"{cname} maps {constraint.size} variable(s) but got {len(labels)}"
            )
        for label in labels[:-1]:
            if label not in self._index:
                raise PatternError(self.name, label, f"{cname} reads a label that no earlier constraint binds")

        last = labels[-1]
        if last not in self._index:
            if not constraint.can_generate():
                raise PatternError(self.name, last, f"{cname} cannot generate candidates for a new label")
            self._new_label(last, self.allow_revisit if allow_revisit is None else allow_revisit)
        elif allow_revisit is not None:
            raise PatternError(self.name, last, "the revisit flag can only be set where the label is introduced")

        self._constraints.append(MappedConst(constraint, tuple(self._index[label] for label in labels)))
        return self

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self._labels)

    @property
    def constraints(self) -> tuple[MappedConst, ...]:
        return tuple(self._constraints)

    @property
    def size(self) -> int:
        """Number of variables."""
        return len(self._labels)

    def has_label(self, label: str) -> bool:
        return label in self._index

    def index_of(self, label: str) -> int:
        try:
            return self._index[label]
        except KeyError:
            raise PatternError(self.name, label, "no such label") from None

    def label_of(self, index: int) -> str:
        return self._labels[index]

    def allows_revisit(self, index: int) -> bool:
        return self._revisit[index]

    def __repr__(self) -> str:
        return f"Pattern({self.name!r}, labels={self._labels!r})"
