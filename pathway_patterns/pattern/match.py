from pydantic import BaseModel, ConfigDict

from ..model import BioPAXElement
from .pattern import Pattern


class Match(BaseModel):
    """
    One satisfying assignment of a pattern's variables.

    Attributes:
        pattern: The pattern that was matched
        variables: Bound elements, in the pattern's label order

    Example:
        >>> m.get("Control").control_type
        <ControlType.ACTIVATION: 'ACTIVATION'>
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    pattern: Pattern
    variables: tuple[BioPAXElement, ...]

    def get(self, label: str) -> BioPAXElement:
        return self.variables[self.pattern.index_of(label)]

    def __getitem__(self, label: str) -> BioPAXElement:
        return self.get(label)

    @property
    def first(self) -> BioPAXElement:
        """The element the search started from."""
        return self.variables[0]

    def as_dict(self) -> dict[str, BioPAXElement]:
        return dict(zip(self.pattern.labels, self.variables))

    def __len__(self) -> int:
        return len(self.variables)

    def __repr__(self) -> str:
        bound = ", ".join(f"{label}={element.uri}" for label, element in self.as_dict().items())
        return f"Match({self.pattern.name!r}: {bound})"
