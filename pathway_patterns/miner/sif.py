"""
SIF relation types and the interactions miners produce.

A SIF (simple interaction format) network is a list of
``SOURCE<TAB>TYPE<TAB>TARGET`` lines. Each `SIFInteraction` is one such line
together with the pattern matches that support it.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..errors import MinerConfigurationError
from ..model import XrefKind
from ..pattern import Match


class SIFType(str, Enum):
    """
    Relation types a SIF network can contain.

    The value is the tag written to SIF files. Directed types relate a source
    that acts on a target; undirected types are symmetric.
    """

    CONTROLS_STATE_CHANGE = "controls-state-change"
    CONTROLS_EXPRESSION = "controls-expression"
    CONTROLS_DEGRADATION = "controls-degradation"
    CONSECUTIVE_CATALYSIS = "consecutive-catalysis"
    IN_SAME_COMPLEX = "in-complex-with"
    INTERACTS_WITH = "interacts-with"

    @property
    def tag(self) -> str:
        return self.value

    @property
    def directed(self) -> bool:
        return self not in (SIFType.IN_SAME_COMPLEX, SIFType.INTERACTS_WITH)

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: "SIFType | str") -> "SIFType":
        """
        Accept a member, its tag ("controls-state-change") or its name ("CONTROLS_STATE_CHANGE").

        Raises:
            MinerConfigurationError: The value names no SIF type
        """
        if isinstance(value, SIFType):
            return value
        text = str(value).strip()
        for member in cls:
            if text == member.value or text.upper().replace("-", "_") == member.name:
                return member
        raise MinerConfigurationError(
            f"Unsupported SIF type {value!r}; expected one of {', '.join(m.value for m in cls)}"
        )


_DESCRIPTIONS = {
    SIFType.CONTROLS_STATE_CHANGE: "First protein controls a reaction that changes the state of the second protein.",
    SIFType.CONTROLS_EXPRESSION: "First protein controls the expression of the second protein.",
    SIFType.CONTROLS_DEGRADATION: "First protein controls the degradation of the second protein.",
    SIFType.CONSECUTIVE_CATALYSIS: "Proteins catalyze two reactions where an output of the first is an input of the second.",
    SIFType.IN_SAME_COMPLEX: "Proteins are members of the same complex.",
    SIFType.INTERACTS_WITH: "Alias of in-complex-with: proteins are members of the same complex.",
}


def pubmed_ids(element) -> list[str]:
    """PubMed accessions of the publication xrefs on `element`."""
    ids = []
    for xref in getattr(element, "xrefs", ()):
        if xref.kind == XrefKind.PUBLICATION and xref.id and (xref.db or "").lower() == "pubmed":
            ids.append(xref.id)
    return ids


class SIFInteraction(BaseModel):
    """
    A binary relation between two identifiers, with its supporting matches.

    Two interactions are the same when their keys are: source, relation type
    and target, where the order of the ends does not matter for undirected
    interactions. Merging unions the evidence.

    Attributes:
        source_id: Identifier of the source (a gene symbol with the default fetcher)
        target_id: Identifier of the target
        type: Relation written in the SIF line, e.g. "controls-state-change" or "degrades"
        sif_type: The SIF type this interaction belongs to
        directed: Whether source and target may be swapped
        matches: Pattern matches supporting the interaction
        pubmed_ids: PubMed references collected from the matched elements
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source_id: str | None
    target_id: str | None
    type: str
    sif_type: SIFType
    directed: bool = True
    matches: list[Match] = Field(default_factory=list)
    pubmed_ids: set[str] = Field(default_factory=set)

    @property
    def key(self) -> tuple:
        if self.directed:
            return (self.source_id, self.type, self.target_id)
        a, b = sorted((self.source_id or "", self.target_id or ""))
        return (a, self.type, b)

    def has_ids(self) -> bool:
        return bool(self.source_id) and bool(self.target_id)

    def merge_with(self, other: "SIFInteraction") -> None:
        """Add the evidence of an equal interaction to this one."""
        if other.key != self.key:
            raise ValueError(f"Cannot merge {other.to_sif_line()!r} into {self.to_sif_line()!r}")
        seen = {id(m) for m in self.matches}
        self.matches.extend(m for m in other.matches if id(m) not in seen)
        self.pubmed_ids |= other.pubmed_ids

    @property
    def evidence_count(self) -> int:
        return len(self.matches)

    def to_sif_line(self) -> str:
        return f"{self.source_id}\t{self.type}\t{self.target_id}"

    def __hash__(self) -> int:
        return hash(self.key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SIFInteraction):
            return NotImplemented
        return self.key == other.key

    def __repr__(self) -> str:
        return f"SIFInteraction({self.to_sif_line()!r}, evidence={self.evidence_count})"
