"""
## Overview

Pydantic classes for the pathway model that patterns are searched over.

The classes mirror the BioPAX Level 3 hierarchy closely enough for pattern
search: physical entities and their entity references, the interactions that
consume and produce them, and the controls that regulate those interactions.
They are deliberately thin. Structural relations between elements are stored
as lists of element URIs and resolved (in both directions) by the model that
holds them, see `pathway_patterns.model.model`.

Elements are frozen and compare by `uri` only, so they can be used as
dictionary keys and set members while a search runs.

Example:
    >>> ref = ProteinReference(
    ...     uri="http://identifiers.org/uniprot/P04637",
    ...     display_name="TP53",
    ...     xrefs=[Xref(db="HGNC", id="HGNC:11998")],
    ... )
    >>> p53 = Protein(uri="p53", entity_reference=ref.uri)
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .vocab import ControlType, ConversionDirection, XrefKind, coerce_control_type


class Xref(BaseModel):
    """
    Cross-reference to an external database record.

    Attributes:
        db: Database name as written in the source (e.g. "HGNC", "UniProt", "PubMed")
        id: Accession in that database (e.g. "HGNC:11998", "P04637")
        kind: Unification, relationship or publication reference
    """

    model_config = ConfigDict(frozen=True)

    db: str | None = None
    id: str | None = None
    kind: XrefKind = XrefKind.UNIFICATION


class BioPAXElement(BaseModel):
    """
    Base class for every element of a pathway model.

    Attributes:
        uri: Stable identifier, unique within a model
        display_name: Human readable name
        comment: Free text annotations
    """

    model_config = ConfigDict(frozen=True)

    uri: str
    display_name: str | None = None
    comment: list[str] = Field(default_factory=list)

    def __hash__(self) -> int:
        return hash(self.uri)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BioPAXElement):
            return NotImplemented
        return self.uri == other.uri

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.uri!r})"

    def __str__(self) -> str:
        return self.display_name or self.uri


class XReferrable(BioPAXElement):
    """An element that may carry cross-references."""

    xrefs: list[Xref] = Field(default_factory=list)

    def publication_xrefs(self) -> list[Xref]:
        return [x for x in self.xrefs if x.kind == XrefKind.PUBLICATION]


# ============================================================================
# Entity references
# ============================================================================


class EntityReference(XReferrable):
    """Grouping of physical entities that share a molecular identity (e.g. one UniProt record)."""


class SequenceEntityReference(EntityReference):
    organism: str | None = None


class ProteinReference(SequenceEntityReference):
    pass


class RnaReference(SequenceEntityReference):
    pass


class DnaReference(SequenceEntityReference):
    pass


class SmallMoleculeReference(EntityReference):
    chemical_formula: str | None = None


# ============================================================================
# Entities
# ============================================================================


class Entity(XReferrable):
    data_source: list[str] = Field(default_factory=list)


class PhysicalEntity(Entity):
    """
    A pool of molecules in a particular state and location.

    Attributes:
        cellular_location: Cellular location term (e.g. "cytoplasm")
        features: Free text descriptions of modifications
        member_physical_entity: URIs of specific entities this generic entity stands for
    """

    cellular_location: str | None = None
    features: list[str] = Field(default_factory=list)
    member_physical_entity: list[str] = Field(default_factory=list)


class SimplePhysicalEntity(PhysicalEntity):
    entity_reference: str | None = None


class SequenceEntity(SimplePhysicalEntity):
    """Physical entities with a sequence: proteins, RNA and DNA."""


class Protein(SequenceEntity):
    pass


class Rna(SequenceEntity):
    pass


class Dna(SequenceEntity):
    pass


class SmallMolecule(SimplePhysicalEntity):
    pass


class Complex(PhysicalEntity):
    component: list[str] = Field(default_factory=list)


# ============================================================================
# Interactions
# ============================================================================


class Interaction(Entity):
    participant: list[str] = Field(default_factory=list)


class Conversion(Interaction):
    """
    An interaction that turns its left participants into its right participants.

    Attributes:
        left: URIs of physical entities on the left side
        right: URIs of physical entities on the right side
        conversion_direction: Direction the conversion happens in, if known
    """

    left: list[str] = Field(default_factory=list)
    right: list[str] = Field(default_factory=list)
    conversion_direction: ConversionDirection | None = None


class BiochemicalReaction(Conversion):
    pass


class ComplexAssembly(Conversion):
    pass


class Degradation(Conversion):
    pass


class Transport(Conversion):
    pass


class TemplateReaction(Interaction):
    template: str | None = None
    product: list[str] = Field(default_factory=list)


class MolecularInteraction(Interaction):
    pass


class Control(Interaction):
    """
    Regulation of one or more processes by one or more controllers.

    Attributes:
        controller: URIs of controlling physical entities or pathways
        controlled: URIs of controlled interactions, pathways or other controls
        control_type: Activation or inhibition type; unknown strings are kept as given
    """

    controller: list[str] = Field(default_factory=list)
    controlled: list[str] = Field(default_factory=list)
    control_type: ControlType | str | None = None

    @field_validator("control_type", mode="before")
    @classmethod
    def normalize_control_type(cls, v):
        return coerce_control_type(v)


class Catalysis(Control):
    pass


class Modulation(Control):
    pass


class TemplateReactionRegulation(Control):
    pass


# ============================================================================
# Pathways
# ============================================================================


class Pathway(Entity):
    pathway_component: list[str] = Field(default_factory=list)
    organism: str | None = None


ELEMENT_TYPES: dict[str, type[BioPAXElement]] = {
    cls.__name__: cls
    for cls in (
        ProteinReference,
        RnaReference,
        DnaReference,
        SmallMoleculeReference,
        Protein,
        Rna,
        Dna,
        SmallMolecule,
        Complex,
        Conversion,
        BiochemicalReaction,
        ComplexAssembly,
        Degradation,
        Transport,
        TemplateReaction,
        MolecularInteraction,
        Control,
        Catalysis,
        Modulation,
        TemplateReactionRegulation,
        Pathway,
    )
}
