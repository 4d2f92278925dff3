"""Pathway model elements and the read-only model interface searched by patterns."""

from .elements import (
    ELEMENT_TYPES,
    BioPAXElement,
    BiochemicalReaction,
    Catalysis,
    Complex,
    ComplexAssembly,
    Control,
    Conversion,
    Degradation,
    Dna,
    DnaReference,
    Entity,
    EntityReference,
    Interaction,
    Modulation,
    MolecularInteraction,
    Pathway,
    PhysicalEntity,
    Protein,
    ProteinReference,
    Rna,
    RnaReference,
    SequenceEntity,
    SequenceEntityReference,
    SimplePhysicalEntity,
    SmallMolecule,
    SmallMoleculeReference,
    TemplateReaction,
    TemplateReactionRegulation,
    Transport,
    Xref,
    XReferrable,
)
from .model import InMemoryModel, ModelInterface
from .vocab import ACTIVATION_FAMILY, ControlType, ConversionDirection, XrefKind, is_activation, is_inhibitory

__all__ = [
    "ACTIVATION_FAMILY",
    "ELEMENT_TYPES",
    "BioPAXElement",
    "BiochemicalReaction",
    "Catalysis",
    "Complex",
    "ComplexAssembly",
    "Control",
    "ControlType",
    "Conversion",
    "ConversionDirection",
    "Degradation",
    "Dna",
    "DnaReference",
    "Entity",
    "EntityReference",
    "InMemoryModel",
    "Interaction",
    "ModelInterface",
    "Modulation",
    "MolecularInteraction",
    "Pathway",
    "PhysicalEntity",
    "Protein",
    "ProteinReference",
    "Rna",
    "RnaReference",
    "SequenceEntity",
    "SequenceEntityReference",
    "SimplePhysicalEntity",
    "SmallMolecule",
    "SmallMoleculeReference",
    "TemplateReaction",
    "TemplateReactionRegulation",
    "Transport",
    "Xref",
    "XReferrable",
    "XrefKind",
    "is_activation",
    "is_inhibitory",
]
