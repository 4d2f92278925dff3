"""
Ready-made patterns and the relation constraints they are built from.

Each pattern starts from an entity reference (a gene product) and ends at
another one, so that miners can turn a match into a relation between two gene
symbols. Labels are part of the contract with the miners: a miner reads its
source, target and evidence elements from a match by label.
"""

from typing import Iterable

from ..graph import Direction
from ..model import (
    Catalysis,
    Complex,
    Control,
    Conversion,
    SequenceEntity,
    SequenceEntityReference,
    TemplateReaction,
)
from .constraints import (
    NOT,
    ControlToController,
    ControlToInteraction,
    ConversionSide,
    ConversionSideType,
    Empty,
    Equality,
    InteractionToControl,
    InterToPartER,
    LinkedPE,
    LinkType,
    Neighbor,
    NonUbiquitous,
    Participant,
    ParticipatesInConv,
    Relation,
    RelType,
    Size,
    SizeType,
    Type,
    entity_reference,
    entity_reference_of,
)
from .pattern import Pattern

# ============================================================================
# Relation helpers
# ============================================================================


def er_to_pe() -> Relation:
    """Entity reference to the simple physical entities that use it."""
    return Relation("entity_reference_of", entity_reference_of)


def pe_to_er() -> Relation:
    """Simple physical entity to its entity reference."""
    return Relation("entity_reference", entity_reference)


def link_to_complex() -> LinkedPE:
    """Physical entity to itself and every complex or generic entity containing it."""
    return LinkedPE(LinkType.UP)


def link_to_specific() -> LinkedPE:
    """Physical entity to itself and every component or member below it."""
    return LinkedPE(LinkType.DOWN)


def pe_to_control() -> Neighbor:
    """Physical entity to the controls it is a controller of."""
    return Neighbor(Direction.DOWNSTREAM, Control)


def control_to_conv() -> ControlToInteraction:
    return ControlToInteraction(Conversion)


def control_to_temp_reac() -> ControlToInteraction:
    return ControlToInteraction(TemplateReaction)


def interaction_to_control() -> InteractionToControl:
    return InteractionToControl()


def control_to_controller() -> ControlToController:
    return ControlToController()


def participant_er() -> InterToPartER:
    """Interaction to the entity references of its participants."""
    return InterToPartER()


def inputs() -> Participant:
    return Participant(RelType.INPUT)


def outputs() -> Participant:
    return Participant(RelType.OUTPUT)


def product() -> Relation:
    """Template reaction to its products."""
    return Relation(
        "product", lambda ctx, e: ctx.model.products(e) if isinstance(e, TemplateReaction) else []
    )


# ============================================================================
# Patterns
# ============================================================================


def degradation() -> Pattern:
    """
    A protein controls a conversion that consumes another protein and produces nothing.

    Labels: upstream PR, upstream SPE, upstream PE, Control, Conversion,
    input PE, input SPE, downstream PR.
    """
    p = Pattern(SequenceEntityReference, "upstream PR", name="degradation")
    p.add(er_to_pe(), "upstream PR", "upstream SPE")
    p.add(link_to_complex(), "upstream SPE", "upstream PE")
    p.add(pe_to_control(), "upstream PE", "Control")
    p.add(control_to_conv(), "Control", "Conversion")
    p.add(NOT(participant_er()), "Conversion", "upstream PR")
    p.add(Empty(outputs()), "Conversion")
    p.add(inputs(), "Conversion", "input PE")
    p.add(link_to_specific(), "input PE", "input SPE")
    p.add(Type(SequenceEntity), "input SPE")
    p.add(pe_to_er(), "input SPE", "downstream PR", allow_revisit=False)
    return p


def controls_state_change() -> Pattern:
    """
    A protein controls a conversion that changes the state of another protein.

    The changed protein appears on both sides of the conversion, as different
    physical entities of the same entity reference.
    """
    p = Pattern(SequenceEntityReference, "controller PR", name="controls-state-change")
    p.add(er_to_pe(), "controller PR", "controller simple PE")
    p.add(link_to_complex(), "controller simple PE", "controller PE")
    p.add(pe_to_control(), "controller PE", "Control")
    p.add(control_to_conv(), "Control", "Conversion")
    p.add(NOT(participant_er()), "Conversion", "controller PR")
    p.add(inputs(), "Conversion", "input PE")
    p.add(link_to_specific(), "input PE", "input simple PE")
    p.add(Type(SequenceEntity), "input simple PE")
    p.add(pe_to_er(), "input simple PE", "changed PR", allow_revisit=False)
    p.add(ConversionSide(ConversionSideType.OTHER_SIDE), "input PE", "Conversion", "output PE")
    p.add(Equality(False), "input PE", "output PE")
    p.add(link_to_specific(), "output PE", "output simple PE")
    p.add(pe_to_er(), "output simple PE", "changed PR")
    return p


def controls_state_change_but_is_participant() -> Pattern:
    """
    A protein takes part in a conversion unchanged, while another protein changes state.

    This catches controllers that a pathway database recorded as a participant
    on both sides instead of as the controller of a Control.
    """
    p = Pattern(SequenceEntityReference, "controller PR", name="controls-state-change-but-is-participant")
    p.add(er_to_pe(), "controller PR", "controller simple PE")
    p.add(link_to_complex(), "controller simple PE", "controller PE")
    p.add(ParticipatesInConv(RelType.INPUT), "controller PE", "Conversion")
    p.add(outputs(), "Conversion", "controller PE")
    p.add(inputs(), "Conversion", "input PE", allow_revisit=False)
    p.add(link_to_specific(), "input PE", "input simple PE")
    p.add(Type(SequenceEntity), "input simple PE")
    p.add(pe_to_er(), "input simple PE", "changed PR", allow_revisit=False)
    p.add(ConversionSide(ConversionSideType.OTHER_SIDE), "input PE", "Conversion", "output PE", allow_revisit=False)
    p.add(link_to_specific(), "output PE", "output simple PE")
    p.add(pe_to_er(), "output simple PE", "changed PR")
    return p


def controls_expression() -> Pattern:
    """A transcription factor controls a template reaction producing another protein."""
    p = Pattern(SequenceEntityReference, "TF PR", name="controls-expression")
    p.add(er_to_pe(), "TF PR", "TF simple PE")
    p.add(link_to_complex(), "TF simple PE", "TF PE")
    p.add(pe_to_control(), "TF PE", "Control")
    p.add(control_to_temp_reac(), "Control", "TempReac")
    p.add(NOT(participant_er()), "TempReac", "TF PR")
    p.add(product(), "TempReac", "product PE")
    p.add(link_to_specific(), "product PE", "product simple PE")
    p.add(Type(SequenceEntity), "product simple PE")
    p.add(pe_to_er(), "product simple PE", "product PR", allow_revisit=False)
    return p


def controls_expression_with_conversion() -> Pattern:
    """
    Expression modeled as a conversion that has no input and a single output.

    Some databases record transcription this way instead of with a template reaction.
    """
    p = Pattern(SequenceEntityReference, "TF PR", name="controls-expression-with-conversion")
    p.add(er_to_pe(), "TF PR", "TF simple PE")
    p.add(link_to_complex(), "TF simple PE", "TF PE")
    p.add(pe_to_control(), "TF PE", "Control")
    p.add(control_to_conv(), "Control", "Conversion")
    p.add(Empty(inputs()), "Conversion")
    p.add(Size(outputs(), 1, SizeType.EQUAL), "Conversion")
    p.add(NOT(participant_er()), "Conversion", "TF PR")
    p.add(outputs(), "Conversion", "product PE")
    p.add(link_to_specific(), "product PE", "product simple PE")
    p.add(Type(SequenceEntity), "product simple PE")
    p.add(pe_to_er(), "product simple PE", "product PR", allow_revisit=False)
    return p


def consecutive_catalysis(blacklist: Iterable[str] | None = None) -> Pattern:
    """
    Two proteins catalyze consecutive conversions: an output of the first is an input of the second.

    Args:
        blacklist: URIs of ubiquitous molecules (water, ATP, ...) or their
            references that may not serve as the linking molecule
    """
    p = Pattern(SequenceEntityReference, "first ER", name="consecutive-catalysis")
    p.add(er_to_pe(), "first ER", "first simple PE")
    p.add(link_to_complex(), "first simple PE", "first PE")
    p.add(pe_to_control(), "first PE", "first Control")
    p.add(Type(Catalysis), "first Control")
    p.add(control_to_conv(), "first Control", "first Conversion")
    p.add(outputs(), "first Conversion", "linker PE")
    if blacklist:
        p.add(NonUbiquitous(blacklist), "linker PE")
    p.add(ParticipatesInConv(RelType.INPUT), "linker PE", "second Conversion", allow_revisit=False)
    p.add(interaction_to_control(), "second Conversion", "second Control", allow_revisit=False)
    p.add(Type(Catalysis), "second Control")
    p.add(control_to_controller(), "second Control", "second PE")
    p.add(link_to_specific(), "second PE", "second simple PE")
    p.add(Type(SequenceEntity), "second simple PE")
    p.add(pe_to_er(), "second simple PE", "second ER", allow_revisit=False)
    return p


def in_same_complex() -> Pattern:
    """Two proteins are members of the same complex."""
    p = Pattern(SequenceEntityReference, "first ER", name="in-same-complex")
    p.add(er_to_pe(), "first ER", "first simple PE")
    p.add(link_to_complex(), "first simple PE", "Complex")
    p.add(Type(Complex), "Complex")
    p.add(link_to_specific(), "Complex", "second simple PE", allow_revisit=False)
    p.add(Type(SequenceEntity), "second simple PE")
    p.add(pe_to_er(), "second simple PE", "second ER", allow_revisit=False)
    return p
