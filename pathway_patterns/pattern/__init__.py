"""Pattern language, constraint library and backtracking searcher."""

from .constraints import (
    NOT,
    OR,
    Constraint,
    ControlToController,
    ControlToInteraction,
    ConversionSide,
    ConversionSideType,
    Empty,
    Equality,
    GeneratingConstraint,
    InteractionToControl,
    InterToPartER,
    LinkedPE,
    LinkType,
    MappedConst,
    Neighbor,
    NeighborhoodOf,
    NonUbiquitous,
    Participant,
    ParticipatesInConv,
    Relation,
    RelType,
    SearchContext,
    Size,
    SizeType,
    Type,
)
from .match import Match
from .pattern import Pattern
from .patterns import (
    consecutive_catalysis,
    controls_expression,
    controls_expression_with_conversion,
    controls_state_change,
    controls_state_change_but_is_participant,
    degradation,
    in_same_complex,
)
from .searcher import Searcher, search, search_plain

__all__ = [
    "NOT",
    "OR",
    "Constraint",
    "ControlToController",
    "ControlToInteraction",
    "ConversionSide",
    "ConversionSideType",
    "Empty",
    "Equality",
    "GeneratingConstraint",
    "InteractionToControl",
    "InterToPartER",
    "LinkType",
    "LinkedPE",
    "MappedConst",
    "Match",
    "Neighbor",
    "NeighborhoodOf",
    "NonUbiquitous",
    "Participant",
    "ParticipatesInConv",
    "Pattern",
    "RelType",
    "Relation",
    "SearchContext",
    "Searcher",
    "Size",
    "SizeType",
    "Type",
    "consecutive_catalysis",
    "controls_expression",
    "controls_expression_with_conversion",
    "controls_state_change",
    "controls_state_change_but_is_participant",
    "degradation",
    "in_same_complex",
    "search",
    "search_plain",
]
