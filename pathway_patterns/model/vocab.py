"""Controlled vocabularies used by pathway model elements.

Values follow the BioPAX Level 3 spelling so that models exported from
pathway databases load without translation.
"""

from enum import Enum


class ControlType(str, Enum):
    """
    Type of a control relation.

    The activation family is positive, every inhibition variant is negative.
    """

    ACTIVATION = "ACTIVATION"
    ACTIVATION_ALLOSTERIC = "ACTIVATION-ALLOSTERIC"
    ACTIVATION_NONALLOSTERIC = "ACTIVATION-NONALLOSTERIC"
    ACTIVATION_UNKMECH = "ACTIVATION-UNKMECH"
    INHIBITION = "INHIBITION"
    INHIBITION_ALLOSTERIC = "INHIBITION-ALLOSTERIC"
    INHIBITION_COMPETITIVE = "INHIBITION-COMPETITIVE"
    INHIBITION_IRREVERSIBLE = "INHIBITION-IRREVERSIBLE"
    INHIBITION_NONCOMPETITIVE = "INHIBITION-NONCOMPETITIVE"
    INHIBITION_OTHER = "INHIBITION-OTHER"
    INHIBITION_UNCOMPETITIVE = "INHIBITION-UNCOMPETITIVE"
    INHIBITION_UNKMECH = "INHIBITION-UNKMECH"


ACTIVATION_FAMILY = frozenset(
    {
        ControlType.ACTIVATION,
        ControlType.ACTIVATION_ALLOSTERIC,
        ControlType.ACTIVATION_NONALLOSTERIC,
        ControlType.ACTIVATION_UNKMECH,
    }
)

# Inhibitory control types all start with this letter in the vocabulary.
INHIBITORY_MARKER = "I"


def coerce_control_type(value: ControlType | str | None) -> ControlType | str | None:
    """Map a vocabulary string to its member; unknown strings are returned unchanged."""
    if value is None or isinstance(value, ControlType):
        return value
    try:
        return ControlType(str(value).strip().upper())
    except ValueError:
        return value


def is_activation(control_type: ControlType | str | None) -> bool:
    """True only for the activation family; unknown or missing values are not activations."""
    return coerce_control_type(control_type) in ACTIVATION_FAMILY


def is_inhibitory(control_type: ControlType | str | None) -> bool:
    """True when the control type's code carries the inhibitory marker."""
    if control_type is None:
        return False
    code = control_type.value if isinstance(control_type, ControlType) else str(control_type)
    return code.startswith(INHIBITORY_MARKER)


class ConversionDirection(str, Enum):
    LEFT_TO_RIGHT = "LEFT-TO-RIGHT"
    RIGHT_TO_LEFT = "RIGHT-TO-LEFT"
    REVERSIBLE = "REVERSIBLE"


class XrefKind(str, Enum):
    UNIFICATION = "unification"
    RELATIONSHIP = "relationship"
    PUBLICATION = "publication"
