"""
Tests for building patterns: label bookkeeping and fail-fast validation.
"""

import pytest

from pathway_patterns.errors import PatternError
from pathway_patterns.model import Complex, Protein, ProteinReference
from pathway_patterns.pattern import (
    ConversionSide,
    ConversionSideType,
    Equality,
    LinkedPE,
    LinkType,
    Pattern,
    Type,
)


def test_start_label_is_typed():
    p = Pattern(ProteinReference, "PR", name="refs")
    assert p.labels == ("PR",)
    assert p.size == 1
    (first,) = p.constraints
    assert isinstance(first.constraint, Type)
    assert first.inds == (0,)


def test_add_introduces_the_last_label():
    p = Pattern(Complex, "complex")
    returned = p.add(LinkedPE(LinkType.DOWN), "complex", "member")
    assert returned is p
    p.add(Type(Protein), "member")
    assert p.labels == ("complex", "member")
    assert p.index_of("member") == 1
    assert p.label_of(1) == "member"
    assert p.has_label("member")
    assert [mc.inds for mc in p.constraints] == [(0,), (0, 1), (1,)]


def test_unbound_label_fails_fast():
    """A constraint reading a label no earlier constraint binds is rejected when added."""
    p = Pattern(Complex, "complex", name="broken")
    with pytest.raises(PatternError) as excinfo:
        p.add(ConversionSide(ConversionSideType.OTHER_SIDE), "member", "complex", "other")
    assert excinfo.value.pattern_name == "broken"
    assert excinfo.value.label == "member"


def test_non_generating_constraint_cannot_introduce_a_label():
    p = Pattern(Complex, "complex")
    with pytest.raises(PatternError, match="cannot generate"):
        p.add(Equality(False), "complex", "new label")


def test_arity_mismatch_is_rejected():
    p = Pattern(Complex, "complex")
    with pytest.raises(PatternError, match="maps 2 variable"):
        p.add(LinkedPE(LinkType.DOWN), "complex")


def test_constraint_without_labels_is_rejected():
    p = Pattern(Complex, "complex")
    with pytest.raises(PatternError):
        p.add(Type(Complex))


def test_revisit_flag_only_where_the_label_is_introduced():
    p = Pattern(Complex, "complex")
    p.add(LinkedPE(LinkType.DOWN), "complex", "member", allow_revisit=False)
    assert not p.allows_revisit(1)
    assert p.allows_revisit(0)
    with pytest.raises(PatternError):
        p.add(LinkedPE(LinkType.DOWN), "complex", "member", allow_revisit=True)


def test_pattern_default_revisit_flag():
    p = Pattern(Complex, "complex", allow_revisit=False)
    p.add(LinkedPE(LinkType.DOWN), "complex", "member")
    assert not p.allows_revisit(1)


def test_unknown_label_lookup():
    p = Pattern(Complex, "complex")
    with pytest.raises(PatternError, match="no such label"):
        p.index_of("nope")
