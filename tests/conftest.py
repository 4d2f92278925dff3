"""
Global fixtures for the test suite.

This `conftest.py` file provides fixtures that are available to all tests
in the `tests/` directory. They build small pathway models by hand, each one
holding exactly the structure a single pattern looks for, so that the number
of expected matches can be worked out on paper.

Fixtures:
- `hgnc`: An HGNC table with the handful of genes used below.
- `fetcher`: An HGNC symbol fetcher over that table.
- `state_change_model`: TP53 controls a conversion that modifies MDM2.
- `duplicate_state_change_model`: The same relation recorded twice, through two controls.
- `make_degradation_model`: Factory; MDM2 controls the degradation of TP53 with the given control type.
- `complex_model`: BRCA1 and BRCA2 are components of one complex.
- `expression_model`: A transcription factor controls a template reaction.
- `catalysis_model`: Two enzymes catalyze consecutive reactions linked by a small molecule.

Example:
    def test_something(state_change_model, fetcher):
        matches = search_plain(state_change_model, controls_state_change())
        ...

Run all tests with:
    pytest -v

For more information on Pytest fixtures, see:
https://docs.pytest.org/en/stable/how-to/fixtures.html
"""

import pytest

from pathway_patterns.miner import HGNC, HGNCIDFetcher
from pathway_patterns.model import (
    BiochemicalReaction,
    Catalysis,
    Complex,
    Control,
    Degradation,
    InMemoryModel,
    Protein,
    ProteinReference,
    SmallMolecule,
    TemplateReaction,
    TemplateReactionRegulation,
    Xref,
    XrefKind,
)


def protein_ref(uri: str, symbol: str, hgnc_id: str) -> ProteinReference:
    return ProteinReference(
        uri=uri,
        display_name=symbol,
        xrefs=[Xref(db="HGNC", id=hgnc_id, kind=XrefKind.UNIFICATION)],
    )


@pytest.fixture
def hgnc():
    """HGNC ids of the genes used in the fixture models."""
    return HGNC(
        {
            "HGNC:11998": "TP53",
            "HGNC:6973": "MDM2",
            "HGNC:1100": "BRCA1",
            "HGNC:1101": "BRCA2",
            "HGNC:7553": "MYC",
            "HGNC:1582": "CCND1",
            "HGNC:4922": "HK1",
            "HGNC:8877": "PFKM",
        }
    )


@pytest.fixture
def fetcher(hgnc):
    return HGNCIDFetcher(hgnc)


@pytest.fixture
def state_change_model():
    """TP53 activates a reaction turning MDM2 into phosphorylated MDM2."""
    return InMemoryModel(
        [
            protein_ref("ref/TP53", "TP53", "HGNC:11998"),
            protein_ref("ref/MDM2", "MDM2", "HGNC:6973"),
            Protein(uri="p/TP53", display_name="TP53", entity_reference="ref/TP53"),
            Protein(uri="p/MDM2", display_name="MDM2", entity_reference="ref/MDM2"),
            Protein(uri="p/MDM2-P", display_name="MDM2-P", entity_reference="ref/MDM2", features=["phospho"]),
            BiochemicalReaction(uri="conv/phos", left=["p/MDM2"], right=["p/MDM2-P"]),
            Control(
                uri="ctrl/phos",
                controller=["p/TP53"],
                controlled=["conv/phos"],
                control_type="ACTIVATION",
                xrefs=[Xref(db="PubMed", id="12345", kind=XrefKind.PUBLICATION)],
            ),
        ]
    )


@pytest.fixture
def duplicate_state_change_model():
    """TP53 modifies MDM2 in two separate reactions, each with its own control."""
    return InMemoryModel(
        [
            protein_ref("ref/TP53", "TP53", "HGNC:11998"),
            protein_ref("ref/MDM2", "MDM2", "HGNC:6973"),
            Protein(uri="p/TP53", entity_reference="ref/TP53"),
            Protein(uri="p/MDM2", entity_reference="ref/MDM2"),
            Protein(uri="p/MDM2-P", entity_reference="ref/MDM2", features=["phospho"]),
            BiochemicalReaction(uri="conv/1", left=["p/MDM2"], right=["p/MDM2-P"]),
            BiochemicalReaction(uri="conv/2", left=["p/MDM2"], right=["p/MDM2-P"]),
            Control(
                uri="ctrl/1",
                controller=["p/TP53"],
                controlled=["conv/1"],
                control_type="ACTIVATION",
                xrefs=[Xref(db="PubMed", id="111", kind=XrefKind.PUBLICATION)],
            ),
            Control(
                uri="ctrl/2",
                controller=["p/TP53"],
                controlled=["conv/2"],
                control_type="ACTIVATION",
                xrefs=[Xref(db="PubMed", id="222", kind=XrefKind.PUBLICATION)],
            ),
        ]
    )


@pytest.fixture
def make_degradation_model():
    """Factory for 'MDM2 controls the degradation of TP53' with a chosen control type."""

    def make(control_type="ACTIVATION"):
        return InMemoryModel(
            [
                protein_ref("ref/MDM2", "MDM2", "HGNC:6973"),
                protein_ref("ref/TP53", "TP53", "HGNC:11998"),
                Protein(uri="p/MDM2", entity_reference="ref/MDM2"),
                Protein(uri="p/TP53", entity_reference="ref/TP53"),
                Degradation(uri="deg/TP53", left=["p/TP53"]),
                Control(
                    uri="ctrl/deg",
                    controller=["p/MDM2"],
                    controlled=["deg/TP53"],
                    control_type=control_type,
                ),
            ]
        )

    return make


@pytest.fixture
def complex_model():
    """BRCA1 and BRCA2 proteins are both components of one complex."""
    return InMemoryModel(
        [
            protein_ref("ref/BRCA1", "BRCA1", "HGNC:1100"),
            protein_ref("ref/BRCA2", "BRCA2", "HGNC:1101"),
            Protein(uri="p/BRCA1", entity_reference="ref/BRCA1"),
            Protein(uri="p/BRCA2", entity_reference="ref/BRCA2"),
            Complex(uri="cx/BRCA", component=["p/BRCA1", "p/BRCA2"]),
        ]
    )


@pytest.fixture
def expression_model():
    """MYC regulates a template reaction producing CCND1."""
    return InMemoryModel(
        [
            protein_ref("ref/MYC", "MYC", "HGNC:7553"),
            protein_ref("ref/CCND1", "CCND1", "HGNC:1582"),
            Protein(uri="p/MYC", entity_reference="ref/MYC"),
            Protein(uri="p/CCND1", entity_reference="ref/CCND1"),
            TemplateReaction(uri="tr/CCND1", product=["p/CCND1"]),
            TemplateReactionRegulation(
                uri="trr/MYC",
                controller=["p/MYC"],
                controlled=["tr/CCND1"],
                control_type="ACTIVATION",
            ),
        ]
    )


@pytest.fixture
def catalysis_model():
    """HK1 catalyzes glucose -> G6P and PFKM catalyzes G6P -> F16BP."""
    return InMemoryModel(
        [
            protein_ref("ref/HK1", "HK1", "HGNC:4922"),
            protein_ref("ref/PFKM", "PFKM", "HGNC:8877"),
            Protein(uri="p/HK1", entity_reference="ref/HK1"),
            Protein(uri="p/PFKM", entity_reference="ref/PFKM"),
            SmallMolecule(uri="sm/glucose"),
            SmallMolecule(uri="sm/G6P"),
            SmallMolecule(uri="sm/F16BP"),
            BiochemicalReaction(uri="conv/hk", left=["sm/glucose"], right=["sm/G6P"]),
            BiochemicalReaction(uri="conv/pfk", left=["sm/G6P"], right=["sm/F16BP"]),
            Catalysis(uri="cat/hk", controller=["p/HK1"], controlled=["conv/hk"], control_type="ACTIVATION"),
            Catalysis(uri="cat/pfk", controller=["p/PFKM"], controlled=["conv/pfk"], control_type="ACTIVATION"),
        ]
    )
