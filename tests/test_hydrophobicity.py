import pytest
from Bio.SeqUtils.ProtParam import ProteinAnalysis

from dna_translator.constants.constants import PROTEIN_PI_DECIMALS
from dna_translator.models.bio_models import AminoAcid, Codon, TranslatedResidue
from dna_translator.tools.bio.hydrophobicity import (
    KYTE_DOOLITTLE,
    THREE_TO_ONE,
    analyze_protein_properties,
    hydrophobicity_of,
    hydrophobicity_profile,
    to_one_letter,
)
from dna_translator.tools.bio.translation import segment_codons, translate_codons

from conftest import INSULIN_SIGNAL_RNA


def _residues(rna):
    return translate_codons(segment_codons(rna, 0))


def test_kyte_doolittle_scale():
    assert len(KYTE_DOOLITTLE) == 20
    assert KYTE_DOOLITTLE["I"] == 4.5
    assert KYTE_DOOLITTLE["R"] == -4.5
    assert KYTE_DOOLITTLE["G"] == -0.4


def test_scales_are_read_only():
    with pytest.raises(TypeError):
        KYTE_DOOLITTLE["X"] = 1.0
    with pytest.raises(TypeError):
        THREE_TO_ONE["Xaa"] = "X"


@pytest.mark.parametrize("code, expected", [("Met", "M"), ("MET", "M"), ("M", "M"), ("Xyz", "Xyz"), ("*", "*")])
def test_to_one_letter(code, expected):
    assert to_one_letter(code) == expected


@pytest.mark.parametrize("code, expected", [("Ile", 4.5), ("I", 4.5), ("Lys", -3.9), ("B", 0.0), ("*", 0.0), ("STOP", 0.0)])
def test_hydrophobicity_of(code, expected):
    assert hydrophobicity_of(code) == expected


def test_profile_of_example():
    profile = hydrophobicity_profile(_residues(INSULIN_SIGNAL_RNA))
    assert [point.position for point in profile] == list(range(1, 8))
    assert [point.hydrophobicity for point in profile] == [-1.3, -4.5, -3.5, 2.8, -4.5, 4.2, 4.5]


def test_profile_compacts_stops_and_incomplete_codons():
    profile = hydrophobicity_profile(_residues("UAAAUGUGAUUUGC"))
    assert [(point.position, point.hydrophobicity) for point in profile] == [(1, 1.9), (2, 2.8)]


def test_profile_of_only_stops_is_empty():
    assert hydrophobicity_profile(_residues("UAAUAGUGA")) == []
    assert hydrophobicity_profile([]) == []


def test_profile_unknown_amino_acid_scores_zero():
    residue = TranslatedResidue(codon=Codon("NNN", 0, 0), amino_acid=AminoAcid("Xaa", "X"), position=0)
    profile = hydrophobicity_profile([residue])
    assert len(profile) == 1
    assert profile[0].hydrophobicity == 0.0


def test_protein_properties():
    properties = analyze_protein_properties("MALK*")
    assert properties.length == 4
    assert properties.gravy == pytest.approx(0.9)
    assert properties.hydrophobicity == "Hydrophobic"
    assert properties.molecular_weight > 0


def test_protein_properties_hydrophilic():
    assert analyze_protein_properties("RKDE").hydrophobicity == "Hydrophilic"


@pytest.mark.parametrize("protein", ["", "*", "**"])
def test_protein_properties_empty(protein):
    assert analyze_protein_properties(protein) is None


def test_protein_isoelectric_point_precision():
    properties = analyze_protein_properties("MALK")
    expected = round(ProteinAnalysis("MALK").isoelectric_point(), PROTEIN_PI_DECIMALS)
    assert properties.isoelectric_point == expected
    assert 0 < properties.isoelectric_point < 14
