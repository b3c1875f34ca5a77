import pytest

from dna_translator.constants.constants import MOTIF_PATTERNS
from dna_translator.tools.bio.motifs import find_motif_positions, find_motifs

from conftest import INSULIN_SIGNAL


@pytest.mark.parametrize(
    "sequence, pattern, expected",
    [
        ("GTGT", "GT", [0, 2]),
        ("GTTG", "GT", [0]),
        ("AAAA", "AA", [0, 1, 2]),
        ("TATAAATATAAA", "TATAAA", [0, 6]),
        ("ACGT", "TATAAA", []),
        ("", "GT", []),
        ("GTGT", "", []),
    ],
)
def test_find_motif_positions(sequence, pattern, expected):
    assert find_motif_positions(sequence, pattern) == expected


def test_find_motifs_reports_every_motif_in_order():
    hits = find_motifs("")
    assert [hit.name for hit in hits] == list(MOTIF_PATTERNS)
    assert all(hit.positions == [] for hit in hits)
    assert not any(hit.found for hit in hits)


def test_find_motifs_on_example():
    hits = {hit.name: hit.positions for hit in find_motifs(INSULIN_SIGNAL)}
    assert hits == {
        "TATA Box": [],
        "Kozak Sequence": [],
        "Splice Donor": [],
        "Splice Acceptor": [10, 22],
    }


def test_find_motifs_on_kozak_sample():
    hits = {hit.name: hit.positions for hit in find_motifs("GCCACCATGGCCCAG")}
    assert hits["Kozak Sequence"] == [0]
    assert hits["Splice Acceptor"] == [13]


def test_find_motifs_with_custom_set():
    hits = find_motifs("GTGTGT", {"Repeat": "GTGT"})
    assert len(hits) == 1
    assert hits[0].pattern == "GTGT"
    assert hits[0].positions == [0, 2]
