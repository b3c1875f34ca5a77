import pytest

from dna_translator.core.sequence_analyzer import SequenceAnalyzer
from dna_translator.models.app_models import AnalysisRequest
from dna_translator.models.bio_models import InputType, Notation

from conftest import INSULIN_SIGNAL, INSULIN_SIGNAL_RNA


def test_example_report(insulin_report):
    report = insulin_report
    assert report.sequence == INSULIN_SIGNAL
    assert report.rna_sequence == INSULIN_SIGNAL_RNA
    assert report.labels() == ["Tyr", "Arg", "Asp", "Phe", "STOP", "Arg", "Val", "Ile"]
    assert report.protein_sequence == "Tyr-Arg-Asp-Phe-Arg-Val-Ile"
    assert report.composition.gc_content == 50.0
    assert len(report.gc_windows) == 15
    assert len(report.hydrophobicity) == 7
    assert len(report.motifs) == 4
    assert report.protein_properties.length == 7


def test_raw_input_is_normalized(analyzer):
    report = analyzer.analyze(AnalysisRequest(raw_sequence="atg gcc\n ctg"))
    assert report.sequence == "ATGGCCCTG"
    assert report.composition.length == 9


def test_reading_frame_shifts_translation_but_not_codon_usage(analyzer, insulin_report):
    report = analyzer.analyze(AnalysisRequest(raw_sequence=INSULIN_SIGNAL, reading_frame=1))
    assert report.labels() == ["Thr", "Gly", "Thr", "Ser", "Ser", "Val", "Leu", None]
    assert report.residues[-1].codon.sequence == "UC"
    assert report.composition.codon_usage == insulin_report.composition.codon_usage
    assert [point.position for point in report.hydrophobicity] == list(range(1, 8))


def test_one_letter_notation_excludes_stop_from_profile(analyzer):
    report = analyzer.analyze(
        AnalysisRequest(raw_sequence=INSULIN_SIGNAL, notation=Notation.ONE)
    )
    assert report.labels() == ["Y", "R", "D", "F", "*", "R", "V", "I"]
    assert report.protein_sequence == "YRDFRVI"
    assert len(report.hydrophobicity) == 7


def test_rna_input(analyzer):
    report = analyzer.analyze(
        AnalysisRequest(raw_sequence="AUGUUUUAA", input_type=InputType.RNA, notation=Notation.ONE)
    )
    assert report.rna_sequence == "AUGUUUUAA"
    assert report.labels() == ["M", "F", "*"]
    assert report.composition.codon_usage == {"Met": 1, "Phe": 1, "STOP": 1}


def test_empty_input_gives_empty_report(analyzer):
    report = analyzer.analyze(AnalysisRequest(raw_sequence="123 ---"))
    assert report.is_empty
    assert report.residues == []
    assert report.composition.gc_content == 0
    assert report.gc_windows == []
    assert report.hydrophobicity == []
    assert [hit.positions for hit in report.motifs] == [[], [], [], []]
    assert report.protein_sequence == ""
    assert report.protein_properties is None


def test_custom_window_size():
    report = SequenceAnalyzer(gc_window_size=20).analyze(AnalysisRequest(raw_sequence=INSULIN_SIGNAL))
    assert len(report.gc_windows) == 5


def test_invalid_window_size():
    with pytest.raises(ValueError):
        SequenceAnalyzer(gc_window_size=0)


def test_invalid_reading_frame(analyzer):
    with pytest.raises(ValueError):
        analyzer.analyze(AnalysisRequest(raw_sequence=INSULIN_SIGNAL, reading_frame=3))


def test_analyzer_is_stateless(analyzer):
    first = analyzer.analyze(AnalysisRequest(raw_sequence="GCCACCATG"))
    analyzer.analyze(AnalysisRequest(raw_sequence=INSULIN_SIGNAL, reading_frame=2))
    again = analyzer.analyze(AnalysisRequest(raw_sequence="GCCACCATG"))
    assert first == again
