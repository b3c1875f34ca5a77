import pytest

from dna_translator.models.app_models import AnalysisRequest
from dna_translator.core.sequence_analyzer import SequenceAnalyzer

INSULIN_SIGNAL = "ATGGCCCTGAAGATCGCACAATAG"
INSULIN_SIGNAL_RNA = "UACCGGGACUUCUAGCGUGUUAUC"


@pytest.fixture
def analyzer():
    return SequenceAnalyzer()


@pytest.fixture
def insulin_report(analyzer):
    return analyzer.analyze(AnalysisRequest(raw_sequence=INSULIN_SIGNAL))
