import logging

from ..constants.constants import *
from ..models.app_models import AnalysisRequest, SequenceReport
from ..models.bio_models import InputType, Notation
from ..tools.bio.composition import analyze_composition, sliding_gc_content
from ..tools.bio.hydrophobicity import analyze_protein_properties, hydrophobicity_profile
from ..tools.bio.motifs import find_motifs
from ..tools.bio.sequence_utils import normalize_sequence, to_rna
from ..tools.bio.translation import format_protein, segment_codons, translate_codons

logger = logging.getLogger(__name__)


class SequenceAnalyzer:
    """Runs the full analysis for one input sequence.

    Holds configuration only; every call to :meth:`analyze` is independent,
    so one instance can be shared between sessions and threads.
    """

    def __init__(self, gc_window_size: int = DEFAULT_GC_WINDOW_SIZE):
        if gc_window_size < 1:
            raise ValueError(f"GC window size must be at least 1, got {gc_window_size}")
        self.gc_window_size = gc_window_size

    def analyze(self, request: AnalysisRequest) -> SequenceReport:
        input_type = InputType(request.input_type)
        notation = Notation(request.notation)

        sequence = normalize_sequence(request.raw_sequence)
        rna_sequence = to_rna(sequence, input_type)

        codons = segment_codons(rna_sequence, request.reading_frame)
        residues = translate_codons(codons)

        # The one-letter string feeds protein properties whatever the display notation
        protein_letters = format_protein(residues, Notation.ONE)

        report = SequenceReport(
            sequence=sequence,
            rna_sequence=rna_sequence,
            input_type=input_type,
            reading_frame=request.reading_frame,
            notation=notation,
            residues=residues,
            composition=analyze_composition(sequence, input_type),
            gc_windows=sliding_gc_content(sequence, self.gc_window_size),
            hydrophobicity=hydrophobicity_profile(residues),
            motifs=find_motifs(sequence),
            protein_sequence=format_protein(residues, notation),
            protein_properties=analyze_protein_properties(protein_letters),
        )

        logger.debug(
            f"Analyzed {len(sequence)} bases ({input_type.value}, frame {request.reading_frame}): "
            f"{len(residues)} codons, {len(report.hydrophobicity)} residues"
        )
        return report
