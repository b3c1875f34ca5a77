import logging
from typing import Optional

from ..constants.constants import *
from ..settings import settings

from ..core.sequence_analyzer import SequenceAnalyzer
from ..core.summary_generator import SummaryGenerator
from ..models.app_models import AnalysisRequest, AnalysisResult, SequenceReport
from ..models.bio_models import InputType, Notation, SampleSequence
from ..tools.bio.sequence_utils import normalize_sequence

logger = logging.getLogger(__name__)


class AppLogic:
    def __init__(
        self, gc_window_size: Optional[int] = None, max_sequence_length: Optional[int] = None
    ) -> None:
        self.settings = settings
        self.analyzer = SequenceAnalyzer(gc_window_size or self.settings.gc_window_size)
        self.summary_generator = SummaryGenerator()
        self.max_sequence_length = max_sequence_length or self.settings.max_sequence_length

    def analyze_sequence(
        self,
        raw_sequence: str,
        input_type: str = InputType.DNA,
        reading_frame: int = 0,
        notation: str = Notation.THREE,
    ) -> AnalysisResult:
        sequence = normalize_sequence(raw_sequence)
        warnings = self._collect_input_warnings(raw_sequence, sequence)

        if len(sequence) > self.max_sequence_length:
            warnings.append(
                f"Sequence truncated to the first {self.max_sequence_length:,} bases "
                f"({len(sequence):,} provided)"
            )

        try:
            request = AnalysisRequest(
                raw_sequence=sequence[: self.max_sequence_length],
                input_type=InputType(input_type),
                reading_frame=int(reading_frame),
                notation=Notation(notation),
            )
            report = self.analyzer.analyze(request)

        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Sequence analysis failed: {e}")
            return AnalysisResult(
                success=False,
                sequence_length=len(sequence),
                message="Analysis failed",
                error=f"Analysis failed: {str(e)}",
            )

        warnings.extend(self._collect_alphabet_warnings(report))
        for warning in warnings:
            logger.warning(warning)

        return AnalysisResult(
            success=True,
            sequence_length=len(sequence),
            message="Sequence analyzed successfully",
            report=report,
            summary=self.generate_summary(report),
            warnings=warnings,
        )

    def _collect_input_warnings(self, raw_sequence: Optional[str], sequence: str) -> list[str]:
        warnings = []

        raw_length = len("".join((raw_sequence or "").split()))
        removed = raw_length - len(sequence)
        if removed > 0:
            warnings.append(f"Removed {removed} invalid characters from the input")

        return warnings

    def _collect_alphabet_warnings(self, report: SequenceReport) -> list[str]:
        warnings = []

        alphabet = DNA_BASES if report.input_type is InputType.DNA else RNA_BASES
        foreign_bases = sorted(set(report.sequence) - alphabet)
        if foreign_bases:
            warnings.append(
                f"Sequence contains {', '.join(foreign_bases)} but was analyzed as "
                f"{UI_INPUT_TYPE_LABELS[report.input_type.value]}"
            )

        return warnings

    def generate_summary(self, report: SequenceReport) -> str:
        return self.summary_generator.generate_summary(report)

    def get_sample_sequences(self) -> list[SampleSequence]:
        return [
            SampleSequence(name=name, sequence=sequence, description=description)
            for name, (sequence, description) in SAMPLE_SEQUENCES.items()
        ]

    def get_sample_sequence(self, name: str) -> Optional[SampleSequence]:
        for sample in self.get_sample_sequences():
            if sample.name == name:
                return sample
        return None
