from dataclasses import dataclass, field
from typing import Optional

from .bio_models import (
    CompositionStats,
    GcWindow,
    HydrophobicityPoint,
    InputType,
    MotifHit,
    Notation,
    ProteinProperties,
    TranslatedResidue,
)


@dataclass(frozen=True)
class AnalysisRequest:
    raw_sequence: str
    input_type: InputType = InputType.DNA
    reading_frame: int = 0
    notation: Notation = Notation.THREE


@dataclass
class SequenceReport:
    sequence: str
    rna_sequence: str
    input_type: InputType
    reading_frame: int
    notation: Notation
    residues: list[TranslatedResidue]
    composition: CompositionStats
    gc_windows: list[GcWindow]
    hydrophobicity: list[HydrophobicityPoint]
    motifs: list[MotifHit]
    protein_sequence: str
    protein_properties: Optional[ProteinProperties] = None

    @property
    def is_empty(self) -> bool:
        return not self.sequence

    def labels(self) -> list[Optional[str]]:
        return [residue.label(self.notation) for residue in self.residues]


@dataclass
class AnalysisResult:
    success: bool
    sequence_length: int
    message: str
    report: Optional[SequenceReport] = None
    error: Optional[str] = None
    summary: Optional[str] = None
    warnings: list[str] = field(default_factory=list)
