from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..constants.constants import *


class InputType(str, Enum):
    DNA = "dna"
    RNA = "rna"


class Notation(str, Enum):
    ONE = "one"
    THREE = "three"


@dataclass(frozen=True)
class AminoAcid:
    three_letter: str
    one_letter: str

    @property
    def is_stop(self) -> bool:
        return self.three_letter == STOP_THREE_LETTER

    def label(self, notation: Notation = Notation.THREE) -> str:
        if Notation(notation) is Notation.ONE:
            return self.one_letter
        return self.three_letter


@dataclass(frozen=True)
class Codon:
    sequence: str
    start: int
    position: int

    @property
    def is_complete(self) -> bool:
        return len(self.sequence) == CODON_LENGTH


@dataclass(frozen=True)
class TranslatedResidue:
    codon: Codon
    amino_acid: Optional[AminoAcid]
    position: int

    @property
    def is_stop(self) -> bool:
        return self.amino_acid is not None and self.amino_acid.is_stop

    @property
    def is_translated(self) -> bool:
        return self.amino_acid is not None and not self.amino_acid.is_stop

    def label(self, notation: Notation = Notation.THREE) -> Optional[str]:
        if self.amino_acid is None:
            return None
        return self.amino_acid.label(notation)


@dataclass
class CompositionStats:
    length: int
    gc_content: float
    codon_usage: dict[str, int] = field(default_factory=dict)

    @property
    def codon_count(self) -> int:
        return self.length // CODON_LENGTH


@dataclass(frozen=True)
class GcWindow:
    position: int
    gc_content: float


@dataclass(frozen=True)
class HydrophobicityPoint:
    position: int
    hydrophobicity: float


@dataclass
class MotifHit:
    name: str
    pattern: str
    positions: list[int] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.positions)


@dataclass
class ProteinProperties:
    length: int
    molecular_weight: float
    isoelectric_point: float
    aromaticity: float
    gravy: float
    hydrophobicity: str


@dataclass(frozen=True)
class SampleSequence:
    name: str
    sequence: str
    description: str
