import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from Bio.Data import CodonTable
from Bio.Data.IUPACData import protein_letters_1to3

from ...models.bio_models import AminoAcid, Codon, Notation, TranslatedResidue
from ...constants.constants import *

logger = logging.getLogger(__name__)

STOP = AminoAcid(three_letter=STOP_THREE_LETTER, one_letter=STOP_ONE_LETTER)


def _build_codon_table() -> Mapping[str, AminoAcid]:
    rna_table = CodonTable.standard_rna_table

    table = {
        codon: AminoAcid(three_letter=protein_letters_1to3[letter], one_letter=letter)
        for codon, letter in rna_table.forward_table.items()
    }
    for codon in rna_table.stop_codons:
        table[codon] = STOP

    return MappingProxyType(table)


CODON_TABLE = _build_codon_table()


def segment_codons(sequence: str, frame: int = 0) -> list[Codon]:
    if frame not in READING_FRAMES:
        raise ValueError(f"Reading frame must be one of {READING_FRAMES}, got {frame!r}")

    codons = []
    for position, start in enumerate(range(frame, len(sequence), CODON_LENGTH)):
        codons.append(
            Codon(
                sequence=sequence[start : start + CODON_LENGTH],
                start=start,
                position=position,
            )
        )

    return codons


def lookup_codon(codon: str, table: Mapping[str, AminoAcid] = CODON_TABLE) -> Optional[AminoAcid]:
    if len(codon) != CODON_LENGTH:
        return None

    amino_acid = table.get(codon)
    if amino_acid is None:
        logger.debug(f"No codon table entry for {codon!r}")
    return amino_acid


def translate(
    codon: str,
    notation: Notation = Notation.THREE,
    table: Mapping[str, AminoAcid] = CODON_TABLE,
) -> Optional[str]:
    amino_acid = lookup_codon(codon, table)
    if amino_acid is None:
        return None
    return amino_acid.label(notation)


def translate_codons(
    codons: Iterable[Codon], table: Mapping[str, AminoAcid] = CODON_TABLE
) -> list[TranslatedResidue]:
    return [
        TranslatedResidue(
            codon=codon, amino_acid=lookup_codon(codon.sequence, table), position=codon.position
        )
        for codon in codons
    ]


def format_protein(residues: Iterable[TranslatedResidue], notation: Notation = Notation.THREE) -> str:
    labels = [residue.label(notation) for residue in residues if residue.is_translated]
    if Notation(notation) is Notation.THREE:
        return THREE_LETTER_SEPARATOR.join(labels)
    return "".join(labels)
