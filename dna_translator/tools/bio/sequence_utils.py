import logging
from typing import Optional

from ...models.bio_models import InputType
from ...constants.constants import *

logger = logging.getLogger(__name__)


def extract_sequence_text(text: Optional[str]) -> str:
    if not text:
        return ""

    if not text.lstrip().startswith(FASTA_HEADER_PREFIX):
        return text

    # Keep only the first record; batch input is not supported
    lines = []
    header_count = 0
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith(FASTA_HEADER_PREFIX):
            header_count += 1
            if header_count > 1:
                logger.warning("Multiple FASTA records found, using the first one")
                break
            continue
        lines.append(stripped)

    return "".join(lines)


def normalize_sequence(raw: Optional[str]) -> str:
    if not raw:
        return ""
    return "".join(base for base in raw.upper() if base in VALID_NUCLEOTIDES)


def transcribe(sequence: str) -> str:
    """Return the RNA transcribed from a DNA template strand.

    Bases map A->U, T->A, G->C, C->G. Anything else is passed through unchanged.
    """
    return sequence.translate(DNA_TO_RNA)


def to_rna(sequence: str, input_type: InputType = InputType.DNA) -> str:
    if InputType(input_type) is InputType.RNA:
        return sequence
    return transcribe(sequence)
