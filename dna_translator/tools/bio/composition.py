import logging
from collections import Counter
from decimal import ROUND_HALF_UP, Decimal

import numpy as np
from Bio.SeqUtils import gc_fraction

from .sequence_utils import to_rna
from .translation import lookup_codon, segment_codons
from ...models.bio_models import CompositionStats, GcWindow, InputType
from ...constants.constants import *

logger = logging.getLogger(__name__)


def calculate_gc_content(sequence: str) -> float:
    if not sequence:
        return 0.0
    return gc_fraction(sequence, ambiguous="ignore") * PERCENTAGE_MULTIPLIER


def round_percentage(value: float, decimals: int = GC_CONTENT_DECIMALS) -> float:
    # Half-up on the exact binary value, so 1.25 reports as 1.3
    step = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(step, rounding=ROUND_HALF_UP))


def analyze_composition(sequence: str, input_type: InputType = InputType.DNA) -> CompositionStats:
    rna_sequence = to_rna(sequence, input_type)

    gc_content = round_percentage(calculate_gc_content(rna_sequence))
    codon_usage = _count_codon_usage(rna_sequence)

    logger.debug(
        f"Composition of {len(sequence)} bases: GC {gc_content}%, "
        f"{sum(codon_usage.values())} complete codons"
    )
    return CompositionStats(length=len(sequence), gc_content=gc_content, codon_usage=codon_usage)


def _count_codon_usage(rna_sequence: str) -> dict[str, int]:
    usage: Counter = Counter()

    for codon in segment_codons(rna_sequence, frame=0):
        if not codon.is_complete:
            continue
        amino_acid = lookup_codon(codon.sequence)
        if amino_acid is None:
            continue
        usage[amino_acid.three_letter] += 1

    return dict(usage)


def sliding_gc_content(sequence: str, window_size: int = DEFAULT_GC_WINDOW_SIZE) -> list[GcWindow]:
    if window_size < 1:
        logger.warning(f"Ignoring non-positive GC window size {window_size}")
        return []
    if len(sequence) < window_size:
        return []

    is_gc = np.fromiter((base in GC_BASES for base in sequence), dtype=np.int64, count=len(sequence))
    cumulative = np.concatenate(([0], np.cumsum(is_gc)))
    window_counts = cumulative[window_size:] - cumulative[:-window_size]

    return [
        GcWindow(position=index + 1, gc_content=count * PERCENTAGE_MULTIPLIER / window_size)
        for index, count in enumerate(window_counts.tolist())
    ]
