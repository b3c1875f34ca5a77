import logging
from typing import Mapping

from ...models.bio_models import MotifHit
from ...constants.constants import *

logger = logging.getLogger(__name__)


def find_motif_positions(sequence: str, pattern: str) -> list[int]:
    if not pattern:
        return []

    positions = []
    start = sequence.find(pattern)
    while start != -1:
        positions.append(start)
        # Step one base past the hit, not past the pattern, so overlaps are kept
        start = sequence.find(pattern, start + 1)

    return positions


def find_motifs(sequence: str, motifs: Mapping[str, str] = MOTIF_PATTERNS) -> list[MotifHit]:
    hits = [
        MotifHit(name=name, pattern=pattern, positions=find_motif_positions(sequence, pattern))
        for name, pattern in motifs.items()
    ]
    logger.debug(f"Motif scan: {sum(len(hit.positions) for hit in hits)} hits in {len(sequence)} bases")
    return hits
