import logging
from types import MappingProxyType
from typing import Iterable, Optional

from Bio.Data.IUPACData import protein_letters_3to1
from Bio.SeqUtils.ProtParam import ProteinAnalysis
from Bio.SeqUtils.ProtParamData import kd

from ...models.bio_models import HydrophobicityPoint, ProteinProperties, TranslatedResidue
from ...constants.constants import *

logger = logging.getLogger(__name__)

# Kyte & Doolittle (1982) hydropathy index
KYTE_DOOLITTLE = MappingProxyType(dict(kd))

# Kept apart from the codon table so notation never affects scoring
THREE_TO_ONE = MappingProxyType(dict(protein_letters_3to1))


def to_one_letter(code: str) -> str:
    if len(code) == 3:
        return THREE_TO_ONE.get(code.capitalize(), code)
    return code


def hydrophobicity_of(code: str) -> float:
    return KYTE_DOOLITTLE.get(to_one_letter(code), HYDROPHOBICITY_UNKNOWN_DEFAULT)


def hydrophobicity_profile(residues: Iterable[TranslatedResidue]) -> list[HydrophobicityPoint]:
    scored = [residue for residue in residues if residue.is_translated]
    return [
        HydrophobicityPoint(position=index, hydrophobicity=hydrophobicity_of(residue.amino_acid.one_letter))
        for index, residue in enumerate(scored, start=1)
    ]


def analyze_protein_properties(protein_sequence: str) -> Optional[ProteinProperties]:
    clean_seq = _clean_protein_sequence(protein_sequence)
    if not clean_seq:
        return None

    try:
        analysis = ProteinAnalysis(clean_seq)
        gravy = round(analysis.gravy(), PROTEIN_INDEX_DECIMALS)
        properties = ProteinProperties(
            length=len(clean_seq),
            molecular_weight=round(analysis.molecular_weight(), PROTEIN_WEIGHT_DECIMALS),
            isoelectric_point=round(analysis.isoelectric_point(), PROTEIN_PI_DECIMALS),
            aromaticity=round(analysis.aromaticity(), PROTEIN_INDEX_DECIMALS),
            gravy=gravy,
            hydrophobicity="Hydrophobic" if gravy > BIO_HYDROPHOBIC_THRESHOLD else "Hydrophilic",
        )
    except (KeyError, ValueError) as e:
        logger.error(f"Protein analysis failed: {e}")
        return None

    return properties


def _clean_protein_sequence(protein_sequence: str) -> Optional[str]:
    clean_seq = "".join(aa for aa in protein_sequence.upper() if aa in KYTE_DOOLITTLE)

    if len(clean_seq) < BIO_MIN_PROTEIN_LENGTH:
        logger.debug("No standard amino acids found for protein analysis")
        return None

    return clean_seq
