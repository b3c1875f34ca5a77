import logging

from . import summary_templates as templates
from ..constants.constants import *
from ..models.app_models import SequenceReport
from ..models.bio_models import MotifHit

logger = logging.getLogger(__name__)


class SummaryGenerator:
    def generate_summary(self, report: SequenceReport) -> str:
        if report.is_empty:
            return templates.NO_SEQUENCE_MESSAGE

        summary_parts = [
            templates.SEQUENCE_ANALYSIS_HEADER,
            self._format_overview(report),
            templates.AMINO_ACID_USAGE_HEADER,
            self._format_codon_usage(report.composition.codon_usage),
            templates.MOTIFS_HEADER,
            self._format_motifs(report.motifs),
            templates.PROTEIN_HEADER,
            self._format_protein(report),
        ]

        return "\n\n".join(summary_parts)

    def _format_overview(self, report: SequenceReport) -> str:
        composition = report.composition
        return templates.SEQUENCE_OVERVIEW_TEMPLATE.format(
            length=composition.length,
            input_type=UI_INPUT_TYPE_LABELS[report.input_type.value],
            gc_content=composition.gc_content,
            codon_count=composition.codon_count,
            frame_label=UI_FRAME_LABELS[report.reading_frame],
        )

    def _format_codon_usage(self, codon_usage: dict[str, int]) -> str:
        if not codon_usage:
            return templates.NO_CODON_USAGE_MESSAGE

        lines = [
            templates.CODON_USAGE_LINE_TEMPLATE.format(amino_acid=amino_acid, count=count)
            for amino_acid, count in sorted(codon_usage.items(), key=lambda item: (-item[1], item[0]))
        ]
        return "\n".join(lines)

    def _format_motifs(self, motifs: list[MotifHit]) -> str:
        if not any(hit.found for hit in motifs):
            return templates.NO_MOTIFS_MESSAGE

        lines = []
        for hit in motifs:
            if hit.found:
                lines.append(
                    templates.MOTIF_FOUND_TEMPLATE.format(
                        name=hit.name,
                        pattern=hit.pattern,
                        positions=", ".join(str(position) for position in hit.positions),
                    )
                )
            else:
                lines.append(templates.MOTIF_NOT_FOUND_TEMPLATE.format(name=hit.name, pattern=hit.pattern))
        return "\n".join(lines)

    def _format_protein(self, report: SequenceReport) -> str:
        if not report.protein_sequence:
            return templates.NO_PROTEIN_MESSAGE

        parts = [templates.PROTEIN_SEQUENCE_TEMPLATE.format(protein_sequence=report.protein_sequence)]

        properties = report.protein_properties
        if properties is not None:
            parts.append(
                templates.PROTEIN_PROPERTIES_TEMPLATE.format(
                    length=properties.length,
                    molecular_weight=properties.molecular_weight,
                    isoelectric_point=properties.isoelectric_point,
                    gravy=properties.gravy,
                    hydrophobicity=properties.hydrophobicity,
                )
            )
        else:
            logger.debug("Protein properties unavailable for summary")

        return "\n".join(parts)
