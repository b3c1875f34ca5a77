NO_SEQUENCE_MESSAGE = "No sequence provided. Enter a DNA or RNA sequence to analyze."
NO_CODON_USAGE_MESSAGE = "No complete codons in frame 1."
NO_MOTIFS_MESSAGE = "No regulatory motifs found."
NO_PROTEIN_MESSAGE = "No amino acids translated in this reading frame."

# Section headers
SEQUENCE_ANALYSIS_HEADER = "## Sequence Analysis"
AMINO_ACID_USAGE_HEADER = "### Amino Acid Usage"
MOTIFS_HEADER = "### Sequence Motifs"
PROTEIN_HEADER = "### Protein"

SEQUENCE_OVERVIEW_TEMPLATE = """**Length**: {length:,} bases ({input_type})
**GC Content**: {gc_content}%
**Codons**: {codon_count}
**Reading Frame**: {frame_label}"""

CODON_USAGE_LINE_TEMPLATE = "- {amino_acid}: {count}"
MOTIF_FOUND_TEMPLATE = "- **{name}** ({pattern}): found at positions {positions}"
MOTIF_NOT_FOUND_TEMPLATE = "- **{name}** ({pattern}): not found"

PROTEIN_SEQUENCE_TEMPLATE = "**Sequence**: `{protein_sequence}`"
PROTEIN_PROPERTIES_TEMPLATE = """**Residues**: {length}
**Molecular Weight**: {molecular_weight} Da
**Isoelectric Point**: {isoelectric_point}
**GRAVY**: {gravy} ({hydrophobicity})"""
