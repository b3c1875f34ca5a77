# Nucleotide alphabets
DNA_BASES = frozenset("ATCG")
RNA_BASES = frozenset("AUCG")
VALID_NUCLEOTIDES = frozenset("ATCGU")
GC_BASES = frozenset("GC")
FASTA_HEADER_PREFIX = ">"

# Transcription (template strand complement, DNA -> RNA)
DNA_TO_RNA = str.maketrans("ATGC", "UACG")

# Codons and translation
CODON_LENGTH = 3
READING_FRAMES = (0, 1, 2)
STOP_THREE_LETTER = "STOP"
STOP_ONE_LETTER = "*"
THREE_LETTER_SEPARATOR = "-"

# Composition
PERCENTAGE_MULTIPLIER = 100
GC_CONTENT_DECIMALS = 1
DEFAULT_GC_WINDOW_SIZE = 10

# Hydrophobicity and protein properties
HYDROPHOBICITY_UNKNOWN_DEFAULT = 0.0
HYDROPHOBICITY_AXIS_MIN = -4.5
HYDROPHOBICITY_AXIS_MAX = 4.5
BIO_HYDROPHOBIC_THRESHOLD = 0.0
BIO_MIN_PROTEIN_LENGTH = 1
PROTEIN_WEIGHT_DECIMALS = 2
PROTEIN_PI_DECIMALS = 2
PROTEIN_INDEX_DECIMALS = 3

# Regulatory motifs (name -> literal pattern), reported in this order
MOTIF_PATTERNS = {
    "TATA Box": "TATAAA",
    "Kozak Sequence": "GCCACC",
    "Splice Donor": "GT",
    "Splice Acceptor": "AG",
}

# Quick-load presets (name -> (sequence, description))
SAMPLE_SEQUENCES = {
    "Insulin Signal Peptide": (
        "ATGGCCCTGAAGATCGCACAATAG",
        "Human insulin secretory signal - directs protein to secretory pathway",
    ),
    "GFP Chromophore": (
        "TGTTATGGTGTTCAATGCTTTGCAAGATATCCAGACAAC",
        "Region coding for GFP fluorescent center",
    ),
    "Kozak Sequence": (
        "GCCACCATGGCCCAG",
        "Strong Kozak consensus for translation initiation",
    ),
    "BRCA1 Mutation Site": (
        "ATGCTGAGTTTGTGTGTGAACGGACACTG",
        "Common mutation region in breast cancer gene",
    ),
}

# UI
UI_CODON_COLORS = [
    "#dbeafe",
    "#dcfce7",
    "#fef9c3",
    "#fee2e2",
    "#f3e8ff",
    "#fce7f3",
    "#e0e7ff",
    "#ffedd5",
]
UI_TEXTAREA_HEIGHT = 100
UI_CACHE_MAX_ENTRIES = 32
UI_FRAME_LABELS = {0: "Frame 1 (+0)", 1: "Frame 2 (+1)", 2: "Frame 3 (+2)"}
UI_NOTATION_LABELS = {"three": "Three Letter (Met, Leu, etc)", "one": "One Letter (M, L, etc)"}
UI_INPUT_TYPE_LABELS = {"dna": "DNA", "rna": "RNA"}
UI_SAMPLE_PLACEHOLDER = "Select a sample sequence..."
UI_MISSING_AMINO_ACID = "STOP"

UNKNOWN_ERROR = "Unknown error"
