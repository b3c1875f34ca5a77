import html
import logging
from typing import Any, Optional

import pandas as pd
import streamlit as st

from dna_translator.constants.constants import *
from dna_translator.core import summary_templates as templates
from dna_translator.models.app_models import AnalysisResult, SequenceReport
from dna_translator.settings import settings
from dna_translator.tools.bio.sequence_utils import extract_sequence_text, normalize_sequence
from dna_translator.ui.charts import hydrophobicity_chart
from dna_translator.ui.logic import AppLogic

logging.basicConfig(level=settings.log_level, format="%(levelname)s:%(name)s:%(message)s", force=True)
logger = logging.getLogger(__name__)


def main() -> None:
    st.set_page_config(page_title=settings.page_title, page_icon="🧬", layout="wide")

    st.title(f"🧬 {settings.page_title}")
    st.markdown("Translate DNA/RNA sequences to proteins with codon analysis.")

    _initialize_session_state()

    input_type, reading_frame, notation = _render_controls()
    sequence_text = _render_sequence_input(input_type)

    if not normalize_sequence(sequence_text):
        st.info("Enter a sequence to start the analysis.")
        return

    result = _run_analysis(sequence_text, input_type, reading_frame, notation)
    if not result.success:
        st.error(result.error or UNKNOWN_ERROR)
        return

    for warning in result.warnings:
        st.warning(warning)

    _render_analysis_results(result.report, result.summary)
    _render_help_text()


def _initialize_session_state() -> None:
    if "app_logic" not in st.session_state:
        st.session_state.app_logic = AppLogic()

    if "sequence_text" not in st.session_state:
        st.session_state.sequence_text = settings.default_sequence
    if "input_type" not in st.session_state:
        st.session_state.input_type = settings.default_input_type


def _load_sample() -> None:
    sample = st.session_state.app_logic.get_sample_sequence(st.session_state.sample_choice)
    if sample:
        st.session_state.sequence_text = sample.sequence
        st.session_state.input_type = "dna"


def _render_controls() -> tuple[str, int, str]:
    left, right = st.columns(2)

    with left:
        input_type = st.selectbox(
            "Input Type",
            options=list(UI_INPUT_TYPE_LABELS),
            format_func=UI_INPUT_TYPE_LABELS.get,
            key="input_type",
        )
        notation = st.selectbox(
            "Amino Acid Notation",
            options=list(UI_NOTATION_LABELS),
            index=list(UI_NOTATION_LABELS).index(settings.default_notation),
            format_func=UI_NOTATION_LABELS.get,
        )

    with right:
        reading_frame = st.selectbox(
            "Reading Frame",
            options=list(UI_FRAME_LABELS),
            index=settings.default_reading_frame,
            format_func=UI_FRAME_LABELS.get,
        )
        sample_names = [sample.name for sample in st.session_state.app_logic.get_sample_sequences()]
        st.selectbox(
            "Sample Sequences",
            options=[UI_SAMPLE_PLACEHOLDER] + sample_names,
            key="sample_choice",
            on_change=_load_sample,
        )

    return input_type, reading_frame, notation


def _render_sequence_input(input_type: str) -> str:
    uploaded_file = st.file_uploader(
        "Upload sequence file",
        type=["fasta", "fa", "txt"],
        help="Upload a single-record FASTA file or paste the sequence below",
    )

    st.text_area(
        "Sequence",
        key="sequence_text",
        height=UI_TEXTAREA_HEIGHT,
        placeholder=f"Enter {input_type.upper()} sequence...",
    )

    return _get_sequence_from_input(uploaded_file, st.session_state.sequence_text)


def _get_sequence_from_input(uploaded_file: Optional[Any], sequence_text: str) -> str:
    if uploaded_file:
        text = uploaded_file.read().decode("utf-8")
    else:
        text = sequence_text or ""

    # Normalization happens in AppLogic so it can report removed characters
    return extract_sequence_text(text)


@st.cache_data(show_spinner=False, max_entries=UI_CACHE_MAX_ENTRIES)
def _cached_analysis(sequence_text: str, input_type: str, reading_frame: int, notation: str) -> AnalysisResult:
    return AppLogic().analyze_sequence(sequence_text, input_type, reading_frame, notation)


def _run_analysis(sequence_text: str, input_type: str, reading_frame: int, notation: str) -> AnalysisResult:
    with st.spinner("Analyzing your sequence..."):
        return _cached_analysis(sequence_text, input_type, reading_frame, notation)


def _render_analysis_results(report: SequenceReport, summary: Optional[str]) -> None:
    _render_sequence_metrics(report)
    _render_codon_chips(report)
    _render_protein_chips(report)
    _render_codon_usage(report)

    st.markdown("### Advanced Sequence Analysis")
    _render_analysis_tabs(report, summary)


def _render_sequence_metrics(report: SequenceReport) -> None:
    composition = report.composition
    length_col, gc_col, codon_col = st.columns(3)
    length_col.metric("Length", f"{composition.length:,} bases")
    gc_col.metric("GC Content", f"{composition.gc_content}%")
    codon_col.metric("Codons", composition.codon_count)


def _codon_color(index: int) -> str:
    return UI_CODON_COLORS[index % len(UI_CODON_COLORS)]


def _chip(text: str, color: str, title: str) -> str:
    return (
        f'<span title="{html.escape(title)}" style="background-color:{color};'
        f'padding:2px 4px;margin:2px;border-radius:4px;font-family:monospace;'
        f'display:inline-block">{html.escape(text)}</span>'
    )


def _render_codon_chips(report: SequenceReport) -> None:
    st.markdown("**RNA Sequence (color-coded by codon):**")
    chips = []
    for residue in report.residues:
        label = residue.label(report.notation) or UI_MISSING_AMINO_ACID
        title = f"Codon {residue.position + 1}: {residue.codon.sequence} → {label}"
        chips.append(_chip(residue.codon.sequence, _codon_color(residue.position), title))
    st.markdown("".join(chips), unsafe_allow_html=True)


def _render_protein_chips(report: SequenceReport) -> None:
    st.markdown("**Protein Sequence:**")
    chips = [
        _chip(
            residue.label(report.notation),
            _codon_color(residue.position),
            f"From codon: {residue.codon.sequence}",
        )
        for residue in report.residues
        if residue.is_translated
    ]
    if chips:
        st.markdown("".join(chips), unsafe_allow_html=True)
    else:
        st.caption(templates.NO_PROTEIN_MESSAGE)


def _render_codon_usage(report: SequenceReport) -> None:
    st.markdown("**Amino Acid Usage:**")
    usage = report.composition.codon_usage
    if not usage:
        st.caption(templates.NO_CODON_USAGE_MESSAGE)
        return

    usage_df = pd.DataFrame(
        {"Amino Acid": list(usage.keys()), "Count": list(usage.values())}
    ).set_index("Amino Acid")
    st.dataframe(usage_df)


def _render_analysis_tabs(report: SequenceReport, summary: Optional[str]) -> None:
    hydro_tab, gc_tab, motif_tab, summary_tab = st.tabs(
        ["Hydrophobicity Plot", "GC Content", "Sequence Motifs", "Summary"]
    )

    with hydro_tab:
        _render_hydrophobicity_plot(report)
    with gc_tab:
        _render_gc_plot(report)
    with motif_tab:
        _render_motifs(report)
    with summary_tab:
        st.markdown(summary or st.session_state.app_logic.generate_summary(report))


def _render_hydrophobicity_plot(report: SequenceReport) -> None:
    if not report.hydrophobicity:
        st.info("No valid amino acid sequence available for hydrophobicity analysis")
        return

    st.altair_chart(hydrophobicity_chart(report.hydrophobicity), use_container_width=True)
    st.caption(
        f"Kyte-Doolittle scale ({HYDROPHOBICITY_AXIS_MIN} to {HYDROPHOBICITY_AXIS_MAX})"
    )

    properties = report.protein_properties
    if properties:
        weight_col, pi_col, gravy_col = st.columns(3)
        weight_col.metric("Molecular Weight", f"{properties.molecular_weight:,} Da")
        pi_col.metric("Isoelectric Point", properties.isoelectric_point)
        gravy_col.metric("GRAVY", properties.gravy, help=properties.hydrophobicity)


def _render_gc_plot(report: SequenceReport) -> None:
    if not report.gc_windows:
        st.info(f"Sequence is shorter than the {settings.gc_window_size}-base GC window")
        return

    gc_df = pd.DataFrame(
        {
            "Sequence Position": [window.position for window in report.gc_windows],
            "GC Content (%)": [window.gc_content for window in report.gc_windows],
        }
    ).set_index("Sequence Position")
    st.line_chart(gc_df, y="GC Content (%)")


def _render_motifs(report: SequenceReport) -> None:
    for hit in report.motifs:
        if hit.found:
            positions = ", ".join(str(position) for position in hit.positions)
            st.markdown(f"**{hit.name}:** Found at positions: {positions}")
        else:
            st.markdown(f"**{hit.name}:** Not found")


def _render_help_text() -> None:
    st.caption(
        "Hover over codons and amino acids to see their relationships. "
        "Use different reading frames to find alternative open reading frames. "
        "All sequences are automatically cleaned of invalid characters."
    )


if __name__ == "__main__":
    main()
