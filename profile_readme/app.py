"""
Profile README Generator – Streamlit frontend.
No business logic in layout; validation and generation live in services.
"""

import streamlit as st

from profile_readme.config import (
    APP_TAGLINE,
    APP_TITLE,
    FIELD_LABELS,
    FIELD_NAMES,
    FIELD_PLACEHOLDERS,
    PREVIEW_HEIGHT,
    PREVIEW_PLACEHOLDER,
    TEXT_AREA_HEIGHT,
)
from profile_readme.services.export import build_copy_snippet, build_download
from profile_readme.services.form_state import FormState

FORM_STATE_KEY = "readme_form"
# Single-line inputs; every other field is a text area
SINGLE_LINE_FIELDS = {"name"}


def _get_form_state() -> FormState:
    """One FormState per browser session."""
    if FORM_STATE_KEY not in st.session_state:
        st.session_state[FORM_STATE_KEY] = FormState()
    return st.session_state[FORM_STATE_KEY]


def _render_field(name: str) -> str:
    label = FIELD_LABELS[name]
    placeholder = FIELD_PLACEHOLDERS[name]
    if name in SINGLE_LINE_FIELDS:
        return st.text_input(label, placeholder=placeholder, key=f"field_{name}")
    return st.text_area(
        label,
        placeholder=placeholder,
        height=TEXT_AREA_HEIGHT,
        key=f"field_{name}",
    )


def render_form_tab(state: FormState) -> None:
    """Six fields plus submit; errors appear under the offending fields."""
    error_slots = {}
    with st.form("readme_input_form"):
        values = {}
        for name in FIELD_NAMES:
            values[name] = _render_field(name)
            error_slots[name] = st.empty()
        submitted = st.form_submit_button("Generate README", type="primary")

    if submitted:
        for name, value in values.items():
            state.set_field(name, value or "")
        result = state.submit()
        if result.is_valid:
            st.success("README generated. Open the **Preview** tab to copy or download it.")

    for name, message in state.errors.items():
        if name in error_slots:
            error_slots[name].error(message)


def render_preview_tab(state: FormState) -> None:
    """Literal Markdown plus download / copy once a document exists."""
    if not state.has_document:
        st.code(PREVIEW_PLACEHOLDER, language=None)
        return

    # Disabled text_area shows the document verbatim, trailing newlines included
    st.text_area(
        "README.md",
        value=state.document,
        height=PREVIEW_HEIGHT,
        disabled=True,
        label_visibility="collapsed",
    )
    col_download, col_copy = st.columns(2)
    with col_download:
        payload = build_download(state.document)
        st.download_button(
            f"Download {payload.file_name}",
            data=payload.data,
            file_name=payload.file_name,
            mime=payload.mime,
            key="download_readme",
        )
    with col_copy:
        st.iframe(build_copy_snippet(state.document), height=56, alt="Copy README to clipboard")


def render_layout() -> None:
    """Streamlit page layout: hero header, then Form / Preview tabs."""
    st.set_page_config(page_title=APP_TITLE, page_icon="✨", layout="centered")
    st.title(APP_TITLE)
    st.markdown(f"*{APP_TAGLINE}*")
    st.divider()

    st.subheader("📖 Create Your README")
    state = _get_form_state()
    form_tab, preview_tab = st.tabs(["Form", "Preview"])
    with form_tab:
        render_form_tab(state)
    with preview_tab:
        render_preview_tab(state)


if __name__ == "__main__":
    render_layout()
