"""
Layout helpers for the Streamlit application (page config, headline, mode toggle).
"""

from __future__ import annotations

import streamlit as st

from fukuoka_c19.config import DEFAULT_MODE, MODES, PERIOD_START, DisplayMode, mode_config
from fukuoka_c19.ui.components.formatting import format_number

MODE_STATE_KEY = "fc_display_mode"


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Fukuoka C19",
        layout="wide",
        page_icon=":bar_chart:",
    )


def render_headline(case_count: int, last_date: str) -> None:
    st.markdown(
        f"### 福岡県COVID-19新規感染者{format_number(case_count)}人({PERIOD_START} -- {last_date})"
    )


def mode_selector() -> DisplayMode:
    """Mutually exclusive mode buttons; the selection lives in session state."""
    current = st.session_state.get(MODE_STATE_KEY, DEFAULT_MODE)
    columns = st.columns(len(MODES))
    for column, config in zip(columns, MODES):
        with column:
            clicked = st.button(
                config.label,
                key=f"mode_{config.mode.value}",
                type="primary" if config.mode == current else "secondary",
                use_container_width=True,
            )
        if clicked and config.mode != current:
            current = config.mode
            st.session_state[MODE_STATE_KEY] = current
            st.rerun()
    return current


def mode_label(mode: DisplayMode) -> str:
    return mode_config(mode).label
