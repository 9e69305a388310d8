# common/ui.py
from __future__ import annotations
import streamlit as st

from common.constants import METRICS, MODES, DEFAULT_METRIC, DEFAULT_MODE
from controllers.view_controller import ViewState

METRIC_KEY = "selected_metric"
MODE_KEY   = "display_mode"

def sidebar_header(show_custom_nav: bool = False):
    # Hide the built-in pages nav so only our custom links appear
    st.markdown(
        "<style>[data-testid='stSidebarNav']{display:none !important;}</style>",
        unsafe_allow_html=True,
    )
    with st.sidebar:
        st.markdown("**Data:** Fantasy Premier League API")
        if show_custom_nav:
            st.divider()
            st.markdown("#### Pages")
            st.page_link("main.py", label="Heatmap", icon="🗓️")
            st.page_link("pages/1_Fixtures.py", label="Fixtures", icon="📋")

def view_controls(container=st) -> ViewState:
    """Render the metric dropdown and mode radio; return the current ViewState.

    Widget keys live in session_state, so the choice survives page switches.
    """
    # Widgets created with a key on one page are dropped when another page
    # runs without them; re-seeding keeps the last choice.
    st.session_state.setdefault(METRIC_KEY, DEFAULT_METRIC)
    st.session_state.setdefault(MODE_KEY, DEFAULT_MODE)
    st.session_state[METRIC_KEY] = st.session_state[METRIC_KEY]
    st.session_state[MODE_KEY] = st.session_state[MODE_KEY]

    col_metric, col_mode = container.columns(2)
    metric = col_metric.selectbox(
        "Strength metric",
        options=METRICS,
        format_func=str.capitalize,
        key=METRIC_KEY,
    )
    mode = col_mode.radio(
        "Display",
        options=MODES,
        format_func=str.capitalize,
        horizontal=True,
        key=MODE_KEY,
    )
    return ViewState(metric=metric, mode=mode)
