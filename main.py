"""
Main application entry for the FPL fixture strength heatmap.

This module defines the top-level Streamlit page that users see when they
open the app. It handles:
    - application configuration (`st.set_page_config`) and logging,
    - loading the fixture table once per session (via
        `controllers.data_controller`); a failed fetch stops the page,
    - rendering the metric dropdown and display-mode radio
        (`common.ui.view_controls`),
    - drawing the heatmap derived from the current selection
        (`controllers.view_controller.build_view`).

Run locally with:

    streamlit run main.py

Every widget change reruns this script, but the fixture table is taken from
`st.session_state`, so the API is only called on the first run of a session.
"""

# Import libraries
import logging
import requests
import streamlit as st

from common.constants import configure_logging
from common.utils import FixtureDataError
from common.ui import sidebar_header, view_controls
from controllers.data_controller import session_fixture_table
from controllers.view_controller import build_view

# Configure Streamlit page and logging.
st.set_page_config(page_title="FPL Fixtures — Heatmap", layout="wide")
configure_logging()
logger = logging.getLogger(__name__)

def main():
    sidebar_header(show_custom_nav=True)

    st.title("⚽ Premier League Fixture Strength")
    st.caption("Opponent strength ratings for every team and gameweek, from the FPL API.")

    # 1) Load the fixture table (first run of the session only)
    try:
        with st.spinner("Loading fixtures from the FPL API..."):
            table = session_fixture_table()
    except (requests.RequestException, FixtureDataError) as exc:
        logger.exception("Fixture table load failed")
        st.error(f"Could not load fixture data: {exc}")
        st.stop()

    # 2) Controls -> derived view
    state = view_controls()
    view = build_view(table, state)

    # 3) Heatmap
    st.plotly_chart(view.figure, use_container_width=True, key="fixture_heatmap")
    st.caption(view.caption)

if __name__ == "__main__":
    main()
