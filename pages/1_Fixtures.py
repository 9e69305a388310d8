import logging
import requests
import streamlit as st

from common.constants import GAMEWEEKS, configure_logging
from common.utils import FixtureDataError
from common.ui import sidebar_header, view_controls
from common.badges import badges_by_team_name
from common.metrics import color_logic_title
from controllers.data_controller import session_fixture_table, session_teams
from controllers.stats_controller import fixture_run_summary, team_fixtures

st.set_page_config(page_title="FPL Fixtures — Table", layout="wide")
configure_logging()
logger = logging.getLogger(__name__)

def main():
    sidebar_header(show_custom_nav=True)
    st.header("Fixtures & fixture runs")

    try:
        with st.spinner("Loading fixtures from the FPL API..."):
            table = session_fixture_table()
            teams = session_teams()
    except (requests.RequestException, FixtureDataError) as exc:
        logger.exception("Fixture table load failed")
        st.error(f"Could not load fixture data: {exc}")
        st.stop()

    state = view_controls(st.sidebar)
    st.caption(color_logic_title(state.metric, state.mode))

    tab_run, tab_team = st.tabs(["Fixture run", "Team fixtures"])

    with tab_run:
        first_gw, last_gw = st.slider(
            "Gameweeks", GAMEWEEKS[0], GAMEWEEKS[-1],
            (GAMEWEEKS[0], min(GAMEWEEKS[0] + 4, GAMEWEEKS[-1])),
            key="run_window",
        )
        summary = fixture_run_summary(table, state.column, first_gw, last_gw)
        st.dataframe(summary, use_container_width=True, hide_index=True)

    with tab_team:
        names = sorted(table["team"].astype(str).unique())
        team = st.selectbox("Team", names, key="fixtures_team_select")
        df = team_fixtures(table, team, state.column, badges_by_team_name(teams))
        if df.empty:
            st.info("No scheduled fixtures for this team.")
        else:
            st.dataframe(
                df,
                use_container_width=True,
                hide_index=True,
                column_config={
                    "Badge": st.column_config.ImageColumn(" ", width="small"),
                    "Kickoff": st.column_config.DatetimeColumn("Kickoff", format="ddd D MMM, HH:mm"),
                },
            )

if __name__ == "__main__":
    main()
