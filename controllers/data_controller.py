"""
Data controller helpers that glue the common data-fetching utilities to
the Streamlit pages.

This module exposes:
    - `load_fixture_table()`, the whole fetch-and-reshape pipeline returning
        one row per (team, scheduled fixture), and
    - `session_fixture_table()`, which runs the pipeline once per browser
        session and keeps the result in `st.session_state` so widget changes
        never trigger a new fetch (`session_teams()` reads the team reference
        data stored alongside it).

The pipeline is a two-stage transform:
    1. `collect_team_fixtures` fetches each team's fixture list and joins the
        opponents, producing a list of (Team, fixtures DataFrame) pairs.
    2. `flatten_team_fixtures` stacks those pairs into one long table with the
        acting team's reference data on every row.
Strength resolution, kickoff parsing and column selection follow.

There is no partial-success mode: any HTTP/JSON error or data fault raised
along the way aborts the whole load.
"""

from __future__ import annotations
import logging
from typing import List, Optional, Tuple
import pandas as pd
import streamlit as st

from common.utils import (
    FixtureDataError, get_bootstrap_static, get_player_fixtures, extract_teams,
    teams_frame, representative_players, process_fixtures, attach_opponents, parse_kickoff,
)
from common.metrics import resolve_venue_strengths, add_strength_differences
from models.team_model import Team, STRENGTH_FIELDS
from models.fixture_model import FIXTURE_COLUMNS

logger = logging.getLogger(__name__)

SESSION_KEY = "fixture_table"
TEAMS_KEY   = "teams"


def collect_team_fixtures(bootstrap: dict) -> List[Tuple[Team, pd.DataFrame]]:
    teams = extract_teams(bootstrap)
    df_teams = teams_frame(teams)
    players = representative_players(bootstrap, teams)

    collected = []
    for team in teams:
        player_id = players[team.id]
        logger.info("Fetching fixtures for %s via player %s", team.name, player_id)
        fixtures = process_fixtures(get_player_fixtures(player_id))
        if fixtures.empty:
            raise FixtureDataError(f"No scheduled fixtures for {team.name} (player {player_id}).")
        collected.append((team, attach_opponents(fixtures, df_teams)))
    return collected


def flatten_team_fixtures(team_fixtures: List[Tuple[Team, pd.DataFrame]]) -> pd.DataFrame:
    frames = []
    for team, fixtures in team_fixtures:
        df = fixtures.copy()
        df.insert(0, "team", team.name)
        df.insert(1, "team_id", team.id)
        for c in STRENGTH_FIELDS:
            df[c] = getattr(team, c)
        frames.append(df)
    if not frames:
        raise FixtureDataError("No team fixtures to flatten.")
    return pd.concat(frames, ignore_index=True)


def finalize_fixture_table(df: pd.DataFrame) -> pd.DataFrame:
    """Reduce to the fixture-row schema and fix the reverse-alphabetical team order."""
    df = df[FIXTURE_COLUMNS].copy()
    if df.isna().any().any():
        missing = df.columns[df.isna().any()].tolist()
        raise FixtureDataError(f"Missing values in fixture table columns: {missing}")

    order = sorted(df["team"].unique(), reverse=True)
    df["team"] = pd.Categorical(df["team"], categories=order, ordered=True)
    df["gameweek"] = df["gameweek"].astype(int)
    return df.sort_values(["team", "gameweek", "kickoff_time"], kind="mergesort").reset_index(drop=True)


def load_fixture_table(bootstrap: Optional[dict] = None) -> pd.DataFrame:
    if bootstrap is None:
        bootstrap = get_bootstrap_static()

    # 1) Per-team fixture frames, then one long table.
    df = flatten_team_fixtures(collect_team_fixtures(bootstrap))

    # 2) Venue-dependent ratings and their differences.
    df = add_strength_differences(resolve_venue_strengths(df))

    # 3) Canonical kickoff timestamps and final schema.
    df["kickoff_time"] = parse_kickoff(df["kickoff_time"])
    df = finalize_fixture_table(df)

    logger.info("Fixture table ready: %d rows for %d teams", len(df), df["team"].nunique())
    return df


def session_fixture_table() -> pd.DataFrame:
    if SESSION_KEY not in st.session_state:
        bootstrap = get_bootstrap_static()
        table = load_fixture_table(bootstrap)
        st.session_state[TEAMS_KEY] = extract_teams(bootstrap)
        st.session_state[SESSION_KEY] = table
    return st.session_state[SESSION_KEY]


def session_teams() -> List[Team]:
    session_fixture_table()
    return st.session_state[TEAMS_KEY]
