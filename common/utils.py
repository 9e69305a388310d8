"""
Common utility functions for fetching and reshaping FPL API data.

This module contains network helpers (a small requests.Session wrapper),
thin wrappers around the two endpoints the app needs (`bootstrap-static` and
`element-summary`), and the JSON -> DataFrame transformations that turn the
raw payloads into per-team fixture frames.

The helpers return `pandas.DataFrame` objects because the rest of the app uses
pandas for tabular manipulations and plotting. Nothing here is cached: the
fixture table is built once per session by `controllers.data_controller`.

Any network error, HTTP error status or malformed JSON propagates as a
`requests.RequestException`. Integrity problems in otherwise valid payloads
raise `FixtureDataError`.
"""

# Import libraries
from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional
import pandas as pd
import requests
from .constants import BASE_URL, HTTP_TIMEOUT, USER_AGENT
from models.team_model import Team, TEAM_COLUMNS, STRENGTH_FIELDS

logger = logging.getLogger(__name__)


class FixtureDataError(ValueError):
    """The API answered, but its data cannot produce a complete fixture table."""


SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT})

def fpl_get(path: str, params: Optional[Dict[str, Any]] = None) -> Any:
    url = f"{BASE_URL.rstrip('/')}/{path.lstrip('/')}"
    logger.debug("GET %s", url)
    resp = SESSION.get(url, params=params, timeout=HTTP_TIMEOUT)
    resp.raise_for_status()
    return resp.json()

def get_bootstrap_static() -> Dict[str, Any]:
    return fpl_get("/bootstrap-static/")

def get_player_fixtures(player_id: int) -> List[Dict[str, Any]]:
    # The API only exposes fixtures per player; the list is the same for every
    # player of a team.
    data = fpl_get(f"/element-summary/{player_id}/")
    return data.get("fixtures", []) or []


# ---------- Reference data ----------

def extract_teams(bootstrap: Dict[str, Any]) -> List[Team]:
    raw = bootstrap.get("teams", []) or []
    if not raw:
        raise FixtureDataError("bootstrap-static returned no teams.")
    try:
        return [Team.from_api(t) for t in raw]
    except (KeyError, TypeError, ValueError) as exc:
        raise FixtureDataError(f"Malformed team entry in bootstrap-static: {exc}") from exc

def teams_frame(teams: List[Team]) -> pd.DataFrame:
    """One row per team with its id, code, names and all strength ratings."""
    return pd.DataFrame([vars(t) for t in teams], columns=TEAM_COLUMNS)

def representative_players(bootstrap: Dict[str, Any], teams: List[Team]) -> Dict[int, int]:
    """Return {team_id -> player_id}, picking the lowest player id of each team."""
    players = pd.DataFrame(bootstrap.get("elements", []) or [], columns=["id", "team"])
    firsts = players.sort_values("id").groupby("team")["id"].first()

    picks: Dict[int, int] = {}
    for team in teams:
        if team.id not in firsts.index:
            raise FixtureDataError(f"No players listed for team {team.name} (id={team.id}).")
        picks[team.id] = int(firsts.loc[team.id])
    return picks


# ---------- Fixtures ----------

def process_fixtures(raw_fixtures: List[Dict[str, Any]]) -> pd.DataFrame:
    """Return the scheduled fixtures of one team, seen from that team's side.

    Steps performed:
      1. Drop fixtures without a gameweek (postponed and not yet rescheduled).
      2. Pick the opponent id from the home/away flag: a home row plays the
         listed away team (`team_a`) and vice versa.
      3. Keep only gameweek, opponent id, venue flag, difficulty and kickoff.
    """
    rows = []
    for f in raw_fixtures:
        if f.get("event") is None:
            continue
        try:
            is_home = bool(f["is_home"])
            opponent_id = int(f["team_a"] if is_home else f["team_h"])
        except (KeyError, TypeError, ValueError) as exc:
            raise FixtureDataError(f"Malformed fixture entry: {exc}") from exc
        rows.append({
            "gameweek": int(f["event"]),
            "opponent_id": opponent_id,
            "is_home": is_home,
            "difficulty": f.get("difficulty"),
            "kickoff_time": f.get("kickoff_time"),
        })
    return pd.DataFrame(rows, columns=["gameweek", "opponent_id", "is_home", "difficulty", "kickoff_time"])

def attach_opponents(fixtures: pd.DataFrame, df_teams: pd.DataFrame) -> pd.DataFrame:
    """Join opponent name and strengths onto fixture rows, prefixed `opponent_`.

    An opponent id missing from the reference table means the payloads are
    inconsistent, so it raises instead of dropping the row.
    """
    opponents = df_teams[["id", "name"] + STRENGTH_FIELDS].rename(
        columns={"id": "opponent_id", "name": "opponent_team",
                 **{c: f"opponent_{c}" for c in STRENGTH_FIELDS}}
    )
    df = fixtures.merge(opponents, on="opponent_id", how="left", validate="m:1", indicator=True)

    unmatched = df.loc[df["_merge"] != "both", "opponent_id"].unique().tolist()
    if unmatched:
        raise FixtureDataError(f"Opponent ids not found in team reference data: {sorted(unmatched)}")
    return df.drop(columns="_merge")

def parse_kickoff(values: pd.Series) -> pd.Series:
    """Parse '2024-08-16T19:00:00Z' style strings into naive timestamps."""
    cleaned = values.astype("string").str.replace("T", " ", regex=False).str.replace("Z", "", regex=False)
    try:
        parsed = pd.to_datetime(cleaned, format="%Y-%m-%d %H:%M:%S", errors="raise")
    except (ValueError, TypeError) as exc:
        raise FixtureDataError(f"Unparseable kickoff time: {exc}") from exc
    if parsed.isna().any():
        raise FixtureDataError(f"{int(parsed.isna().sum())} fixture(s) without a kickoff time.")
    return parsed
