import pandas as pd
from common.badges import badge_url_from_code


def fixture_run_summary(table: pd.DataFrame, column: str, first_gw: int, last_gw: int) -> pd.DataFrame:
    """Mean of `column` per team over gameweeks first_gw..last_gw (inclusive).

    Sorted easiest run first (lowest mean), ties by team name; teams without a
    fixture in the window come last with a missing mean.
    """
    teams = sorted(table["team"].astype(str).unique())
    window = table[(table["gameweek"] >= first_gw) & (table["gameweek"] <= last_gw)].copy()
    window["team"] = window["team"].astype(str)

    summary = (
        window.groupby("team")
        .agg(Fixtures=(column, "size"), Mean=(column, "mean"))
        .reindex(pd.Index(teams, name="team"))
        .reset_index()
        .rename(columns={"team": "Team"})
    )
    summary["Fixtures"] = summary["Fixtures"].fillna(0).astype(int)
    summary["Mean"] = summary["Mean"].astype(float).round(1)
    return summary.sort_values(["Mean", "Team"], na_position="last", kind="mergesort").reset_index(drop=True)


def team_fixtures(table: pd.DataFrame, team: str, column: str, badges: dict) -> pd.DataFrame:
    """One team's fixtures in gameweek order, with the opponent badge first."""
    df = table[table["team"].astype(str) == str(team)].copy()
    df = df.sort_values(["gameweek", "kickoff_time"], kind="mergesort")

    out = pd.DataFrame({
        "Badge": df["opponent_team"].map(lambda name: badge_url_from_code(badges.get(name))),
        "GW": df["gameweek"].astype(int),
        "Opponent": df["opponent_team"],
        "Venue": df["is_home"].map({True: "H", False: "A"}),
        "Kickoff": df["kickoff_time"],
        "Value": df[column],
    })
    return out.reset_index(drop=True)
