"""
Strength metrics for the fixture table and the column/label rules of the view.

This module provides:
    - `resolve_venue_strengths`, which picks the home or away variant of every
        strength rating for both sides of a fixture row,
    - `add_strength_differences`, which derives the three
        `difference_strength_*` columns, and
    - the pure helpers that map the view state (metric, mode) to the column
        used for coloring and to the words shown in titles and tooltips.

Venue rule: the acting team's ratings follow its own `is_home` flag, the
opponent's ratings follow the opposite flag (the opponent of a home team is
away, so its away ratings apply).

Pairing rule: attack is measured against defence. A team's attacking fixture
compares the opponent's defence with the team's attack, so
`difference_strength_defence = opponent defence - team attack` and
`difference_strength_attack = opponent attack - team defence`. Overall is
compared with overall.
"""

#Import libraries
from __future__ import annotations
from typing import Dict
import numpy as np
import pandas as pd

from common.constants import METRICS, MODES

# metric -> the team's own metric it is compared against
PAIRED_METRIC: Dict[str, str] = {
    "overall": "overall",
    "attack": "defence",
    "defence": "attack",
}


# ---------- Table transforms ----------
def resolve_venue_strengths(df: pd.DataFrame) -> pd.DataFrame:
    """
    Add `team_strength_<m>` and `opponent_strength_<m>` for every metric.

    Expects the raw `strength_<m>_{home,away}` columns of the acting team and
    the same columns prefixed `opponent_` for its opponent.
    """
    df = df.copy()
    home = df["is_home"].astype(bool)
    for m in METRICS:
        df[f"team_strength_{m}"] = np.where(
            home, df[f"strength_{m}_home"], df[f"strength_{m}_away"]
        )
        df[f"opponent_strength_{m}"] = np.where(
            home, df[f"opponent_strength_{m}_away"], df[f"opponent_strength_{m}_home"]
        )
    return df


def add_strength_differences(df: pd.DataFrame) -> pd.DataFrame:
    """Add `difference_strength_<m> = opponent <m> - team <paired m>`."""
    df = df.copy()
    for m in METRICS:
        df[f"difference_strength_{m}"] = (
            df[f"opponent_strength_{m}"] - df[f"team_strength_{PAIRED_METRIC[m]}"]
        )
    return df


# ---------- View state -> columns and words ----------
def _check_state(metric: str, mode: str) -> None:
    if metric not in METRICS:
        raise ValueError(f"Unknown metric {metric!r}; expected one of {METRICS}")
    if mode not in MODES:
        raise ValueError(f"Unknown display mode {mode!r}; expected one of {MODES}")


def resolve_column(metric: str, mode: str) -> str:
    """Name of the column that drives the heatmap colors."""
    _check_state(metric, mode)
    if mode == "difference":
        return f"difference_strength_{metric}"
    return f"opponent_strength_{metric}"


def team_strength_field(metric: str) -> str:
    """The team's own column shown next to the opponent's `metric` rating."""
    _check_state(metric, "absolute")
    return f"team_strength_{PAIRED_METRIC[metric]}"


def team_strength_label(metric: str) -> str:
    _check_state(metric, "absolute")
    return f"{PAIRED_METRIC[metric].capitalize()} strength"


def color_logic_title(metric: str, mode: str) -> str:
    """
    Plot title spelling out what the colors show, e.g.
    'Color logic: Opponent attack strength - Team defence strength'.
    """
    _check_state(metric, mode)
    title = f"Color logic: Opponent {metric} strength"
    if mode == "difference":
        title += f" - Team {PAIRED_METRIC[metric]} strength"
    return title
