# common/plots.py
"""
Plotly figures for the fixture table.

`build_heatmap` draws one cell per (team, gameweek): gameweeks 1-38 on the x
axis, teams on the y axis in the table's reverse-alphabetical category order
(Plotly stacks categories bottom-up, so the teams read alphabetically from the
top). Plotly gives hover tooltips, panning and zooming for free.
"""

from __future__ import annotations
from typing import List

import pandas as pd
import plotly.graph_objects as go

from common.constants import GAMEWEEKS, HEATMAP_COLORSCALE
from common.metrics import (
    resolve_column, team_strength_field, team_strength_label, color_logic_title,
)

KICKOFF_FORMAT = "%a %d %b %Y, %H:%M"
CELL_SEPARATOR = "<br>――――――<br>"


def team_order(table: pd.DataFrame) -> List[str]:
    """Teams in display order (reverse-alphabetical)."""
    if isinstance(table["team"].dtype, pd.CategoricalDtype):
        present = set(table["team"].astype(str))
        return [t for t in table["team"].cat.categories if t in present]
    return sorted(table["team"].astype(str).unique(), reverse=True)


def hover_text(table: pd.DataFrame, metric: str, column: str) -> pd.Series:
    """One tooltip string per fixture row for the given metric and color column."""
    own_field = team_strength_field(metric)
    own_label = team_strength_label(metric)
    opp_field = f"opponent_strength_{metric}"
    opp_label = f"Opponent {metric} strength"

    def _row(r) -> str:
        return "<br>".join([
            f"<b>{r['team']}</b>",
            f"Gameweek: {int(r['gameweek'])}",
            f"Venue: {'Home' if r['is_home'] else 'Away'}",
            f"{own_label}: {r[own_field]}",
            f"Opponent: {r['opponent_team']}",
            f"{opp_label}: {r[opp_field]}",
            f"Value: {r[column]}",
            f"Kickoff: {r['kickoff_time'].strftime(KICKOFF_FORMAT)}",
        ])

    if table.empty:
        return pd.Series([], dtype=object, index=table.index)
    return table.apply(_row, axis=1)


def heatmap_matrices(table: pd.DataFrame, metric: str, column: str):
    """
    Return (teams, z, text) with z/text shaped (len(teams), 38).

    Double gameweeks put two fixtures in one cell: the color is their mean and
    the tooltip lists both. Blank gameweeks stay empty.
    """
    teams = team_order(table)
    df = table.assign(
        team=table["team"].astype(str),
        _value=table[column].astype(float),
        _text=hover_text(table, metric, column),
    )
    grouped = df.groupby(["team", "gameweek"]).agg(
        _value=("_value", "mean"),
        _text=("_text", lambda s: CELL_SEPARATOR.join(s)),
    )

    z = (
        grouped["_value"].unstack("gameweek")
        .reindex(index=teams, columns=GAMEWEEKS)
    )
    text = (
        grouped["_text"].unstack("gameweek")
        .reindex(index=teams, columns=GAMEWEEKS)
        .fillna("")
    )
    return teams, z.to_numpy(dtype=float), text.to_numpy(dtype=object).tolist()


def build_heatmap(table: pd.DataFrame, metric: str, mode: str, height: int = 720) -> go.Figure:
    column = resolve_column(metric, mode)
    teams, z, text = heatmap_matrices(table, metric, column)

    fig = go.Figure(
        go.Heatmap(
            z=z,
            x=GAMEWEEKS,
            y=teams,
            text=text,
            hovertemplate="%{text}<extra></extra>",
            colorscale=HEATMAP_COLORSCALE,
            colorbar=dict(title=dict(text=column.replace("_", " "))),
            xgap=1,
            ygap=1,
            hoverongaps=False,
        )
    )
    fig.update_layout(
        title=dict(text=color_logic_title(metric, mode)),
        height=height,
        margin=dict(l=10, r=10, t=60, b=10),
        plot_bgcolor="white",
    )
    fig.update_xaxes(title_text="Gameweek", tickmode="linear", dtick=1,
                     range=[GAMEWEEKS[0] - 0.5, GAMEWEEKS[-1] + 0.5], side="top")
    fig.update_yaxes(type="category", categoryorder="array", categoryarray=teams)
    return fig
