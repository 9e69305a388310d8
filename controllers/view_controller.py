"""
View controller for the heatmap page.

The two pieces of UI state (metric, display mode) live in a frozen
`ViewState`. `build_view` derives everything the page shows from the fixture
table and that state in one call, so the color column, title and tooltips are
always computed from the same state.
"""

from __future__ import annotations
from dataclasses import dataclass

import pandas as pd
import plotly.graph_objects as go

from common.constants import DEFAULT_METRIC, DEFAULT_MODE
from common.metrics import resolve_column, color_logic_title
from common.plots import build_heatmap


@dataclass(frozen=True)
class ViewState:
        metric: str = DEFAULT_METRIC
        mode: str = DEFAULT_MODE

        @property
        def column(self) -> str:
            return resolve_column(self.metric, self.mode)


@dataclass(frozen=True)
class HeatmapView:
        column: str
        title: str
        figure: go.Figure

        @property
        def caption(self) -> str:
            return f"{self.title}. Colored by `{self.column}`, darker cells are harder fixtures."


def build_view(table: pd.DataFrame, state: ViewState) -> HeatmapView:
    return HeatmapView(
        column=state.column,
        title=color_logic_title(state.metric, state.mode),
        figure=build_heatmap(table, state.metric, state.mode),
    )
