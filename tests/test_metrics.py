"""
Tests for venue resolution, difference columns and the view-state rules.
"""

import pandas as pd
import pytest

from common.metrics import (
    resolve_venue_strengths,
    add_strength_differences,
    resolve_column,
    team_strength_field,
    team_strength_label,
    color_logic_title,
)


def _raw_rows():
    row = {
        "strength_overall_home": 10, "strength_overall_away": 11,
        "strength_attack_home": 20, "strength_attack_away": 21,
        "strength_defence_home": 30, "strength_defence_away": 31,
        "opponent_strength_overall_home": 110, "opponent_strength_overall_away": 111,
        "opponent_strength_attack_home": 120, "opponent_strength_attack_away": 121,
        "opponent_strength_defence_home": 130, "opponent_strength_defence_away": 131,
    }
    return pd.DataFrame([{**row, "is_home": True}, {**row, "is_home": False}])


class TestVenueResolution:
    """Own venue for the team, the opposite venue for the opponent."""

    def test_home_row(self):
        df = resolve_venue_strengths(_raw_rows())
        home = df.iloc[0]
        assert (home["team_strength_overall"], home["team_strength_attack"], home["team_strength_defence"]) == (10, 20, 30)
        assert (home["opponent_strength_overall"], home["opponent_strength_attack"], home["opponent_strength_defence"]) == (111, 121, 131)

    def test_away_row(self):
        df = resolve_venue_strengths(_raw_rows())
        away = df.iloc[1]
        assert (away["team_strength_overall"], away["team_strength_attack"], away["team_strength_defence"]) == (11, 21, 31)
        assert (away["opponent_strength_overall"], away["opponent_strength_attack"], away["opponent_strength_defence"]) == (110, 120, 130)

    def test_input_not_mutated(self):
        raw = _raw_rows()
        resolve_venue_strengths(raw)
        assert "team_strength_overall" not in raw.columns


class TestDifferences:
    """Opponent minus paired team strength."""

    def test_cross_pairing(self):
        df = add_strength_differences(resolve_venue_strengths(_raw_rows()))
        home = df.iloc[0]
        assert home["difference_strength_overall"] == 111 - 10
        assert home["difference_strength_attack"] == 121 - 30
        assert home["difference_strength_defence"] == 131 - 20


class TestResolveColumn:
    """(metric, mode) -> color column."""

    @pytest.mark.parametrize("metric", ["overall", "attack", "defence"])
    def test_absolute_uses_opponent_column(self, metric):
        assert resolve_column(metric, "absolute") == f"opponent_strength_{metric}"

    @pytest.mark.parametrize("metric", ["overall", "attack", "defence"])
    def test_difference_uses_difference_column(self, metric):
        assert resolve_column(metric, "difference") == f"difference_strength_{metric}"

    def test_unknown_values_raise(self):
        with pytest.raises(ValueError, match="metric"):
            resolve_column("midfield", "absolute")
        with pytest.raises(ValueError, match="mode"):
            resolve_column("attack", "relative")


class TestLabels:
    """Team-side label swap and titles."""

    def test_team_side_swap(self):
        assert team_strength_field("attack") == "team_strength_defence"
        assert team_strength_label("attack") == "Defence strength"
        assert team_strength_field("defence") == "team_strength_attack"
        assert team_strength_label("defence") == "Attack strength"
        assert team_strength_field("overall") == "team_strength_overall"
        assert team_strength_label("overall") == "Overall strength"

    @pytest.mark.parametrize("metric,mode,expected", [
        ("overall", "absolute", "Color logic: Opponent overall strength"),
        ("attack", "absolute", "Color logic: Opponent attack strength"),
        ("defence", "absolute", "Color logic: Opponent defence strength"),
        ("overall", "difference", "Color logic: Opponent overall strength - Team overall strength"),
        ("attack", "difference", "Color logic: Opponent attack strength - Team defence strength"),
        ("defence", "difference", "Color logic: Opponent defence strength - Team attack strength"),
    ])
    def test_titles(self, metric, mode, expected):
        assert color_logic_title(metric, mode) == expected
