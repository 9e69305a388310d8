"""
Data model for one row of the tidy fixture table.

One `FixtureRow` exists per team per scheduled match, seen from that team's
perspective. The field order is the column order of the final table built by
`controllers.data_controller.load_fixture_table`.
"""

from dataclasses import dataclass, fields

import pandas as pd


@dataclass(frozen=True)
class FixtureRow:
        gameweek: int
        team: str
        opponent_team: str
        is_home: bool
        kickoff_time: pd.Timestamp
        team_strength_overall: int
        team_strength_attack: int
        team_strength_defence: int
        opponent_strength_overall: int
        opponent_strength_attack: int
        opponent_strength_defence: int
        difference_strength_overall: int
        difference_strength_attack: int
        difference_strength_defence: int


FIXTURE_COLUMNS = [f.name for f in fields(FixtureRow)]
