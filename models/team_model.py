"""
Small data model for a Premier League team as published by the FPL API.

The class is frozen (immutable): team reference data is fetched once from the
`bootstrap-static` endpoint and never changes during a session.

Fields mirror the keys of the `teams` array returned by the API:
    - `id`, `code`, `name`, `short_name`,
    - `strength` (general tier) and the six venue-specific ratings
        `strength_{overall,attack,defence}_{home,away}`.
"""

from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, List

STRENGTH_FIELDS = [
    "strength",
    "strength_overall_home",
    "strength_overall_away",
    "strength_attack_home",
    "strength_attack_away",
    "strength_defence_home",
    "strength_defence_away",
]


@dataclass(frozen=True)
class Team:
        id: int
        code: int
        name: str
        short_name: str
        strength: int
        strength_overall_home: int
        strength_overall_away: int
        strength_attack_home: int
        strength_attack_away: int
        strength_defence_home: int
        strength_defence_away: int

        @classmethod
        def from_api(cls, payload: Dict[str, Any]) -> "Team":
            """Build a Team from one entry of `bootstrap-static` -> `teams`.

            Raises KeyError when the payload lacks one of the fields.
            """
            return cls(
                id=int(payload["id"]),
                code=int(payload["code"]),
                name=str(payload["name"]),
                short_name=str(payload.get("short_name", "") or ""),
                **{f: int(payload[f]) for f in STRENGTH_FIELDS},
            )


TEAM_COLUMNS: List[str] = [f.name for f in fields(Team)]
