from __future__ import annotations
from typing import Dict, List, Optional

from common.constants import BADGE_BASE
from models.team_model import Team


def badge_url_from_code(code: Optional[int]) -> str:
    """Build a club badge URL from a team `code` like 3 (Arsenal)."""
    return f"{BADGE_BASE}/t{code}.png" if code is not None else ""


def badges_by_team_name(teams: List[Team]) -> Dict[str, int]:
    """Return a {team name -> team code} mapping."""
    return {t.name: t.code for t in teams}
