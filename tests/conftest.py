"""Shared fixtures: a three-team league served by a fake FPL API."""

import copy

import pytest

import common.utils as utils


def _team(id_, code, name, short, strength, oh, oa, ah, aa, dh, da):
    return {
        "id": id_, "code": code, "name": name, "short_name": short,
        "strength": strength,
        "strength_overall_home": oh, "strength_overall_away": oa,
        "strength_attack_home": ah, "strength_attack_away": aa,
        "strength_defence_home": dh, "strength_defence_away": da,
        "pulse_id": id_ * 10,
    }


TEAMS = [
    _team(1, 3, "Arsenal", "ARS", 4, 1300, 1340, 1310, 1350, 1290, 1330),
    _team(2, 8, "Chelsea", "CHE", 4, 1200, 1230, 1180, 1240, 1210, 1220),
    _team(3, 14, "Liverpool", "LIV", 5, 1350, 1370, 1360, 1380, 1340, 1360),
]

# Unsorted on purpose: the lowest id per team is 4 (ARS), 7 (CHE), 12 (LIV).
ELEMENTS = [
    {"id": 10, "team": 1, "web_name": "Saka"},
    {"id": 4, "team": 1, "web_name": "Raya"},
    {"id": 12, "team": 3, "web_name": "Alisson"},
    {"id": 7, "team": 2, "web_name": "Sanchez"},
    {"id": 15, "team": 3, "web_name": "Salah"},
]


def _fx(event, team_h, team_a, is_home, kickoff, difficulty=3):
    return {
        "id": 1000 + (event or 0) * 10 + team_h,
        "event": event, "team_h": team_h, "team_a": team_a,
        "is_home": is_home, "difficulty": difficulty, "kickoff_time": kickoff,
        "finished": False, "provisional_start_time": False,
    }


PLAYER_FIXTURES = {
    4: [
        _fx(5, 2, 1, False, "2024-09-21T14:00:00Z", 4),
        _fx(6, 1, 3, True, "2024-09-28T16:30:00Z", 5),
        _fx(None, 1, 2, True, None),
    ],
    7: [
        _fx(5, 2, 1, True, "2024-09-21T14:00:00Z", 4),
        _fx(7, 3, 2, False, "2024-10-05T11:30:00Z", 5),
    ],
    12: [
        _fx(6, 1, 3, False, "2024-09-28T16:30:00Z", 4),
        _fx(7, 3, 2, True, "2024-10-05T11:30:00Z", 2),
    ],
}


@pytest.fixture
def bootstrap():
    return {"teams": copy.deepcopy(TEAMS), "elements": copy.deepcopy(ELEMENTS), "events": []}


@pytest.fixture
def player_fixtures():
    return copy.deepcopy(PLAYER_FIXTURES)


@pytest.fixture
def fake_api(monkeypatch, bootstrap, player_fixtures):
    """Patch `fpl_get` to serve the payloads above; records requested paths."""
    calls = []

    def _get(path, params=None):
        calls.append(path)
        if path == "/bootstrap-static/":
            return bootstrap
        if path.startswith("/element-summary/"):
            player_id = int(path.strip("/").split("/")[-1])
            return {"fixtures": player_fixtures.get(player_id, []), "history": []}
        raise AssertionError(f"unexpected path {path}")

    monkeypatch.setattr(utils, "fpl_get", _get)
    return calls


@pytest.fixture
def fixture_table(fake_api):
    from controllers.data_controller import load_fixture_table
    return load_fixture_table()
