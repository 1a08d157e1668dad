from dynasty_records.core.models import GameRecord, PlayerRecord
from dynasty_records.data.attribution import credits_player, roster_side, team_for_year


def _transfer_player() -> PlayerRecord:
    return PlayerRecord.from_dict(
        {"pid": "p1", "name": "Transfer Guy", "team": "OU", "teamsByYear": {"2024": "TEX", "2025": "OU"}}
    )


def _game(year: int, **overrides) -> GameRecord:
    row = {
        "year": year,
        "week": 1,
        "opponent": "BAY",
        "userTeam": "TEX",
        "location": "home",
        "boxScore": {"home": {}, "away": {}},
    }
    row.update(overrides)
    return GameRecord.from_dict(row)


def test_team_for_year_falls_back_to_current_then_dynasty_team():
    player = _transfer_player()
    assert team_for_year(player, 2024) == "TEX"
    assert team_for_year(player, 2023) == "OU"
    assert team_for_year(PlayerRecord(pid="p2", name="B"), 2024, "tex") == "TEX"


def test_games_after_transfer_are_not_credited():
    player = _transfer_player()
    assert credits_player(player, 2024, _game(2024), "TEX")
    assert not credits_player(player, 2025, _game(2025), "TEX")


def test_cpu_games_and_missing_box_scores_are_not_credited():
    player = _transfer_player()
    assert not credits_player(player, 2024, _game(2024, isCPUGame=True), "TEX")
    assert not credits_player(player, 2024, _game(2024, boxScore=None), "TEX")
    assert not credits_player(player, 2024, _game(2023), "TEX")


def test_roster_side_comes_from_location():
    assert roster_side(_game(2024)) == "home"
    assert roster_side(_game(2024, location="Away")) == "away"
    assert roster_side(_game(2024, location="neutral")) == "home"
    assert roster_side(_game(2024, location="Road")) == "away"
    assert roster_side(_game(2024, location=None)) is None


def test_games_without_user_team_scan_the_players_roster():
    player = PlayerRecord.from_dict({"pid": "p1", "name": "Back Field", "team": "TEX"})
    game = _game(2024, userTeam=None)

    assert credits_player(player, 2024, game, "Texas Longhorns")
    assert credits_player(player, 2024, _game(2024, userTeam="TEX"), "Texas Longhorns")
    assert not credits_player(player, 2024, _game(2024, userTeam="OU"), "Texas Longhorns")
