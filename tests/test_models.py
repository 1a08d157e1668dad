import math

import pytest

from dynasty_records.core.models import (
    DisplayMode,
    DynastyDocument,
    GameRecord,
    LeaderboardEntry,
    PlayerNotFoundError,
    coerce_number,
    normalize_name,
)


def test_coerce_number_never_raises():
    assert coerce_number(None) == 0.0
    assert coerce_number("") == 0.0
    assert coerce_number("abc") == 0.0
    assert coerce_number(True) == 0.0
    assert coerce_number(math.nan) == 0.0
    assert coerce_number(math.inf) == 0.0
    assert coerce_number("1,234") == 1234.0
    assert coerce_number(" 7 ") == 7.0
    assert coerce_number(3) == 3.0


def test_normalize_name_folds_case_and_whitespace():
    assert normalize_name("  John   SMITH ") == "john smith"
    assert normalize_name(None) == ""


def test_game_is_cpu_when_flagged_or_no_opponent():
    assert GameRecord.from_dict({"isCPUGame": True, "opponent": "OU"}).is_cpu
    assert GameRecord.from_dict({"team1": "OU", "team2": "TEX"}).is_cpu
    assert not GameRecord.from_dict({"opponent": "OU", "team1": "OU", "team2": "TEX"}).is_cpu


def test_document_from_dict_parses_players_and_years():
    document = DynastyDocument.from_dict(
        {
            "teamAbbr": "TEX",
            "currentYear": "2025",
            "games": [{"id": 1, "year": "2024", "week": "3", "opponent": "OU"}, "garbage"],
            "players": [
                {"pid": 7, "name": "Jane Doe", "teamsByYear": {"2024": "TEX", "bad": "OU"}},
                {"name": "Honor Row", "isHonorOnly": True},
            ],
            "playerStatsByYear": {"2024": {"passing": []}},
        }
    )

    assert document.team_abbr == "TEX"
    assert document.current_year == 2025
    assert len(document.games) == 1
    assert document.games[0].year == 2024
    assert document.games[0].week == 3
    assert document.players[0].pid == "7"
    assert document.players[0].teams_by_year == {2024: "TEX"}
    assert document.players[1].pid == "Honor Row"
    assert [player.pid for player in document.roster] == ["7"]
    assert list(document.manual_stats) == [2024]


def test_get_player_raises_for_unknown_pid():
    document = DynastyDocument.from_dict({"players": [{"pid": "p1", "name": "A"}]})
    assert document.get_player(" p1 ").name == "A"
    with pytest.raises(PlayerNotFoundError):
        document.get_player("p9")


def test_display_mode_parse():
    assert DisplayMode.parse("Career") is DisplayMode.CAREER
    assert DisplayMode.parse(DisplayMode.SEASON) is DisplayMode.SEASON
    with pytest.raises(ValueError):
        DisplayMode.parse("weekly")


def test_leaderboard_entry_to_dict_lists_years():
    entry = LeaderboardEntry(pid="p1", name="A", team="TEX", value=10.0, years=(2024, 2025))
    assert entry.to_dict() == {
        "pid": "p1",
        "name": "A",
        "team": "TEX",
        "value": 10.0,
        "year": None,
        "years": [2024, 2025],
    }
