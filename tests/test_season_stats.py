from dynasty_records.core.models import DynastyDocument
from dynasty_records.data.season_stats import extract_box_score_season


def _rushing_game(week: int, home_line: dict, away_line: dict | None = None, **overrides) -> dict:
    game = {
        "year": 2024,
        "week": week,
        "opponent": "OU",
        "userTeam": "TEX",
        "location": "home",
        "boxScore": {
            "home": {"rushing": [dict(home_line, playerName="Back Field")]},
            "away": {"rushing": [dict(away_line, playerName="Back Field")] if away_line else []},
        },
    }
    game.update(overrides)
    return game


def _document(games: list[dict]) -> DynastyDocument:
    return DynastyDocument.from_dict(
        {
            "teamAbbr": "TEX",
            "players": [{"pid": "b1", "name": "Back Field", "team": "TEX"}],
            "games": games,
        }
    )


def test_long_is_best_single_game_not_sum():
    document = _document(
        [
            _rushing_game(1, {"carries": 12, "yards": 80, "tD": 1, "long": 40}),
            _rushing_game(2, {"carries": 18, "yards": 95, "tD": 2, "long": 25}),
        ]
    )
    season = extract_box_score_season(document, document.get_player("b1"), 2024)

    assert season is not None
    assert season.games_played == 2
    rushing = season.categories["rushing"]
    assert rushing["carries"] == 30
    assert rushing["yards"] == 175
    assert rushing["touchdowns"] == 3
    assert rushing["long"] == 40


def test_opponent_namesake_is_ignored_when_location_is_known():
    document = _document(
        [
            _rushing_game(
                1,
                {"carries": 10, "yards": 50, "tD": 0, "long": 12},
                {"carries": 30, "yards": 300, "tD": 4, "long": 80},
                location="away",
            ),
        ]
    )
    season = extract_box_score_season(document, document.get_player("b1"), 2024)

    assert season is not None
    assert season.categories["rushing"]["yards"] == 300
    assert season.categories["rushing"]["long"] == 80


def test_cpu_games_do_not_count():
    document = _document(
        [
            _rushing_game(1, {"carries": 10, "yards": 50, "tD": 0, "long": 12}, isCPUGame=True),
        ]
    )
    assert extract_box_score_season(document, document.get_player("b1"), 2024) is None


def test_no_games_returns_none():
    document = _document([])
    assert extract_box_score_season(document, document.get_player("b1"), 2024) is None


def test_neutral_site_reads_only_the_home_roster():
    document = _document(
        [
            {
                "year": 2024,
                "week": 14,
                "opponent": "OU",
                "userTeam": "TEX",
                "location": "neutral",
                "boxScore": {
                    "home": {"rushing": [{"playerName": "Someone Else", "carries": 5, "yards": 20}]},
                    "away": {"rushing": [{"playerName": "Back Field", "carries": 30, "yards": 300}]},
                },
            }
        ]
    )
    assert extract_box_score_season(document, document.get_player("b1"), 2024) is None


def test_team_name_only_document_credits_player_team():
    document = DynastyDocument.from_dict(
        {
            "teamName": "Texas Longhorns",
            "players": [{"pid": "b1", "name": "Back Field", "team": "TEX"}],
            "games": [
                {
                    "year": 2024,
                    "week": 1,
                    "opponent": "OU",
                    "location": "home",
                    "boxScore": {
                        "home": {"rushing": [{"playerName": "Back Field", "carries": 20, "yards": 150, "long": 45}]},
                        "away": {},
                    },
                }
            ],
        }
    )
    season = extract_box_score_season(document, document.get_player("b1"), 2024)

    assert season is not None
    assert season.games_played == 1
    assert season.categories["rushing"]["yards"] == 150
