from dynasty_records.core.models import DynastyDocument
from dynasty_records.data.manual_stats import (
    BOX_SCORE_SOURCE,
    MANUAL_SOURCE,
    ManualStatIndex,
    merge_season,
)
from dynasty_records.data.player_index import PlayerIndex
from dynasty_records.data.season_stats import BoxScoreSeason


def _document(**overrides) -> DynastyDocument:
    payload = {
        "teamAbbr": "TEX",
        "players": [
            {
                "pid": "q1",
                "name": "Quarter Back",
                "team": "TEX",
                "statsByYear": {
                    "2024": {
                        "gamesPlayed": 11,
                        "passing": {"cmp": 1, "att": 2, "yds": 3},
                        "rushing": {"car": 40, "yds": 210, "td": 3, "lng": 35},
                    }
                },
            },
            {"pid": "d1", "name": "Twin Name", "team": "TEX"},
            {"pid": "d2", "name": "Twin Name", "team": "TEX"},
        ],
        "playerStatsByYear": {
            "2024": {
                "passing": [
                    {"name": "quarter back", "cmp": 150, "att": 240, "yds": 2100, "td": 18, "int": 6, "gamesPlayed": 12},
                    {"name": "Quarter Back", "cmp": 1, "att": 1, "yds": 1},
                ],
                "defense": [
                    {"name": "Twin Name", "soloTkl": 40},
                    {"name": "Twin Name", "pid": "d2", "soloTkl": 22},
                    {"name": "Walk On", "soloTkl": 99},
                ],
            }
        },
    }
    payload.update(overrides)
    return DynastyDocument.from_dict(payload)


def test_sheet_entry_beats_player_block_and_first_duplicate_wins():
    document = _document()
    index = ManualStatIndex.from_document(document, PlayerIndex(document.roster))

    passing = index.get("q1", 2024, "passing")
    assert passing is not None
    assert passing.fields["attempts"] == 240
    assert passing.games_played == 12

    rushing = index.get("q1", 2024, "rushing")
    assert rushing is not None
    assert rushing.fields["carries"] == 40
    assert rushing.fields["long"] == 35


def test_ambiguous_and_unknown_names_need_a_pid():
    document = _document()
    index = ManualStatIndex.from_document(document)

    assert index.get("d1", 2024, "defense") is None
    assert index.get("d2", 2024, "defense").fields["solo_tackles"] == 22
    assert index.years_for("d2") == {2024}
    assert index.years_for("walk on") == set()


def test_box_score_wins_per_category_without_blending():
    document = _document()
    index = ManualStatIndex.from_document(document)
    box = BoxScoreSeason(
        pid="q1",
        year=2024,
        categories={"passing": {"completions": 20.0, "attempts": 30.0, "yards": 300.0}},
        games_played=2,
    )

    merged = merge_season("q1", 2024, box, index)

    assert merged is not None
    assert merged.categories["passing"] == {"completions": 20.0, "attempts": 30.0, "yards": 300.0}
    assert merged.sources["passing"] == BOX_SCORE_SOURCE
    assert merged.categories["rushing"]["yards"] == 210
    assert merged.sources["rushing"] == MANUAL_SOURCE
    assert merged.games_played == 2


def test_manual_only_season_uses_manual_games_played():
    document = _document()
    index = ManualStatIndex.from_document(document)

    merged = merge_season("q1", 2024, None, index)

    assert merged is not None
    assert merged.sources == {"passing": MANUAL_SOURCE, "rushing": MANUAL_SOURCE}
    assert merged.games_played == 12


def test_merge_returns_none_without_any_data():
    document = _document(playerStatsByYear={})
    index = ManualStatIndex.from_document(document)
    assert merge_season("d1", 2024, None, index) is None


def test_player_index_resolves_unique_names_and_known_pids():
    document = _document()
    index = PlayerIndex(document.roster)

    assert index.resolve("QUARTER  back") == "q1"
    assert index.resolve("Twin Name") is None
    assert index.resolve("Twin Name", pid="d1") == "d1"
    assert index.resolve("Quarter Back", pid="unknown") == "q1"
