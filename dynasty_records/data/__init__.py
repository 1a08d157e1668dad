"""Box score extraction, attribution and source merging for dynasty documents."""

from __future__ import annotations

from .attribution import credits_player, roster_side, roster_team_for_game, team_for_year
from .box_score import (
    GameLogEntry,
    PlayerGameMatch,
    discover_player_years,
    locate_player_stats,
    player_game_log,
)
from .dynasty_file import DynastyFileError, load_dynasty
from .manual_stats import ManualBlock, ManualStatIndex, merge_season
from .player_index import PlayerIndex
from .season_stats import BoxScoreSeason, extract_box_score_season

__all__ = [
    # Attribution
    "credits_player",
    "roster_side",
    "roster_team_for_game",
    "team_for_year",
    # Box scores
    "GameLogEntry",
    "PlayerGameMatch",
    "discover_player_years",
    "locate_player_stats",
    "player_game_log",
    "BoxScoreSeason",
    "extract_box_score_season",
    # Manual stats
    "ManualBlock",
    "ManualStatIndex",
    "merge_season",
    "PlayerIndex",
    # Files
    "DynastyFileError",
    "load_dynasty",
]
