"""Fold a player's box score lines into season totals."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from ..core.categories import empty_totals, fold_fields
from ..core.models import DynastyDocument, PlayerRecord
from .attribution import credits_player, roster_side
from .box_score import locate_player_stats

logger = logging.getLogger(__name__)


@dataclass
class BoxScoreSeason:
    pid: str
    year: int
    categories: dict[str, dict[str, float]] = field(default_factory=dict)
    games_played: int = 0


def extract_box_score_season(
    document: DynastyDocument,
    player: PlayerRecord,
    year: int,
) -> BoxScoreSeason | None:
    """Aggregate every credited box score line for ``player`` in ``year``.

    Counting fields are summed and "long" fields keep the single largest
    value, following the category registry. Returns ``None`` when the player
    was not found in any credited game.
    """

    season = BoxScoreSeason(pid=player.pid, year=year)
    skipped = 0
    for game in document.games_for_year(year):
        if not credits_player(player, year, game, document.team_abbr):
            skipped += 1
            continue
        match = locate_player_stats(game, player.name, pid=player.pid, side=roster_side(game))
        if match is None:
            continue
        season.games_played += 1
        for category, line in match.canonical().items():
            totals = season.categories.setdefault(category, empty_totals(category))
            fold_fields(totals, line, category)

    if skipped:
        logger.debug("Skipped %s uncredited games for %s in %s", skipped, player.name, year)
    if season.games_played == 0:
        return None
    return season
