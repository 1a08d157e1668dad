"""Locate a player's lines inside per-game box scores."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
import logging
from typing import Any

from ..core.categories import CATEGORY_SCHEMAS, translate_box_score
from ..core.models import (
    BOX_SCORE_SIDES,
    DynastyDocument,
    GameRecord,
    PlayerRecord,
    normalize_name,
)
from .attribution import roster_side, roster_team_for_game, team_for_year

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerGameMatch:
    """Every category line found for one player on one side of a box score."""

    side: str
    lines: Mapping[str, Mapping[str, Any]]

    def canonical(self) -> dict[str, dict[str, float]]:
        return {
            category: translate_box_score(category, line)
            for category, line in self.lines.items()
        }


@dataclass(frozen=True)
class GameLogEntry:
    """One game from the player's own perspective."""

    game_id: str | None
    week: int
    opponent: str | None
    result: str | None
    team_score: float
    opponent_score: float
    side: str
    stats: Mapping[str, Mapping[str, float]] = field(default_factory=dict)


def _entry_matches(entry: Mapping[str, Any], target: str, pid: str | None) -> bool:
    entry_pid = entry.get("pid")
    if pid is not None and entry_pid not in (None, ""):
        return str(entry_pid).strip() == pid
    return bool(target) and normalize_name(entry.get("playerName")) == target


def locate_player_stats(
    game: GameRecord,
    name: str,
    *,
    pid: str | None = None,
    side: str | None = None,
) -> PlayerGameMatch | None:
    """Find a player's category lines in ``game``.

    Sides are searched home first, then away, and the search stops at the
    first side with any match. When ``side`` is given only that side is read.
    """

    target = normalize_name(name)
    if not target and pid is None:
        return None

    sides = (side,) if side in BOX_SCORE_SIDES else BOX_SCORE_SIDES
    for side_name in sides:
        box = game.side(side_name)
        if not box:
            continue
        lines: dict[str, Mapping[str, Any]] = {}
        for schema in CATEGORY_SCHEMAS.values():
            rows = box.get(schema.document_key)
            if not isinstance(rows, list):
                continue
            for entry in rows:
                if isinstance(entry, Mapping) and _entry_matches(entry, target, pid):
                    lines[schema.name] = entry
                    break
        if lines:
            return PlayerGameMatch(side=side_name, lines=lines)
    return None


def discover_player_years(
    games: Iterable[GameRecord],
    name: str,
    pid: str | None = None,
) -> list[int]:
    """Return the years in which the player shows up in any box score."""

    years: set[int] = set()
    for game in games:
        if game.year is None or game.box_score is None or game.is_cpu:
            continue
        if game.year in years:
            continue
        if locate_player_stats(game, name, pid=pid) is not None:
            years.add(game.year)
    return sorted(years)


def _invert_result(result: str | None) -> str | None:
    if result is None:
        return None
    lowered = result.strip().lower()
    if lowered in ("w", "win"):
        return "L"
    if lowered in ("l", "loss"):
        return "W"
    return result


def player_game_log(
    document: DynastyDocument,
    player: PlayerRecord,
    year: int,
) -> list[GameLogEntry]:
    """Return the player's per-game lines for ``year`` ordered by week."""

    default_team = document.team_abbr
    games = sorted(
        (
            game
            for game in document.games_for_year(year)
            if game.box_score is not None and not game.is_cpu
        ),
        key=lambda game: game.week,
    )

    log: list[GameLogEntry] = []
    for game in games:
        match = locate_player_stats(game, player.name, pid=player.pid)
        if match is None:
            continue

        user_side = roster_side(game)
        if user_side is None:
            player_team = team_for_year(player, year, default_team)
            on_user_side = player_team == roster_team_for_game(game, player_team)
        else:
            on_user_side = match.side == user_side

        if on_user_side:
            entry = GameLogEntry(
                game_id=game.id,
                week=game.week,
                opponent=game.opponent,
                result=game.result,
                team_score=game.team_score,
                opponent_score=game.opponent_score,
                side=match.side,
                stats=match.canonical(),
            )
        else:
            entry = GameLogEntry(
                game_id=game.id,
                week=game.week,
                opponent=game.user_team or default_team,
                result=_invert_result(game.result),
                team_score=game.opponent_score,
                opponent_score=game.team_score,
                side=match.side,
                stats=match.canonical(),
            )
        log.append(entry)

    logger.debug("Built %s game log rows for %s in %s", len(log), player.name, year)
    return log
