"""Decide which games count toward a player's season.

Players move between rosters over a dynasty, and the user's own team can
change too. A game is credited to a player for a year only when the roster
scanned in that game is the team the player belonged to that year; otherwise
the player was on the other sideline and the line belongs to someone else's
season.
"""

from __future__ import annotations

from ..core.models import GameRecord, PlayerRecord, normalize_team

_ROSTER_SIDES = {"home": "home", "neutral": "home", "away": "away", "road": "away"}


def team_for_year(player: PlayerRecord, year: int, default_team: str | None = None) -> str:
    """Return the player's team abbreviation for ``year``.

    Falls back to the player's current team, then to the dynasty's team.
    """

    team = player.teams_by_year.get(year) or player.team or default_team
    return normalize_team(team)


def roster_team_for_game(game: GameRecord, fallback_team: str | None = None) -> str:
    """Return the tracked roster whose box score lines are being scanned.

    Games entered without ``userTeam`` scan the roster the player was on, so
    callers pass the player's team for the year as ``fallback_team``.
    """

    return normalize_team(game.user_team or fallback_team)


def involves_roster(game: GameRecord, roster_team: str) -> bool:
    if game.is_cpu:
        return False
    if game.opponent:
        return True
    return roster_team in {normalize_team(game.team1), normalize_team(game.team2)}


def credits_player(
    player: PlayerRecord,
    year: int,
    game: GameRecord,
    default_team: str | None = None,
) -> bool:
    """Return ``True`` when ``game`` may contribute to ``player``'s ``year`` totals."""

    if game.year != year or game.box_score is None:
        return False
    player_team = team_for_year(player, year, default_team)
    roster_team = roster_team_for_game(game, player_team)
    if not roster_team or not involves_roster(game, roster_team):
        return False
    return player_team == roster_team


def roster_side(game: GameRecord) -> str | None:
    """Box score side holding the tracked roster, when the venue says so.

    Neutral-site sheets list the tracked roster on the home side.
    """

    return _ROSTER_SIDES.get((game.location or "").strip().lower())
