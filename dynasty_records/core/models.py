"""Typed views over a dynasty document.

The persistence layer hands the engine a single nested document per dynasty
(camelCase keys, loosely typed values). The dataclasses below parse that
document once so the rest of the engine can work with predictable types.
Numeric reads never raise: anything that cannot be parsed becomes ``0.0``.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field
from enum import Enum
import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

BOX_SCORE_SIDES = ("home", "away")


class PlayerNotFoundError(RuntimeError):
    """Raised when no roster player matches the requested pid."""


class DisplayMode(str, Enum):
    """Career totals per player, or one row per player season."""

    CAREER = "career"
    SEASON = "season"

    @classmethod
    def parse(cls, value: "DisplayMode | str") -> "DisplayMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown display mode '{value}'; expected 'career' or 'season'") from None


def coerce_number(value: Any) -> float:
    """Return ``value`` as a float, or ``0.0`` when it is missing or malformed."""

    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip().replace(",", "")
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def normalize_name(value: Any) -> str:
    """Case-fold a display name and collapse its whitespace."""

    if value is None:
        return ""
    return _WHITESPACE.sub(" ", str(value)).strip().casefold()


def normalize_team(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip().upper()


def _parse_int(value: Any) -> int | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return int(float(value))
    except (TypeError, ValueError):
        logger.debug("Unable to parse integer value '%s'", value)
        return None


def _pid_key(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _first_non_empty(*values: Any) -> Any | None:
    for value in values:
        if value is None:
            continue
        if isinstance(value, str) and value.strip() == "":
            continue
        return value
    return None


def _year_keyed(mapping: Any) -> dict[int, Any]:
    """Normalise ``{"2024": ..., 2025: ...}`` style maps to integer keys."""

    if not isinstance(mapping, Mapping):
        return {}
    result: dict[int, Any] = {}
    for key, value in mapping.items():
        year = _parse_int(key)
        if year is None:
            continue
        result[year] = value
    return result


@dataclass(frozen=True)
class GameRecord:
    """One played game with its optional box score."""

    id: str | None
    year: int | None
    week: int
    opponent: str | None
    team1: str | None
    team2: str | None
    user_team: str | None
    location: str | None
    team_score: float
    opponent_score: float
    result: str | None
    is_cpu_game: bool = False
    box_score: Mapping[str, Any] | None = None

    @property
    def is_cpu(self) -> bool:
        """CPU-vs-CPU games never involve the tracked roster."""

        if self.is_cpu_game:
            return True
        return not self.opponent and bool(self.team1) and bool(self.team2)

    def side(self, name: str) -> Mapping[str, Any]:
        if not isinstance(self.box_score, Mapping):
            return {}
        value = self.box_score.get(name)
        return value if isinstance(value, Mapping) else {}

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "GameRecord":
        box_score = row.get("boxScore")
        return cls(
            id=_pid_key(row.get("id")),
            year=_parse_int(row.get("year")),
            week=_parse_int(row.get("week")) or 0,
            opponent=_first_non_empty(row.get("opponent")),
            team1=_first_non_empty(row.get("team1")),
            team2=_first_non_empty(row.get("team2")),
            user_team=_first_non_empty(row.get("userTeam")),
            location=_first_non_empty(row.get("location")),
            team_score=coerce_number(row.get("teamScore")),
            opponent_score=coerce_number(row.get("opponentScore")),
            result=_first_non_empty(row.get("result")),
            is_cpu_game=bool(row.get("isCPUGame")),
            box_score=box_score if isinstance(box_score, Mapping) else None,
        )


@dataclass(frozen=True)
class PlayerRecord:
    """A roster player with the team history used for season attribution."""

    pid: str
    name: str
    team: str | None = None
    teams_by_year: Mapping[int, str] = field(default_factory=dict)
    is_honor_only: bool = False
    stats_by_year: Mapping[int, Mapping[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "PlayerRecord":
        name = str(_first_non_empty(row.get("name"), row.get("playerName")) or "")
        pid = _pid_key(row.get("pid")) or name
        teams = {
            year: str(team)
            for year, team in _year_keyed(row.get("teamsByYear")).items()
            if _first_non_empty(team) is not None
        }
        stats = {
            year: block
            for year, block in _year_keyed(row.get("statsByYear")).items()
            if isinstance(block, Mapping)
        }
        return cls(
            pid=pid,
            name=name,
            team=_first_non_empty(row.get("team")),
            teams_by_year=teams,
            is_honor_only=bool(row.get("isHonorOnly")),
            stats_by_year=stats,
        )


@dataclass(frozen=True)
class DynastyDocument:
    """Everything the engine reads from one dynasty."""

    team_abbr: str | None
    current_year: int | None
    games: tuple[GameRecord, ...]
    players: tuple[PlayerRecord, ...]
    manual_stats: Mapping[int, Mapping[str, Any]] = field(default_factory=dict)

    @property
    def roster(self) -> tuple[PlayerRecord, ...]:
        """Players eligible for stats (honor-only entries are excluded)."""

        return tuple(player for player in self.players if not player.is_honor_only)

    def games_for_year(self, year: int) -> list[GameRecord]:
        return [game for game in self.games if game.year == year]

    def get_player(self, pid: Any) -> PlayerRecord:
        key = _pid_key(pid)
        for player in self.players:
            if player.pid == key:
                return player
        raise PlayerNotFoundError(f"No roster player with pid {pid!r}")

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "DynastyDocument":
        games = tuple(
            GameRecord.from_dict(row) for row in _iter_mappings(payload.get("games"))
        )
        players = tuple(
            PlayerRecord.from_dict(row) for row in _iter_mappings(payload.get("players"))
        )
        team_abbr = _first_non_empty(
            payload.get("teamAbbr"),
            payload.get("userTeam"),
            payload.get("teamName"),
        )
        return cls(
            team_abbr=str(team_abbr) if team_abbr is not None else None,
            current_year=_parse_int(payload.get("currentYear")),
            games=games,
            players=players,
            manual_stats=_year_keyed(payload.get("playerStatsByYear")),
        )


@dataclass
class SeasonAggregate:
    """One player's merged raw stats for one season."""

    pid: str
    year: int
    categories: dict[str, dict[str, float]] = field(default_factory=dict)
    sources: dict[str, str] = field(default_factory=dict)
    games_played: int = 0


@dataclass(frozen=True)
class LeaderboardEntry:
    """A single ranked row. Rebuilt on every computation, never persisted."""

    pid: str
    name: str
    team: str | None
    value: float | None
    year: int | None = None
    years: tuple[int, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["years"] = list(self.years)
        return payload


def _iter_mappings(rows: Any) -> Iterable[Mapping[str, Any]]:
    if not isinstance(rows, (list, tuple)):
        return ()
    return [row for row in rows if isinstance(row, Mapping)]
