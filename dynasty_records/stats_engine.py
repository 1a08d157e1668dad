"""
Leaderboard stat definitions and the derived-metric dispatcher.

STAT_CATEGORIES lists every leaderboard category, the statistics shown for it
and the minimum volume a player needs before a rate stat is ranked. The
StatsEngine applies the calculation functions from the ``stats`` package to a
category frame so every derived column exists before ranking.
"""

from __future__ import annotations

from dataclasses import dataclass
import importlib
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

import polars as pl

logger = logging.getLogger(__name__)


class UnknownStatError(ValueError):
    """Raised when a category or stat key is not defined."""


@dataclass(frozen=True)
class Threshold:
    career: float
    season: float


@dataclass(frozen=True)
class StatDefinition:
    key: str
    label: str
    abbr: str
    field: Optional[str] = None
    calculated: bool = False
    min_att: Optional[Threshold] = None
    min_yds: Optional[Threshold] = None
    format: str = "count"
    lower_is_better: bool = False

    @property
    def column(self) -> str:
        """Frame column holding this stat's value."""
        return self.field or self.key


@dataclass(frozen=True)
class LeaderboardCategory:
    key: str
    name: str
    stats: Tuple[StatDefinition, ...]
    note: Optional[str] = None
    attempts_column: Optional[str] = None

    def volume_column(self, stat: StatDefinition) -> Optional[str]:
        """Column compared against the stat's minimum volume."""
        if stat.min_yds is not None:
            return "yards"
        return self.attempts_column

    def get(self, key: str) -> StatDefinition:
        for stat in self.stats:
            if stat.key == key:
                return stat
        raise UnknownStatError(f"Unknown stat '{key}' for category '{self.key}'")


_PASSING_MIN = Threshold(career=150, season=50)
_RETURN_MIN = Threshold(career=20, season=5)


def _returns(key: str, name: str, prefix: str) -> LeaderboardCategory:
    return LeaderboardCategory(
        key=key,
        name=name,
        note="Rate stats require minimum 20 returns (career) / 5 returns (season)",
        attempts_column="returns",
        stats=(
            StatDefinition("returns", name, "RET", field="returns"),
            StatDefinition("yards", f"{prefix} Yards", "YDS", field="yards"),
            StatDefinition("avg", "Yards/Return", "AVG", calculated=True, min_att=_RETURN_MIN, format="avg"),
            StatDefinition("tds", f"{prefix} TDs", "TD", field="touchdowns"),
        ),
    )


STAT_CATEGORIES: Dict[str, LeaderboardCategory] = {
    category.key: category
    for category in (
        LeaderboardCategory(
            key="passing",
            name="Passing",
            note="Rate stats require minimum 150 pass attempts (career) / 50 attempts (season)",
            attempts_column="attempts",
            stats=(
                StatDefinition("completions", "Completions", "CMP", field="completions"),
                StatDefinition("attempts", "Pass Attempts", "ATT", field="attempts"),
                StatDefinition("comp_pct", "Completion %", "CMP%", calculated=True, min_att=_PASSING_MIN, format="pct"),
                StatDefinition("yards", "Passing Yards", "YDS", field="yards"),
                StatDefinition("ypa", "Yards/Attempt", "Y/A", calculated=True, min_att=_PASSING_MIN, format="avg"),
                StatDefinition("aypa", "Adj. Yards/Attempt", "AY/A", calculated=True, min_att=_PASSING_MIN, format="avg"),
                StatDefinition("tds", "Passing TDs", "TD", field="touchdowns"),
                StatDefinition("ints", "Interceptions", "INT", field="interceptions", lower_is_better=True),
                StatDefinition("rating", "Passer Rating", "RTG", calculated=True, min_att=_PASSING_MIN, format="rating"),
                StatDefinition("ypg", "Yards/Game", "Y/G", calculated=True, min_att=_PASSING_MIN, format="avg"),
                StatDefinition("td_pct", "TD %", "TD%", calculated=True, min_att=_PASSING_MIN, format="pct"),
                StatDefinition("int_pct", "INT %", "INT%", calculated=True, min_att=_PASSING_MIN, format="pct", lower_is_better=True),
            ),
        ),
        LeaderboardCategory(
            key="rushing",
            name="Rushing",
            note="Rate stats require minimum 100 rush attempts (career) / 25 attempts (season)",
            attempts_column="carries",
            stats=(
                StatDefinition("attempts", "Rush Attempts", "ATT", field="carries"),
                StatDefinition("yards", "Rush Yards", "YDS", field="yards"),
                StatDefinition("ypc", "Yards/Carry", "Y/C", calculated=True, min_att=Threshold(100, 25), format="avg"),
                StatDefinition("tds", "Rush TDs", "TD", field="touchdowns"),
            ),
        ),
        LeaderboardCategory(
            key="receiving",
            name="Receiving",
            note="Rate stats require minimum 50 receptions (career) / 10 receptions (season)",
            attempts_column="receptions",
            stats=(
                StatDefinition("receptions", "Receptions", "REC", field="receptions"),
                StatDefinition("yards", "Receiving Yards", "YDS", field="yards"),
                StatDefinition("ypr", "Yards/Reception", "Y/R", calculated=True, min_att=Threshold(50, 10), format="avg"),
                StatDefinition("tds", "Receiving TDs", "TD", field="touchdowns"),
            ),
        ),
        LeaderboardCategory(
            key="scrimmage",
            name="Scrimmage",
            note="Combined rushing and receiving stats",
            attempts_column="plays",
            stats=(
                StatDefinition("plays", "Scrimmage Plays", "PLY", calculated=True),
                StatDefinition("yards", "Scrimmage Yards", "YDS", calculated=True),
                StatDefinition("tds", "Scrimmage TDs", "TD", calculated=True),
            ),
        ),
        LeaderboardCategory(
            key="all_purpose",
            name="All-Purpose",
            note="Rate stats require minimum 1,500 yards (career) / 300 yards (season)",
            attempts_column="plays",
            stats=(
                StatDefinition("plays", "All-Purpose Plays", "PLY", calculated=True),
                StatDefinition("yards", "All-Purpose Yards", "YDS", calculated=True),
                StatDefinition("ypp", "Yards/Play", "Y/P", calculated=True, min_yds=Threshold(1500, 300), format="avg"),
                StatDefinition("tds", "All-Purpose TDs", "TD", calculated=True),
            ),
        ),
        LeaderboardCategory(
            key="defense",
            name="Defensive",
            stats=(
                StatDefinition("solo_tackles", "Solo Tackles", "SOLO", field="solo_tackles"),
                StatDefinition("ast_tackles", "Assisted Tackles", "AST", field="assisted_tackles"),
                StatDefinition("total_tackles", "Total Tackles", "TOT", calculated=True),
                StatDefinition("tfl", "Tackles for Loss", "TFL", field="tackles_for_loss"),
                StatDefinition("sacks", "Sacks", "SCK", field="sacks"),
                StatDefinition("ints", "Interceptions", "INT", field="interceptions"),
                StatDefinition("int_yards", "INT Return Yards", "YDS", field="int_return_yards"),
                StatDefinition("def_tds", "Defensive TDs", "TD", field="touchdowns"),
                StatDefinition("pdef", "Passes Defensed", "PD", field="deflections"),
                StatDefinition("ff", "Forced Fumbles", "FF", field="forced_fumbles"),
                StatDefinition("blocks", "Blocks", "BLK", field="blocks"),
                StatDefinition("safeties", "Safeties", "SAF", field="safeties"),
            ),
        ),
        LeaderboardCategory(
            key="kicking",
            name="Kicking",
            note="FG% requires minimum 25 attempts (career) / 5 attempts (season)",
            attempts_column="fg_attempts",
            stats=(
                StatDefinition("xpa", "XP Attempted", "XPA", field="xp_attempts"),
                StatDefinition("xpm", "XP Made", "XPM", field="xp_made"),
                StatDefinition("fga", "FG Attempted", "FGA", field="fg_attempts"),
                StatDefinition("fgm", "FG Made", "FGM", field="fg_made"),
                StatDefinition("fg_pct", "FG %", "FG%", calculated=True, min_att=Threshold(25, 5), format="pct"),
            ),
        ),
        LeaderboardCategory(
            key="punting",
            name="Punting",
            note="Rate stats require minimum 50 punts (career) / 10 punts (season)",
            attempts_column="punts",
            stats=(
                StatDefinition("punts", "Punts", "P", field="punts"),
                StatDefinition("yards", "Punt Yards", "YDS", field="yards"),
                StatDefinition("ypp", "Yards/Punt", "Y/P", calculated=True, min_att=Threshold(50, 10), format="avg"),
            ),
        ),
        _returns("kick_return", "Kick Returns", "KR"),
        _returns("punt_return", "Punt Returns", "PR"),
    )
}


class StatsEngine:
    """
    Applies derived-metric calculations to leaderboard category frames.

    Examples:
        >>> engine = StatsEngine()
        >>> passing = engine.calculate("passing", passing_frame)
        >>> passing.select("pid", "rating")
    """

    # Map category names to the calculation functions applied, in order
    CALCULATIONS: Dict[str, List[Tuple[str, str]]] = {
        "passing": [
            ("dynasty_records.stats.passing", "calculate_completion_percentage"),
            ("dynasty_records.stats.passing", "calculate_yards_per_attempt"),
            ("dynasty_records.stats.passing", "calculate_adjusted_yards_per_attempt"),
            ("dynasty_records.stats.passing", "calculate_passer_rating"),
            ("dynasty_records.stats.passing", "calculate_yards_per_game"),
            ("dynasty_records.stats.passing", "calculate_touchdown_and_interception_rates"),
        ],
        "rushing": [
            ("dynasty_records.stats.rushing", "calculate_yards_per_carry"),
        ],
        "receiving": [
            ("dynasty_records.stats.receiving", "calculate_yards_per_reception"),
        ],
        "scrimmage": [
            ("dynasty_records.stats.combined", "drop_inactive_rows"),
        ],
        "all_purpose": [
            ("dynasty_records.stats.combined", "drop_inactive_rows"),
            ("dynasty_records.stats.combined", "calculate_yards_per_play"),
        ],
        "defense": [
            ("dynasty_records.stats.defense", "calculate_total_tackles"),
        ],
        "kicking": [
            ("dynasty_records.stats.specialteams", "calculate_field_goal_percentage"),
        ],
        "punting": [
            ("dynasty_records.stats.specialteams", "calculate_punt_average"),
        ],
        "kick_return": [
            ("dynasty_records.stats.specialteams", "calculate_return_average"),
        ],
        "punt_return": [
            ("dynasty_records.stats.specialteams", "calculate_return_average"),
        ],
    }

    def __init__(self) -> None:
        self._function_cache: Dict[str, Callable[[pl.DataFrame], pl.DataFrame]] = {}

    def calculate(self, category: str, df: pl.DataFrame) -> pl.DataFrame:
        """
        Add every derived column for ``category`` to ``df``.

        Args:
            category: Leaderboard category key (see STAT_CATEGORIES)
            df: Combined season or career frame for the category

        Returns:
            DataFrame with derived columns added

        Raises:
            UnknownStatError: If the category is not defined
        """
        if category not in self.CALCULATIONS:
            available = ", ".join(sorted(self.CALCULATIONS))
            raise UnknownStatError(f"Unknown category '{category}'. Available categories: {available}")

        result = df
        for module_name, function_name in self.CALCULATIONS[category]:
            calc_func = self._get_function(module_name, function_name)
            result = calc_func(result)
        logger.debug("Applied %s calculations to %s rows of %s", len(self.CALCULATIONS[category]), result.height, category)
        return result

    def _get_function(self, module_name: str, function_name: str) -> Callable[[pl.DataFrame], pl.DataFrame]:
        """
        Get a calculation function from the stats modules.

        Uses caching to avoid repeated imports.
        """
        cache_key = f"{module_name}.{function_name}"

        if cache_key in self._function_cache:
            return self._function_cache[cache_key]

        module = importlib.import_module(module_name)
        func = getattr(module, function_name)

        self._function_cache[cache_key] = func
        return func

    def list_categories(self) -> List[str]:
        return list(STAT_CATEGORIES)

    def get_stat_info(self, category: str, key: str) -> Dict[str, Any]:
        """
        Get the definition of a leaderboard statistic as a dictionary.

        Examples:
            >>> engine.get_stat_info("kicking", "fg_pct")["format"]
            'pct'
        """
        stat = get_stat_definition(category, key)
        return {
            "key": stat.key,
            "label": stat.label,
            "abbr": stat.abbr,
            "calculated": stat.calculated,
            "format": stat.format,
            "lower_is_better": stat.lower_is_better,
        }


def get_category(category: str) -> LeaderboardCategory:
    try:
        return STAT_CATEGORIES[category]
    except KeyError:
        raise UnknownStatError(f"Unknown category '{category}'") from None


def get_stat_definition(category: str, key: str) -> StatDefinition:
    return get_category(category).get(key)
