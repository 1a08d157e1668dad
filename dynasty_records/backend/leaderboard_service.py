"""Build ranked dynasty leaderboards from merged player seasons."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Dict, List, Optional

import polars as pl

from ..config import LeaderboardConfig
from ..core.models import (
    DisplayMode,
    DynastyDocument,
    LeaderboardEntry,
    PlayerRecord,
    SeasonAggregate,
)
from ..data.attribution import team_for_year
from ..data.box_score import discover_player_years
from ..data.manual_stats import ManualStatIndex, merge_season
from ..data.player_index import PlayerIndex
from ..data.season_stats import extract_box_score_season
from ..stats.combined import build_all_purpose_frame, build_scrimmage_frame
from ..stats_engine import STAT_CATEGORIES, StatDefinition, StatsEngine, get_category
from .aggregation import category_frame, combine_seasons

logger = logging.getLogger(__name__)

Leaderboards = Dict[str, Dict[str, List[LeaderboardEntry]]]


def rank_leaderboard(
    frame: pl.DataFrame,
    definition: StatDefinition,
    *,
    category: str,
    mode: DisplayMode | str,
    config: LeaderboardConfig,
) -> pl.DataFrame:
    """
    Rank the rows of a calculated category frame for one statistic.

    Rows below the mode's minimum volume get a null value and are dropped,
    as are non-finite values. Ties keep the incoming (pid, year) order.

    Args:
        frame: Combined and calculated frame for ``category``
        definition: Statistic to rank
        category: Leaderboard category key
        mode: ``career`` or ``season``
        config: Thresholds and leaderboard sizes

    Returns:
        At most ``top_n`` rows with an added ``value`` column
    """
    column = definition.column
    if column not in frame.columns:
        logger.debug("Column '%s' missing from %s frame", column, category)
        return frame.head(0).with_columns(pl.lit(None, dtype=pl.Float64).alias("value"))

    value = pl.col(column).cast(pl.Float64)
    threshold = config.threshold_for(category, definition, mode)
    volume = get_category(category).volume_column(definition)
    if threshold is not None and volume is not None:
        value = pl.when(pl.col(volume) >= threshold).then(value).otherwise(None)

    return (
        frame.with_columns(value.alias("value"))
        .filter(pl.col("value").is_not_null() & pl.col("value").is_finite())
        .sort("value", descending=not definition.lower_is_better, maintain_order=True)
        .head(config.top_n_for(category, definition))
    )


class LeaderboardService:
    """
    Computes every leaderboard of a dynasty for a display mode.

    Season aggregates are built once per service and leaderboards are memoised
    per mode. Call ``invalidate`` after the underlying document changes.

    Examples:
        >>> service = LeaderboardService(document)
        >>> boards = service.build("career")
        >>> boards["passing"]["rating"][0].name
    """

    def __init__(
        self,
        document: DynastyDocument,
        config: Optional[LeaderboardConfig] = None,
        *,
        engine: Optional[StatsEngine] = None,
        cache_results: bool = True,
    ) -> None:
        self._document = document
        self._config = config or LeaderboardConfig()
        self._engine = engine or StatsEngine()
        self._cache_results = cache_results
        self._players: Dict[str, PlayerRecord] = {player.pid: player for player in document.roster}
        self._aggregates: Optional[List[SeasonAggregate]] = None
        self._cache: Dict[DisplayMode, Leaderboards] = {}

    @property
    def document(self) -> DynastyDocument:
        return self._document

    @property
    def config(self) -> LeaderboardConfig:
        return self._config

    def invalidate(self) -> None:
        self._aggregates = None
        self._cache.clear()

    def season_aggregates(self) -> List[SeasonAggregate]:
        """Merged box score and manual totals for every roster player season."""

        if self._aggregates is not None:
            return self._aggregates

        manual = ManualStatIndex.from_document(self._document, PlayerIndex(self._document.roster))
        aggregates: List[SeasonAggregate] = []
        for player in self._document.roster:
            years = set(discover_player_years(self._document.games, player.name, player.pid))
            years.update(manual.years_for(player.pid))
            for year in sorted(years):
                box = extract_box_score_season(self._document, player, year)
                aggregate = merge_season(player.pid, year, box, manual)
                if aggregate is not None:
                    aggregates.append(aggregate)

        logger.info(
            "Built %s season aggregates for %s roster players",
            len(aggregates),
            len(self._players),
        )
        self._aggregates = aggregates
        return aggregates

    def player_seasons(self, pid: Any) -> List[SeasonAggregate]:
        player = self._document.get_player(pid)
        return [aggregate for aggregate in self.season_aggregates() if aggregate.pid == player.pid]

    def category_frame(self, category: str, mode: DisplayMode | str) -> pl.DataFrame:
        """Combined and calculated frame for one leaderboard category."""

        display_mode = DisplayMode.parse(mode)
        aggregates = self.season_aggregates()
        if category == "scrimmage":
            seasons = build_scrimmage_frame(
                category_frame(aggregates, "rushing"),
                category_frame(aggregates, "receiving"),
            )
        elif category == "all_purpose":
            seasons = build_all_purpose_frame(
                category_frame(aggregates, "rushing"),
                category_frame(aggregates, "receiving"),
                category_frame(aggregates, "kick_return"),
                category_frame(aggregates, "punt_return"),
            )
        else:
            seasons = category_frame(aggregates, get_category(category).key)

        combined = combine_seasons(
            seasons,
            category,
            display_mode,
            remax_long_fields=self._config.remax_long_fields,
        )
        return self._engine.calculate(category, combined)

    def build(self, mode: DisplayMode | str) -> Leaderboards:
        """Return ``{category: {stat_key: [LeaderboardEntry, ...]}}`` for ``mode``."""

        display_mode = DisplayMode.parse(mode)
        if self._cache_results and display_mode in self._cache:
            logger.info("Using cached %s leaderboards", display_mode.value)
            return self._cache[display_mode]

        leaderboards: Leaderboards = {}
        for key, category in STAT_CATEGORIES.items():
            frame = self.category_frame(key, display_mode)
            leaderboards[key] = {
                stat.key: self._entries(
                    rank_leaderboard(
                        frame,
                        stat,
                        category=key,
                        mode=display_mode,
                        config=self._config,
                    ),
                    display_mode,
                )
                for stat in category.stats
            }

        logger.info("Built %s leaderboards for %s categories", display_mode.value, len(leaderboards))
        if self._cache_results:
            self._cache[display_mode] = leaderboards
        return leaderboards

    def _entries(self, ranked: pl.DataFrame, mode: DisplayMode) -> List[LeaderboardEntry]:
        entries: List[LeaderboardEntry] = []
        for row in ranked.iter_rows(named=True):
            player = self._players.get(row["pid"])
            if player is None:
                continue
            year = row.get("year") if mode is DisplayMode.SEASON else None
            if year is not None:
                team = team_for_year(player, year, self._document.team_abbr) or None
            else:
                team = player.team or self._document.team_abbr
            entries.append(
                LeaderboardEntry(
                    pid=player.pid,
                    name=player.name,
                    team=team,
                    value=row["value"],
                    year=year,
                    years=tuple(row.get("years") or ()),
                )
            )
        return entries

    @classmethod
    def from_dict(
        cls,
        payload: Mapping[str, Any],
        config: Optional[LeaderboardConfig] = None,
    ) -> "LeaderboardService":
        return cls(DynastyDocument.from_dict(payload), config)


def build_leaderboards(
    document: DynastyDocument,
    mode: DisplayMode | str,
    config: Optional[LeaderboardConfig] = None,
) -> Leaderboards:
    """Compute every leaderboard for ``document`` in one call."""

    return LeaderboardService(document, config, cache_results=False).build(mode)
