"""Manually entered season stats and their merge with box score totals.

Source priority is decided per category: when box scores produced any line
for a category in a season, that category comes entirely from the box scores.
Manual entries only fill categories the box scores never saw. Fields from the
two sources are never blended, so rate stats always divide numbers that came
from the same place.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from typing import Any

from ..core.categories import CATEGORY_ORDER, category_for_document_key, translate_manual
from ..core.models import DynastyDocument, SeasonAggregate, coerce_number
from .player_index import PlayerIndex
from .season_stats import BoxScoreSeason

logger = logging.getLogger(__name__)

BOX_SCORE_SOURCE = "box_score"
MANUAL_SOURCE = "manual"


@dataclass(frozen=True)
class ManualBlock:
    fields: Mapping[str, float]
    games_played: int = 0


def _games_played(entry: Mapping[str, Any]) -> int:
    return int(coerce_number(entry.get("gamesPlayed", entry.get("gp"))))


class ManualStatIndex:
    """Manual blocks keyed by ``(pid, year, category)``."""

    def __init__(self, blocks: Mapping[tuple[str, int, str], ManualBlock] | None = None) -> None:
        self._blocks: dict[tuple[str, int, str], ManualBlock] = dict(blocks or {})

    def __len__(self) -> int:
        return len(self._blocks)

    def get(self, pid: str, year: int, category: str) -> ManualBlock | None:
        return self._blocks.get((pid, year, category))

    def years_for(self, pid: str) -> set[int]:
        return {year for (block_pid, year, _), _block in self._blocks.items() if block_pid == pid}

    def games_played(self, pid: str, year: int) -> int:
        counts = [
            block.games_played
            for (block_pid, block_year, _), block in self._blocks.items()
            if block_pid == pid and block_year == year
        ]
        return max(counts, default=0)

    @classmethod
    def from_document(
        cls,
        document: DynastyDocument,
        player_index: PlayerIndex | None = None,
    ) -> "ManualStatIndex":
        """Index the dynasty's stat sheets plus each player's own season blocks.

        Sheet rows take precedence; a player's ``statsByYear`` block only fills
        categories the sheet does not cover for that season.
        """

        index = player_index or PlayerIndex(document.roster)
        blocks: dict[tuple[str, int, str], ManualBlock] = {}

        for year, sheet in document.manual_stats.items():
            if not isinstance(sheet, Mapping):
                continue
            for document_key, rows in sheet.items():
                category = category_for_document_key(document_key)
                if category is None or not isinstance(rows, list):
                    continue
                for entry in rows:
                    if not isinstance(entry, Mapping):
                        continue
                    name = entry.get("name", entry.get("playerName"))
                    pid = index.resolve(name, pid=entry.get("pid"))
                    if pid is None:
                        logger.debug("No roster match for manual %s entry '%s' (%s)", category, name, year)
                        continue
                    key = (pid, year, category)
                    if key in blocks:
                        logger.debug("Duplicate manual %s entry for %s in %s; keeping first", category, pid, year)
                        continue
                    blocks[key] = ManualBlock(translate_manual(category, entry), _games_played(entry))

        for player in document.roster:
            for year, season in player.stats_by_year.items():
                games = _games_played(season)
                for document_key, block in season.items():
                    category = category_for_document_key(document_key)
                    if category is None or not isinstance(block, Mapping):
                        continue
                    blocks.setdefault(
                        (player.pid, year, category),
                        ManualBlock(translate_manual(category, block), games),
                    )

        logger.debug("Indexed %s manual stat blocks", len(blocks))
        return cls(blocks)


def merge_season(
    pid: str,
    year: int,
    box: BoxScoreSeason | None,
    manual: ManualStatIndex,
) -> SeasonAggregate | None:
    """Combine box score and manual totals for one player season."""

    aggregate = SeasonAggregate(pid=pid, year=year)
    box_categories = box.categories if box is not None else {}

    for category in CATEGORY_ORDER:
        if category in box_categories:
            aggregate.categories[category] = dict(box_categories[category])
            aggregate.sources[category] = BOX_SCORE_SOURCE
            continue
        block = manual.get(pid, year, category)
        if block is not None:
            aggregate.categories[category] = dict(block.fields)
            aggregate.sources[category] = MANUAL_SOURCE

    if not aggregate.categories:
        return None
    if box is not None and box.games_played:
        aggregate.games_played = box.games_played
    else:
        aggregate.games_played = manual.games_played(pid, year)
    return aggregate
