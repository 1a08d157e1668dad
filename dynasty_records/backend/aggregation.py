"""Cross-season combination of merged player seasons."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging

import polars as pl

from ..core.categories import CATEGORY_ORDER, CATEGORY_SCHEMAS, fields_for, get_schema
from ..core.models import DisplayMode, SeasonAggregate

logger = logging.getLogger(__name__)

_KEY_COLUMNS = ("pid", "year", "years")


def category_frame(aggregates: Iterable[SeasonAggregate], category: str) -> pl.DataFrame:
    """Build one row per player season that has ``category``.

    Columns are ``pid``, ``year``, ``games_played`` and every canonical field
    declared for the category (as floats). An empty input still yields the
    full schema so downstream calculations can run unchanged.
    """

    field_names = get_schema(category).field_names
    schema: dict[str, pl.DataType] = {"pid": pl.Utf8, "year": pl.Int64, "games_played": pl.Int64}
    schema.update({name: pl.Float64 for name in field_names})

    rows = []
    for aggregate in aggregates:
        totals = aggregate.categories.get(category)
        if totals is None:
            continue
        row: dict[str, object] = {
            "pid": aggregate.pid,
            "year": aggregate.year,
            "games_played": aggregate.games_played,
        }
        for name in field_names:
            row[name] = float(totals.get(name, 0.0))
        rows.append(row)

    if not rows:
        return pl.DataFrame(schema=schema)
    return pl.DataFrame(rows, schema=schema).sort(["pid", "year"])


def _value_columns(frame: pl.DataFrame) -> list[str]:
    return [name for name in frame.columns if name not in _KEY_COLUMNS]


def combine_seasons(
    frame: pl.DataFrame,
    category: str,
    mode: DisplayMode | str,
    *,
    remax_long_fields: bool = False,
) -> pl.DataFrame:
    """
    Collapse a per-season frame into leaderboard rows for ``mode``.

    Season mode keeps one row per player season and adds ``years=[year]``.
    Career mode sums every value column per player and collects the
    contributing seasons in ascending order. Max-rule fields are summed as
    well unless ``remax_long_fields`` is set, in which case the career value
    is the best single season.

    Args:
        frame: Frame produced by ``category_frame`` or a combined builder
        category: Category the frame belongs to (selects the max-rule fields)
        mode: ``career`` or ``season``

    Returns:
        DataFrame ordered by ``pid`` (and ``year`` in season mode)
    """
    display_mode = DisplayMode.parse(mode)
    if display_mode is DisplayMode.SEASON:
        return frame.sort(["pid", "year"]).with_columns(
            pl.concat_list(pl.col("year")).alias("years")
        )

    max_fields: Sequence[str] = ()
    if remax_long_fields and category in CATEGORY_SCHEMAS:
        max_fields = fields_for(category).max_fields

    aggregations = [
        pl.col(name).max() if name in max_fields else pl.col(name).sum()
        for name in _value_columns(frame)
    ]
    combined = (
        frame.sort(["pid", "year"])
        .group_by("pid", maintain_order=True)
        .agg(*aggregations, pl.col("year").unique().sort().alias("years"))
        .with_columns(pl.lit(None, dtype=pl.Int64).alias("year"))
        .sort("pid")
    )
    logger.debug("Combined %s %s seasons into %s careers", frame.height, category, combined.height)
    return combined


def combine_category(
    aggregates: Iterable[SeasonAggregate],
    category: str,
    mode: DisplayMode | str,
    *,
    remax_long_fields: bool = False,
) -> pl.DataFrame:
    return combine_seasons(
        category_frame(aggregates, category),
        category,
        mode,
        remax_long_fields=remax_long_fields,
    )


def career_totals(aggregates: Iterable[SeasonAggregate]) -> dict[str, dict[str, float]]:
    """Career block for a single player's profile.

    Counting fields are summed across seasons while "long" fields keep the best
    single-season value, matching how a player page reports career longs.
    """

    seasons = list(aggregates)
    totals: dict[str, dict[str, float]] = {}
    for category in CATEGORY_ORDER:
        frame = category_frame(seasons, category)
        if frame.is_empty():
            continue
        rules = fields_for(category)
        row = frame.select(
            *[pl.col(name).sum() for name in rules.sum_fields],
            *[pl.col(name).max() for name in rules.max_fields],
        ).row(0, named=True)
        totals[category] = {name: float(row[name]) for name in get_schema(category).field_names}
    return totals
