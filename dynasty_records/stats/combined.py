"""
Scrimmage and all-purpose totals.

These categories are never entered directly; they are rebuilt from the rushing,
receiving and return frames for every player season.
"""

import polars as pl

from .expressions import safe_ratio

_COMBINED_SCHEMA = {
    "pid": pl.Utf8,
    "year": pl.Int64,
    "plays": pl.Float64,
    "yards": pl.Float64,
    "tds": pl.Float64,
}


def _combine(parts: list[tuple[pl.DataFrame, str]]) -> pl.DataFrame:
    selected = [
        frame.select(
            pl.col("pid").cast(pl.Utf8),
            pl.col("year").cast(pl.Int64),
            pl.col(plays_column).cast(pl.Float64).alias("plays"),
            pl.col("yards").cast(pl.Float64),
            pl.col("touchdowns").cast(pl.Float64).alias("tds"),
        )
        for frame, plays_column in parts
    ]
    stacked = pl.concat(selected) if selected else pl.DataFrame(schema=_COMBINED_SCHEMA)
    return (
        stacked.group_by(["pid", "year"])
        .agg(pl.col("plays").sum(), pl.col("yards").sum(), pl.col("tds").sum())
        .sort(["pid", "year"])
    )


def build_scrimmage_frame(rushing: pl.DataFrame, receiving: pl.DataFrame) -> pl.DataFrame:
    """
    Build per-season scrimmage totals.

    Plays = Carries + Receptions, Yards = Rushing + Receiving Yards,
    TDs = Rushing + Receiving TDs.

    Args:
        rushing: Season rushing frame (pid, year, carries, yards, touchdowns)
        receiving: Season receiving frame (pid, year, receptions, yards, touchdowns)

    Returns:
        DataFrame with columns: pid, year, plays, yards, tds
    """
    return _combine([(rushing, "carries"), (receiving, "receptions")])


def build_all_purpose_frame(
    rushing: pl.DataFrame,
    receiving: pl.DataFrame,
    kick_return: pl.DataFrame,
    punt_return: pl.DataFrame,
) -> pl.DataFrame:
    """
    Build per-season all-purpose totals from rushing, receiving and both return units.

    Returns:
        DataFrame with columns: pid, year, plays, yards, tds
    """
    return _combine([
        (rushing, "carries"),
        (receiving, "receptions"),
        (kick_return, "returns"),
        (punt_return, "returns"),
    ])


def drop_inactive_rows(df: pl.DataFrame) -> pl.DataFrame:
    """Keep only rows with at least one play or positive yardage."""
    return df.filter((pl.col("plays") > 0) | (pl.col("yards") > 0))


def calculate_yards_per_play(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate all-purpose Yards per Play.

    Args:
        df: DataFrame with columns: yards, plays

    Returns:
        DataFrame with added column: ypp
    """
    return df.with_columns([
        safe_ratio(pl.col("yards"), pl.col("plays")).alias("ypp")
    ])
