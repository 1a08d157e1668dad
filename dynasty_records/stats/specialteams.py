"""
Special teams statistics and efficiency metrics.

Functions for calculating kicking, punting, and return averages.
"""

import polars as pl

from .expressions import safe_ratio


def calculate_field_goal_percentage(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate Field Goal Percentage.

    FG% = FG Made / FG Attempted * 100

    Args:
        df: DataFrame with columns: fg_made, fg_attempts

    Returns:
        DataFrame with added column: fg_pct
    """
    return df.with_columns([
        safe_ratio(pl.col("fg_made"), pl.col("fg_attempts"), scale=100.0).alias("fg_pct")
    ])


def calculate_punt_average(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate gross Yards per Punt.

    Args:
        df: DataFrame with columns: yards, punts

    Returns:
        DataFrame with added column: ypp
    """
    return df.with_columns([
        safe_ratio(pl.col("yards"), pl.col("punts")).alias("ypp")
    ])


def calculate_return_average(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate Yards per Return for kick or punt returns.

    Args:
        df: DataFrame with columns: yards, returns

    Returns:
        DataFrame with added column: avg
    """
    return df.with_columns([
        safe_ratio(pl.col("yards"), pl.col("returns")).alias("avg")
    ])
