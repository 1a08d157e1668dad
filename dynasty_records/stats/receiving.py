"""
Receiving statistics and efficiency metrics.
"""

import polars as pl

from .expressions import safe_ratio


def calculate_yards_per_reception(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate Yards per Reception (Y/R).

    Y/R = Receiving Yards / Receptions

    Args:
        df: DataFrame with columns: yards, receptions

    Returns:
        DataFrame with added column: ypr
    """
    return df.with_columns([
        safe_ratio(pl.col("yards"), pl.col("receptions")).alias("ypr")
    ])
