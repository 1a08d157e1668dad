"""
Rushing statistics and efficiency metrics.
"""

import polars as pl

from .expressions import safe_ratio


def calculate_yards_per_carry(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate Yards per Carry (YPC).

    YPC = Rushing Yards / Carries

    Args:
        df: DataFrame with columns: yards, carries

    Returns:
        DataFrame with added column: ypc
    """
    return df.with_columns([
        safe_ratio(pl.col("yards"), pl.col("carries")).alias("ypc")
    ])
