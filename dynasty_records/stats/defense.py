"""
Defensive totals.
"""

import polars as pl


def calculate_total_tackles(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate Total Tackles as solo plus assisted tackles.

    Args:
        df: DataFrame with columns: solo_tackles, assisted_tackles

    Returns:
        DataFrame with added column: total_tackles
    """
    return df.with_columns([
        (pl.col("solo_tackles") + pl.col("assisted_tackles")).alias("total_tackles")
    ])
