"""
Passing statistics and efficiency metrics.

Functions for calculating quarterback rate stats from season or career passing
totals: completion percentage, per-attempt yardage, passer rating and TD/INT rates.
"""

import polars as pl

from .expressions import clamp_component, safe_ratio


def calculate_completion_percentage(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate Completion Percentage.

    CMP% = Completions / Attempts * 100

    Args:
        df: DataFrame with columns: completions, attempts

    Returns:
        DataFrame with added column: comp_pct
    """
    return df.with_columns([
        safe_ratio(pl.col("completions"), pl.col("attempts"), scale=100.0).alias("comp_pct")
    ])


def calculate_yards_per_attempt(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate Yards per Attempt (Y/A).

    Args:
        df: DataFrame with columns: yards, attempts

    Returns:
        DataFrame with added column: ypa
    """
    return df.with_columns([
        safe_ratio(pl.col("yards"), pl.col("attempts")).alias("ypa")
    ])


def calculate_adjusted_yards_per_attempt(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate Adjusted Yards per Attempt (AY/A).

    AY/A = (Passing Yards + 20*TD - 45*INT) / Pass Attempts

    This metric weights touchdowns and interceptions to give a better picture
    of passing efficiency than raw yards per attempt.

    Args:
        df: DataFrame with columns: yards, touchdowns, interceptions, attempts

    Returns:
        DataFrame with added column: aypa
    """
    adjusted_yards = (
        pl.col("yards") + 20 * pl.col("touchdowns") - 45 * pl.col("interceptions")
    )
    return df.with_columns([
        safe_ratio(adjusted_yards, pl.col("attempts")).alias("aypa")
    ])


def calculate_passer_rating(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate passer rating on the four-component scale used for the dynasty leaderboards.

    Components, each clamped to [0, 2.375]:
    - a: (Completions / Attempts - 0.3) * 20
    - b: (Yards / Attempts - 3) * 0.25
    - c: (Touchdowns / Attempts) * 20
    - d: 2.375 - (Interceptions / Attempts) * 25

    Rating = (a + b + c + d) / 6 * 100. Players without attempts rate 0.

    Args:
        df: DataFrame with columns: attempts, completions, yards, touchdowns, interceptions

    Returns:
        DataFrame with added column: rating
    """
    attempts = pl.col("attempts")

    # Component A: Completion percentage
    a = clamp_component((safe_ratio(pl.col("completions"), attempts) - 0.3) * 20)

    # Component B: Yards per attempt
    b = clamp_component((safe_ratio(pl.col("yards"), attempts) - 3) * 0.25)

    # Component C: Touchdown percentage
    c = clamp_component(safe_ratio(pl.col("touchdowns"), attempts) * 20)

    # Component D: Interception percentage
    d = clamp_component(2.375 - safe_ratio(pl.col("interceptions"), attempts) * 25)

    rating = ((a + b + c + d) / 6) * 100

    return df.with_columns([
        pl.when(attempts > 0).then(rating).otherwise(pl.lit(0.0)).alias("rating")
    ])


def calculate_yards_per_game(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate passing Yards per Game (Y/G).

    Args:
        df: DataFrame with columns: yards, games_played

    Returns:
        DataFrame with added column: ypg
    """
    return df.with_columns([
        safe_ratio(pl.col("yards"), pl.col("games_played")).alias("ypg")
    ])


def calculate_touchdown_and_interception_rates(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate TD% and INT% per pass attempt.

    Args:
        df: DataFrame with columns: touchdowns, interceptions, attempts

    Returns:
        DataFrame with added columns: td_pct, int_pct
    """
    return df.with_columns([
        safe_ratio(pl.col("touchdowns"), pl.col("attempts"), scale=100.0).alias("td_pct"),
        safe_ratio(pl.col("interceptions"), pl.col("attempts"), scale=100.0).alias("int_pct"),
    ])
