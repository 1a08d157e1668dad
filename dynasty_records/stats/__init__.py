"""
Derived statistic calculations for dynasty leaderboards.

This package provides rate and compound statistics organized by category group:
- passing: Completion %, Y/A, AY/A, passer rating, Y/G, TD% and INT%
- rushing: Yards per carry
- receiving: Yards per reception
- combined: Scrimmage and all-purpose totals, all-purpose yards per play
- defense: Total tackles
- specialteams: Field goal %, yards per punt, return averages

All functions accept Polars DataFrames and return Polars DataFrames with added columns.
"""

from .passing import (
    calculate_completion_percentage,
    calculate_yards_per_attempt,
    calculate_adjusted_yards_per_attempt,
    calculate_passer_rating,
    calculate_yards_per_game,
    calculate_touchdown_and_interception_rates,
)

from .rushing import calculate_yards_per_carry

from .receiving import calculate_yards_per_reception

from .combined import (
    build_scrimmage_frame,
    build_all_purpose_frame,
    drop_inactive_rows,
    calculate_yards_per_play,
)

from .defense import calculate_total_tackles

from .specialteams import (
    calculate_field_goal_percentage,
    calculate_punt_average,
    calculate_return_average,
)

__all__ = [
    # Passing
    "calculate_completion_percentage",
    "calculate_yards_per_attempt",
    "calculate_adjusted_yards_per_attempt",
    "calculate_passer_rating",
    "calculate_yards_per_game",
    "calculate_touchdown_and_interception_rates",
    # Rushing / Receiving
    "calculate_yards_per_carry",
    "calculate_yards_per_reception",
    # Combined
    "build_scrimmage_frame",
    "build_all_purpose_frame",
    "drop_inactive_rows",
    "calculate_yards_per_play",
    # Defense
    "calculate_total_tackles",
    # Special Teams
    "calculate_field_goal_percentage",
    "calculate_punt_average",
    "calculate_return_average",
]
