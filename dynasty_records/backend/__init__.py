"""Backend services for cross-season aggregation and leaderboards."""

from .aggregation import career_totals, category_frame, combine_category, combine_seasons
from .leaderboard_service import LeaderboardService, build_leaderboards, rank_leaderboard

__all__ = [
    "LeaderboardService",
    "build_leaderboards",
    "rank_leaderboard",
    "career_totals",
    "category_frame",
    "combine_category",
    "combine_seasons",
]
