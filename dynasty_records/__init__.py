"""Dynasty Records: career and season leaderboards for a dynasty save."""

from __future__ import annotations

from .backend import LeaderboardService, build_leaderboards
from .config import ConfigError, LeaderboardConfig, StatThreshold
from .core.models import DisplayMode, DynastyDocument, LeaderboardEntry
from .data.dynasty_file import DynastyFileError, load_dynasty
from .formatting import format_value, format_years

__all__ = [
    "LeaderboardService",
    "build_leaderboards",
    "ConfigError",
    "LeaderboardConfig",
    "StatThreshold",
    "DisplayMode",
    "DynastyDocument",
    "LeaderboardEntry",
    "DynastyFileError",
    "load_dynasty",
    "format_value",
    "format_years",
]
