"""Display helpers for leaderboard values."""

from __future__ import annotations

from collections.abc import Sequence


def format_value(value: float | None, fmt: str | None = None) -> str:
    """Render a leaderboard value.

    ``pct`` gets one decimal and a percent sign, ``avg`` and ``rating`` one
    decimal, and anything else a grouped integer. Missing values render as ``-``.
    """

    if value is None:
        return "-"
    if fmt == "pct":
        return f"{value:.1f}%"
    if fmt in ("avg", "rating"):
        return f"{value:.1f}"
    return f"{int(round(value)):,}"


def format_years(years: Sequence[int] | None) -> str:
    if not years:
        return "-"
    if len(years) == 1:
        return str(years[0])
    return f"{years[0]}-{years[-1]}"
