"""
Dynasty Records Explorer

Interactive terminal app for browsing the career and season leaderboards of a
dynasty export, plus a quick look at individual player careers.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from rich.console import Console
from rich.prompt import Prompt, Confirm
from rich.table import Table

from dynasty_records.backend import LeaderboardService, career_totals
from dynasty_records.core.models import DisplayMode, LeaderboardEntry, PlayerNotFoundError
from dynasty_records.data import DynastyFileError, load_dynasty, player_game_log
from dynasty_records.formatting import format_value, format_years
from dynasty_records.stats_engine import STAT_CATEGORIES, StatDefinition


logging.basicConfig(level=logging.WARNING)
console = Console()


def _render_leaderboard(
    title: str,
    stat: StatDefinition,
    entries: List[LeaderboardEntry],
    mode: DisplayMode,
) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Team")
    table.add_column("Year" if mode is DisplayMode.SEASON else "Years")
    table.add_column(stat.abbr, justify="right")
    for rank, entry in enumerate(entries, start=1):
        years = str(entry.year) if entry.year is not None else format_years(entry.years)
        table.add_row(
            str(rank),
            entry.name,
            entry.team or "",
            years,
            format_value(entry.value, stat.format),
        )
    return table


def _show_category(service: LeaderboardService, category_key: str, mode: DisplayMode) -> None:
    category = STAT_CATEGORIES[category_key]
    boards = service.build(mode)[category_key]
    console.print(f"\n[bold]{category.name}[/bold] ({mode.value})")
    if category.note:
        console.print(f"[dim]{category.note}[/dim]")
    for stat in category.stats:
        entries = boards.get(stat.key, [])
        if not entries:
            console.print(f"[yellow]{stat.label}: no qualifying players[/yellow]")
            continue
        console.print(_render_leaderboard(stat.label, stat, entries, mode))


def _show_player(service: LeaderboardService, pid: str) -> None:
    try:
        player = service.document.get_player(pid)
    except PlayerNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        return

    seasons = service.player_seasons(player.pid)
    if not seasons:
        console.print("[yellow]No stats recorded for this player[/yellow]")
        return

    totals = career_totals(seasons)
    table = Table(title=f"{player.name} career totals")
    table.add_column("Category")
    table.add_column("Field")
    table.add_column("Total", justify="right")
    for category, fields in totals.items():
        for name, value in fields.items():
            if value:
                table.add_row(category, name, format_value(value))
    console.print(table)

    year_raw = Prompt.ask("Game log year (optional)", default="").strip()
    if not year_raw.isdigit():
        return
    log = player_game_log(service.document, player, int(year_raw))
    if not log:
        console.print("[yellow]No box scores for that year[/yellow]")
        return
    games = Table(title=f"{player.name} {year_raw} game log")
    games.add_column("Week", justify="right")
    games.add_column("Opponent")
    games.add_column("Result")
    games.add_column("Score")
    games.add_column("Categories")
    for entry in log:
        games.add_row(
            str(entry.week),
            entry.opponent or "",
            entry.result or "",
            f"{format_value(entry.team_score)}-{format_value(entry.opponent_score)}",
            ", ".join(entry.stats),
        )
    console.print(games)


def _load_service() -> Optional[LeaderboardService]:
    path = Prompt.ask("Dynasty file", default="dynasty.json").strip()
    try:
        document = load_dynasty(path)
    except DynastyFileError as exc:
        console.print(f"\n[red]Could not load dynasty:[/red] {exc}\n")
        return None
    console.print(
        f"Loaded {len(document.roster)} players and {len(document.games)} games"
        f" for {document.team_abbr or 'unknown team'}"
    )
    return LeaderboardService(document)


def main() -> None:
    console.print("\n[bold cyan]Dynasty Records Explorer[/bold cyan]")
    console.print("Browse career and season leaderboards for a dynasty export.\n")

    service = None
    while service is None:
        service = _load_service()
        if service is None and not Confirm.ask("Try again?", default=True):
            return

    categories = list(STAT_CATEGORIES)
    while True:
        console.print("\n[bold]Choose an action:[/bold]")
        console.print("1. View leaderboards")
        console.print("2. View a player")
        console.print("0. Exit")
        choice = Prompt.ask("Action", choices=["1", "2", "0"], default="1")

        if choice == "0":
            console.print("\n[cyan]Goodbye![/cyan]")
            break

        if choice == "1":
            mode = DisplayMode.parse(
                Prompt.ask("Mode", choices=[m.value for m in DisplayMode], default="career")
            )
            category = Prompt.ask("Category", choices=categories + ["all"], default="passing")
            for key in categories if category == "all" else [category]:
                _show_category(service, key, mode)
        elif choice == "2":
            pid = Prompt.ask("Player pid").strip()
            _show_player(service, pid)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        console.print("\n\n[yellow]Interrupted[/yellow]")
    except Exception as e:
        console.print(f"\n[red]Error: {e}[/red]")
        logging.exception("Error in main")
