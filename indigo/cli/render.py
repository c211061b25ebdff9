"""Rich rendering helpers for the simulation summary."""

from __future__ import annotations

from rich import box
from rich.table import Table

from ..scoreboard import MatchHistory


def render_history(history: MatchHistory) -> Table:
    """Return the aggregated simulation summary table."""

    totals = history.totals()
    table = Table(title="Simulation Summary", box=box.SIMPLE_HEAVY)
    table.add_column("Seat", justify="center")
    table.add_column("Opened", justify="right")
    table.add_column("Wins", justify="right")
    table.add_column("Points", justify="right")
    table.add_column("Cards", justify="right")

    best_wins = max((total.wins for total in totals), default=0)

    for total in totals:
        label = str(total.seat)
        wins = str(total.wins)
        if history.games and total.wins == best_wins:
            label = f"[bold blue]{label}[/bold blue]"
            wins = f"[bold blue]{wins}[/bold blue]"
        table.add_row(label, str(total.openings), wins, str(total.points), str(total.cards))

    table.caption = f"{len(history.games)} game(s), {history.draws} draw(s)"
    return table
