"""Rich UI components for matchmaking display."""

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from skillmatch.matchmaking.models import PlayerStanding

if TYPE_CHECKING:
    from skillmatch.service import MatchmakingSession

# Shared console instance
console = Console()


def create_standings_table(
    standings: list[PlayerStanding],
    top_n: int = 10
) -> Table:
    """Create a Rich table of players ordered by ascending skill."""
    table = Table(
        title="[bold cyan]Skill Standings[/bold cyan]",
        box=box.ROUNDED,
        show_lines=False,
        header_style="bold magenta",
        title_justify="left",
    )

    table.add_column("Rank", style="dim", width=5, justify="center")
    table.add_column("Player", style="cyan", max_width=30, overflow="ellipsis")
    table.add_column("Skill", style="yellow", width=8, justify="right")
    table.add_column("Recent", style="green", width=24)
    table.add_column("Played", style="dim", width=7, justify="right")

    ordered = sorted(standings, key=lambda s: s.skill)

    for i, standing in enumerate(ordered[:top_n], 1):
        recent = " ".join(str(score) for score in standing.history) or "-"
        table.add_row(
            str(i),
            standing.player_id,
            f"{standing.skill:.1f}",
            recent,
            str(standing.matches_recorded),
        )

    if len(standings) > top_n:
        table.add_row(
            "...",
            f"[dim]and {len(standings) - top_n} more players[/dim]",
            "",
            "",
            "",
        )

    return table


def create_match_panel(player_ids: list[str], skills: list[float]) -> Panel:
    """Create a panel showing the players selected for a match."""
    if not player_ids:
        return Panel(
            "[dim]Not enough players registered[/dim]",
            title="[bold]Next Match[/bold]",
            border_style="dim",
            box=box.ROUNDED,
        )

    content = Text()
    for i, (player_id, skill) in enumerate(zip(player_ids, skills)):
        if i:
            content.append("    vs\n", style="dim")
        content.append(f"{player_id}", style="bold cyan")
        content.append(f"  ({skill:.1f})\n", style="yellow")

    return Panel(
        content,
        title="[bold]Next Match[/bold]",
        border_style="yellow",
        box=box.ROUNDED,
    )


def print_session(
    session: "MatchmakingSession",
    top_n: int = 10,
    target: Console | None = None
) -> None:
    """Print a session's standings and the match it would form next.

    Read-only: the match preview comes from the standings snapshot, so no
    match event is emitted.
    """
    out = target or console
    standings = session.standings()
    upcoming = standings[:session.config.match_size]
    out.print(create_standings_table(standings, top_n=top_n))
    out.print(create_match_panel(
        [s.player_id for s in upcoming],
        [s.skill for s in upcoming],
    ))
