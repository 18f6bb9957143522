"""
Tracks command - per-track step grids.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

from splicedrum.models.pattern import Pattern
from splicedrum.models.track import Track
from cli.display.formatters import density_bar, step_grid
from cli.display.tables import display_tracks_table
from cli.loader import load_analysis, require_pattern

console = Console()
app = typer.Typer()


def display_track_detail(title: str, track: Track) -> None:
    """Display one track with a numbered step ruler."""
    name = escape(track.name) if track.name else "[dim](unnamed)[/dim]"
    header = f"[bold]{name}[/bold]  id={track.label}  {density_bar(track.active_steps)}"
    console.print(Panel(header, title=title, border_style="cyan", expand=False))

    table = Table(box=box.SIMPLE, show_header=True, header_style="dim", padding=(0, 0))
    for step in range(len(track.steps)):
        table.add_column(f"{step + 1:>2}", justify="center", width=3)
    table.add_row(*(("[bold green]x[/bold green]" if s else "[dim]-[/dim]") for s in track.steps))
    console.print(table)


def display_matching(pattern: Pattern, track_id: int) -> None:
    matches = pattern.find_tracks(track_id)
    if not matches:
        console.print(f"[yellow]No track with id {track_id}[/yellow]")
        raise typer.Exit(1)
    for n, track in enumerate(matches, start=1):
        display_track_detail(f"Track id {track_id} ({n} of {len(matches)})", track)


@app.command()
def tracks(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="SPLICE file to analyze"),
    track_id: Optional[int] = typer.Option(
        None, "--id", "-i", help="Show detail for tracks with this id"
    ),
) -> None:
    """
    Show track step grids.

    Examples:

        splicedrum tracks pattern_1.splice

        splicedrum tracks pattern_1.splice --id 1
    """
    analysis = load_analysis(file, ctx)
    require_pattern(analysis, ctx)
    pattern = analysis.pattern

    if track_id is not None:
        display_matching(pattern, track_id)
        return

    display_tracks_table(pattern)

    # Compact text view for copy/paste
    console.print()
    for track in pattern.tracks:
        line = step_grid(track.steps)
        console.print(f"({track.label}) {escape(track.name)}", line)


if __name__ == "__main__":
    app()
