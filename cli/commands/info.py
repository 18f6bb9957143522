"""
Info command - display pattern header and rendered tracks.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.tables import display_pattern_info, display_tracks_table
from cli.loader import load_analysis, require_pattern

console = Console()
app = typer.Typer()


@app.command()
def info(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="SPLICE file to analyze"),
    raw: bool = typer.Option(False, "--raw", "-r", help="Print the plain text rendering only"),
) -> None:
    """
    Display pattern information.

    Shows the version string, tempo, frame sizes and every track
    with its 16-step grid.

    Examples:

        splicedrum info pattern_1.splice

        splicedrum info pattern_1.splice --raw
    """
    analysis = load_analysis(file, ctx)
    require_pattern(analysis, ctx)
    pattern = analysis.pattern

    if raw:
        typer.echo(str(pattern), nl=False)
        return

    display_pattern_info(pattern, analysis)
    console.print()
    display_tracks_table(pattern)


if __name__ == "__main__":
    app()
