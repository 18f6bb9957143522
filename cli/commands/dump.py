"""
Dump command - annotated hex dump of a SPLICE file.
"""

from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from splicedrum.analysis import FrameAnalysis
from cli.display.hex_view import REGION_COLORS, REGION_DESCRIPTIONS, format_hex_line
from cli.loader import load_analysis

console = Console()
app = typer.Typer()


def create_legend(analysis: FrameAnalysis) -> Table:
    """Create a legend for the region colors present in this file."""
    table = Table(title="Legend", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=10)
    table.add_column("Description", width=36)

    seen = []
    for region in analysis.regions:
        if region.name not in seen:
            seen.append(region.name)

    for name in seen:
        table.add_row(
            Text(name, style=REGION_COLORS.get(name, "white")),
            REGION_DESCRIPTIONS.get(name, ""),
        )

    return table


@app.command()
def dump(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="SPLICE file to dump"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    max_lines: int = typer.Option(0, "--max-lines", "-m", help="Maximum lines (0=all)"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
) -> None:
    """
    Annotated hex dump of a SPLICE file.

    Each byte is colored by the frame field it belongs to: header,
    track id, name length, name, steps, or trailing data.

    Examples:

        splicedrum dump pattern_1.splice

        splicedrum dump pattern_1.splice --max-lines 8
    """
    if width <= 0:
        console.print("[red]Error: --width must be positive[/red]")
        raise typer.Exit(1)

    analysis = load_analysis(file, ctx)
    data = analysis.data

    if not no_legend:
        console.print(create_legend(analysis))
        console.print()

    status = "[green]decodes[/green]" if analysis.valid else f"[red]{analysis.error}[/red]"
    console.print(
        Panel(
            f"[bold]File:[/bold] {file}\n"
            f"[bold]Size:[/bold] {len(data)} bytes\n"
            f"[bold]Status:[/bold] {status}",
            title="[bold]SPLICE Hex Dump[/bold]",
            border_style="blue",
        )
    )
    console.print()

    lines_shown = 0
    for offset in range(0, len(data), width):
        if max_lines and lines_shown >= max_lines:
            remaining = len(data) - offset
            console.print(f"[dim]... {remaining} more bytes ...[/dim]")
            break
        console.print(format_hex_line(data[offset : offset + width], offset, analysis, width))
        lines_shown += 1

    console.print()
    console.print(f"[dim]Total: {lines_shown} lines displayed[/dim]")


if __name__ == "__main__":
    app()
