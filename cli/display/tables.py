"""
Rich table displays for pattern information.
"""

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from splicedrum.analysis import FrameAnalysis
from splicedrum.models.pattern import Pattern
from cli.display.formatters import density_bar, format_size, format_tempo, step_grid

console = Console()


def display_pattern_info(pattern: Pattern, analysis: FrameAnalysis) -> None:
    """Display the header panel for a decoded pattern."""
    trailing = analysis.trailing_bytes
    trailing_str = f"[yellow]{trailing} bytes[/yellow]" if trailing else "none"

    header_content = f"""[bold]Version:[/bold] {escape(pattern.version) or "N/A"}
[bold]Tempo:[/bold] {format_tempo(pattern.tempo)}
[bold]Tracks:[/bold] {len(pattern.tracks)}
[bold]Declared Length:[/bold] {format_size(analysis.declared_length or 0)}
[bold]File Size:[/bold] {format_size(analysis.filesize)}
[bold]Trailing Data:[/bold] {trailing_str}"""

    console.print(
        Panel(
            header_content,
            title="[bold blue]SPLICE Pattern Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def build_tracks_table(pattern: Pattern) -> Table:
    """Build a table with one row per track and its step grid."""
    table = Table(title="Tracks", box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", style="cyan", width=4)
    table.add_column("Name", width=16)
    table.add_column("Steps", width=21, no_wrap=True)
    table.add_column("Density", width=16, no_wrap=True)

    for i, track in enumerate(pattern.tracks):
        table.add_row(
            str(i),
            track.label,
            escape(track.name) if track.name else "[dim](unnamed)[/dim]",
            step_grid(track.steps),
            density_bar(track.active_steps),
        )

    return table


def display_tracks_table(pattern: Pattern) -> None:
    if not pattern.tracks:
        console.print("[dim]Pattern has no tracks[/dim]")
        return
    console.print(build_tracks_table(pattern))


def display_issues(analysis: FrameAnalysis) -> None:
    """Display validation findings grouped by severity."""
    if not analysis.issues:
        console.print("[green]No issues found[/green]")
        return

    table = Table(title="Issues", box=box.SIMPLE, show_header=True, header_style="bold")
    table.add_column("Severity", width=8)
    table.add_column("Area", width=8)
    table.add_column("Offset", width=8)
    table.add_column("Message")

    styles = {"error": "red", "warning": "yellow", "info": "dim"}
    for issue in analysis.issues:
        style = styles.get(issue.severity, "white")
        table.add_row(
            f"[{style}]{issue.severity.upper()}[/{style}]",
            issue.area,
            f"0x{issue.offset:X}",
            escape(issue.message),
        )

    console.print(table)
