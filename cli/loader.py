"""
Shared file loading for CLI commands.
"""

from pathlib import Path

import typer
from rich.console import Console

from splicedrum.analysis import FrameAnalysis, FrameAnalyzer

console = Console()


def is_verbose(ctx: typer.Context) -> bool:
    return bool(ctx.obj and ctx.obj.get("verbose"))


def load_analysis(file: Path, ctx: typer.Context) -> FrameAnalysis:
    """
    Read and analyze a file, exiting with status 1 if it cannot be read.
    """
    if not file.exists():
        console.print(f"[red]Error: File not found: {file}[/red]")
        raise typer.Exit(1)

    try:
        return FrameAnalyzer().analyze_file(file)
    except OSError as e:
        console.print(f"[red]Error: {e}[/red]")
        if is_verbose(ctx):
            console.print_exception()
        raise typer.Exit(1)


def require_pattern(analysis: FrameAnalysis, ctx: typer.Context) -> None:
    """Exit with status 1 if the file did not decode."""
    if analysis.pattern is not None:
        return

    console.print(f"[red]Error: {analysis.error}[/red]")
    if is_verbose(ctx):
        console.print(f"[dim]Error kind: {analysis.error.kind.value}[/dim]")
    raise typer.Exit(1)
