"""
Validate command - check SPLICE file integrity and structure.
"""

from pathlib import Path

import typer
from rich.console import Console

from cli.display.tables import display_issues
from cli.loader import load_analysis

console = Console()
app = typer.Typer()


@app.command()
def validate(
    ctx: typer.Context,
    file: Path = typer.Argument(..., help="SPLICE file to validate"),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as errors"),
) -> None:
    """
    Validate SPLICE file structure.

    Reports decode errors, trailing bytes after the frame, duplicate
    track ids and unnamed tracks. Exits with status 1 when the file is
    invalid.

    Examples:

        splicedrum validate pattern_1.splice

        splicedrum validate pattern_1.splice --strict
    """
    analysis = load_analysis(file, ctx)

    display_issues(analysis)
    console.print()

    failed = not analysis.valid or (strict and analysis.warnings)
    if failed:
        console.print(f"[red]INVALID[/red] {file}")
        raise typer.Exit(1)

    console.print(f"[green]VALID[/green] {file}")


if __name__ == "__main__":
    app()
