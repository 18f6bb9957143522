"""
splicedrum - Decode and inspect SPLICE drum machine pattern files.

A modern CLI tool for reading .splice patterns.
"""

import typer
from rich.console import Console

from splicedrum import __version__
from cli.commands.info import info
from cli.commands.tracks import tracks
from cli.commands.dump import dump
from cli.commands.validate import validate
from cli.logs import configure_logging

console = Console()

# Main app
app = typer.Typer(
    name="splicedrum",
    help="Decode and inspect SPLICE drum machine pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="info")(info)
app.command(name="tracks")(tracks)
app.command(name="dump")(dump)
app.command(name="validate")(validate)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]splicedrum[/bold] version {__version__}")
    console.print("[dim]Decoder for SPLICE drum machine pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    splicedrum - Decode SPLICE drum machine patterns.

    [bold]Quick Start:[/bold]

        splicedrum info pattern_1.splice         # Header and tracks
        splicedrum info pattern_1.splice --raw   # Plain text rendering

    [bold]Analysis Commands:[/bold]

        splicedrum tracks pattern_1.splice    # Step grids
        splicedrum dump pattern_1.splice      # Annotated hex dump
        splicedrum validate pattern_1.splice  # Structural checks

    Use --help with any command for more details.
    """
    configure_logging(verbose)
    ctx.obj = {"verbose": verbose}

    if version_flag:
        version()
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
