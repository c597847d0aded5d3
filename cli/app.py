"""
drumsplice - Decode and inspect drum machine .splice pattern files.

A CLI tool for decoding, analyzing and exporting splice patterns.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from cli.commands.show import show
from cli.commands.info import info
from cli.commands.tracks import tracks
from cli.commands.dump import dump
from cli.commands.validate import validate
from cli.commands.export import export
from drumsplice import __version__

console = Console()

# Main app
app = typer.Typer(
    name="drumsplice",
    help="Decode and analyze drum machine .splice pattern files.",
    add_completion=False,
    rich_markup_mode="rich",
)

# Add commands directly
app.command(name="show")(show)
app.command(name="info")(info)
app.command(name="tracks")(tracks)
app.command(name="dump")(dump)
app.command(name="validate")(validate)
app.command(name="export")(export)


def setup_logging(debug: bool = False) -> None:
    """Configure logging for the CLI session."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]drumsplice[/bold] version {__version__}")
    console.print("[dim]Decoder for drum machine .splice pattern files[/dim]")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version_flag: bool = typer.Option(False, "--version", "-V", help="Show version"),
    debug: bool = typer.Option(False, "--debug", help="Log decoder details to stderr"),
) -> None:
    """
    drumsplice - Decode drum machine splice patterns.

    [bold]Quick Start:[/bold]

        drumsplice show pattern_1.splice       # Plain text rendering
        drumsplice info pattern_1.splice       # Pattern summary

    [bold]Analysis Commands:[/bold]

        drumsplice tracks pattern_1.splice     # Track table with step grids
        drumsplice dump pattern_1.splice       # Annotated hex dump

    [bold]Utility Commands:[/bold]

        drumsplice validate *.splice           # Check files decode
        drumsplice export pattern_1.splice     # Write a MIDI drum file

    Use --help with any command for more details.
    """
    setup_logging(debug)

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
