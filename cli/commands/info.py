"""
Info command - display pattern summary.
"""

from pathlib import Path

import typer

from cli.common import load_pattern
from cli.display.tables import display_pattern_info, display_tracks_table

app = typer.Typer()


@app.command()
def info(
    file: Path = typer.Argument(..., help="Splice file to analyze"),
    full: bool = typer.Option(False, "--full", "-f", help="Also list the tracks"),
    lenient: bool = typer.Option(
        False, "--lenient", help="Accept files without the SPLICE signature"
    ),
) -> None:
    """
    Display pattern information.

    Examples:

        drumsplice info pattern_1.splice

        drumsplice info pattern_1.splice --full
    """
    pattern = load_pattern(file, lenient=lenient)

    display_pattern_info(pattern, filepath=file)

    if full:
        display_tracks_table(pattern)


if __name__ == "__main__":
    app()
