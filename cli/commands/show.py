"""
Show command - print the plain text rendering of a pattern.
"""

import json
from pathlib import Path

import typer

from cli.common import load_pattern

app = typer.Typer()


@app.command()
def show(
    file: Path = typer.Argument(..., help="Splice file to decode"),
    as_json: bool = typer.Option(False, "--json", "-j", help="Print JSON instead of text"),
    lenient: bool = typer.Option(
        False, "--lenient", help="Accept files without the SPLICE signature"
    ),
) -> None:
    """
    Print a decoded pattern.

    Examples:

        drumsplice show pattern_1.splice

        drumsplice show pattern_1.splice --json
    """
    pattern = load_pattern(file, lenient=lenient)

    if as_json:
        typer.echo(json.dumps(pattern.to_dict(), indent=2))
    else:
        typer.echo(str(pattern), nl=False)


if __name__ == "__main__":
    app()
