"""
Dump command - annotated hex dump of a splice file.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from cli.common import err_console, read_file_bytes
from cli.display.hex_view import build_regions, create_legend, format_hex_line

console = Console()
app = typer.Typer()


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Splice file to dump"),
    width: int = typer.Option(16, "--width", "-w", help="Bytes per line"),
    no_legend: bool = typer.Option(False, "--no-legend", help="Hide the legend"),
    region: Optional[str] = typer.Option(
        None, "--region", "-r", help="Show only one region (e.g. TEMPO, TRACK_2)"
    ),
) -> None:
    """
    Annotated hex dump of a splice pattern file.

    The dump works on files that fail to decode, showing how far the
    track records can be followed.

    Examples:

        drumsplice dump pattern_1.splice

        drumsplice dump pattern_1.splice --region HW_VERSION
    """
    if width < 1:
        err_console.print(f"[red]Error: Width must be positive, got {width}[/red]")
        raise typer.Exit(1)

    data = read_file_bytes(file)

    regions = build_regions(data)
    start, end = 0, len(data)

    if region:
        matches = [r for r in regions if r[2] == region.upper()]
        if not matches:
            err_console.print(f"[red]Unknown region: {escape(region)}[/red]")
            err_console.print("Available regions: " + ", ".join(r[2] for r in regions))
            raise typer.Exit(1)
        start, end = matches[0][0], matches[0][1]
    elif not no_legend:
        console.print(create_legend(regions))
        console.print()

    console.print(
        Panel(
            f"[bold]File:[/bold] {escape(str(file))}\n"
            f"[bold]Size:[/bold] {len(data)} bytes\n"
            f"[bold]Showing:[/bold] {end - start} bytes from 0x{start:04X}",
            title="[bold]Splice Hex Dump[/bold]",
            border_style="blue",
        )
    )

    header = Text()
    header.append("OFFSET ", style="dim")
    header.append(" ".join(f"{i:02X}" for i in range(width)), style="dim")
    header.append("  ASCII", style="dim")
    console.print(header)

    lines_shown = 0
    for offset in range(start, end, width):
        chunk = data[offset : min(offset + width, end)]
        console.print(format_hex_line(chunk, offset, regions, width))
        lines_shown += 1

    console.print()
    console.print(f"[dim]Total: {lines_shown} lines displayed[/dim]")


if __name__ == "__main__":
    app()
