"""
Tracks command - detailed track information display.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from cli.common import load_pattern
from cli.display.formatters import density_bar, step_grid
from cli.display.tables import display_tracks_table
from drumsplice.converters.splice_to_midi import note_for_track
from drumsplice.models.track import Track

console = Console()
app = typer.Typer()


def display_track_detail(index: int, track: Track) -> None:
    """Display one track in a panel."""
    steps = ", ".join(str(s + 1) for s in track.active_steps) or "none"

    content = (
        f"[bold]Sample ID:[/bold] {track.sample_id}\n"
        f"[bold]Sample:[/bold] {escape(track.sample_name) or '(unnamed)'}\n"
        f"[bold]MIDI note:[/bold] {note_for_track(track)}\n"
        f"[bold]Steps:[/bold] {steps}\n"
        f"[bold]Density:[/bold] {density_bar(len(track.active_steps))}"
    )

    console.print(Panel(content, title=f"[bold]Track {index + 1}[/bold]", expand=False))
    console.print(step_grid(track))


@app.command()
def tracks(
    file: Path = typer.Argument(..., help="Splice file to analyze"),
    track: Optional[int] = typer.Option(
        None, "--track", "-t", help="Show only this track (1-based position)"
    ),
    lenient: bool = typer.Option(
        False, "--lenient", help="Accept files without the SPLICE signature"
    ),
) -> None:
    """
    Display track details.

    Examples:

        drumsplice tracks pattern_1.splice

        drumsplice tracks pattern_1.splice --track 2
    """
    pattern = load_pattern(file, lenient=lenient)

    if track is None:
        display_tracks_table(pattern, title=f"Tracks - {file.name}")
        return

    if not 1 <= track <= pattern.track_count:
        console.print(f"[red]Error: Track must be 1-{pattern.track_count}, got {track}[/red]")
        raise typer.Exit(1)

    display_track_detail(track - 1, pattern.tracks[track - 1])


if __name__ == "__main__":
    app()
