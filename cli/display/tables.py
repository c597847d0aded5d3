"""
Rich table displays for pattern information.
"""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box
from rich.markup import escape

from cli.display.formatters import density_bar, step_grid
from drumsplice.models.pattern import Pattern

console = Console()


def display_pattern_info(pattern: Pattern, filepath: Optional[Path] = None) -> None:
    """Display a summary panel for a decoded pattern."""
    active_hits = sum(len(t.active_steps) for t in pattern.tracks)
    silent = sum(1 for t in pattern.tracks if t.is_silent)

    lines = []
    if filepath is not None:
        lines.append(f"[bold]File:[/bold] {escape(str(filepath))}")
    lines.extend(
        [
            f"[bold]HW Version:[/bold] {escape(pattern.hw_version) or 'N/A'}",
            f"[bold]Tempo:[/bold] {pattern.tempo_text} BPM",
            f"[bold]Tracks:[/bold] {pattern.track_count} ({silent} silent)",
            f"[bold]Hits:[/bold] {active_hits}",
        ]
    )

    console.print(
        Panel(
            "\n".join(lines),
            title="[bold blue]Splice Pattern Info[/bold blue]",
            border_style="blue",
            expand=False,
        )
    )


def display_tracks_table(pattern: Pattern, title: str = "Tracks") -> None:
    """Display all tracks with their step grids."""
    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", width=3)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Sample")
    table.add_column("Steps", no_wrap=True)
    table.add_column("Density", no_wrap=True)

    for index, track in enumerate(pattern.tracks):
        table.add_row(
            str(index + 1),
            str(track.sample_id),
            escape(track.sample_name) or "[dim](unnamed)[/dim]",
            step_grid(track),
            density_bar(len(track.active_steps)),
        )

    if not pattern.tracks:
        console.print("[dim]Pattern has no tracks[/dim]")
        return

    console.print(table)
