"""
Export command - write a pattern as a MIDI drum file.
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from cli.common import load_pattern
from drumsplice.converters.splice_to_midi import SpliceToMidiConverter

console = Console()
app = typer.Typer()


@app.command()
def export(
    source: Path = typer.Argument(..., help="Splice file to export"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output .mid path"),
    ticks: int = typer.Option(480, "--ticks", help="MIDI ticks per beat"),
    lenient: bool = typer.Option(
        False, "--lenient", help="Accept files without the SPLICE signature"
    ),
) -> None:
    """
    Export a splice pattern as a one bar MIDI file on channel 10.

    Examples:

        drumsplice export pattern_1.splice

        drumsplice export pattern_1.splice -o beat.mid --ticks 96
    """
    if ticks < 4:
        console.print(f"[red]Error: Ticks per beat must be at least 4, got {ticks}[/red]")
        raise typer.Exit(1)

    pattern = load_pattern(source, lenient=lenient)
    output_path = output or source.with_suffix(".mid")

    converter = SpliceToMidiConverter(ticks_per_beat=ticks)
    try:
        converter.write(pattern, output_path)
    except (ValueError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(f"[green]Exported:[/green] {escape(str(source))} -> {escape(str(output_path))}")
    console.print(f"[dim]{pattern.track_count} tracks, tempo {pattern.tempo_text} BPM[/dim]")


if __name__ == "__main__":
    app()
