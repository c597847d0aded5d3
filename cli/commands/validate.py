"""
Validate command - check that splice files decode.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from drumsplice.formats.splice.decoder import SpliceDecoder
from drumsplice.utils.validation import SpliceFormatError

console = Console()
app = typer.Typer()


@dataclass
class ValidationResult:
    """Result of validating one splice file."""

    filepath: Path
    valid: bool
    error_type: str = ""
    message: str = ""
    offset: Optional[int] = None
    track_count: int = 0


def validate_file(filepath: Path, strict: bool = True) -> ValidationResult:
    """
    Decode a file and report the outcome instead of raising.

    Args:
        filepath: Path to .splice file
        strict: Require the SPLICE signature
    """
    try:
        with open(filepath, "rb") as f:
            data = f.read()
    except OSError as e:
        return ValidationResult(filepath, False, type(e).__name__, str(e))

    try:
        pattern = SpliceDecoder(strict=strict).decode(data)
    except SpliceFormatError as e:
        return ValidationResult(filepath, False, type(e).__name__, str(e), e.offset)

    return ValidationResult(filepath, True, track_count=pattern.track_count)


@app.command()
def validate(
    files: List[Path] = typer.Argument(..., help="Splice files to validate"),
    lenient: bool = typer.Option(
        False, "--lenient", help="Accept files without the SPLICE signature"
    ),
) -> None:
    """
    Validate that splice files decode completely.

    Exits with code 1 if any file fails.

    Examples:

        drumsplice validate pattern_1.splice pattern_2.splice
    """
    results = [validate_file(f, strict=not lenient) for f in files]

    table = Table(title="Validation", box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("File", style="cyan")
    table.add_column("Status", width=8)
    table.add_column("Tracks", justify="right", width=6)
    table.add_column("Details")

    for result in results:
        if result.valid:
            table.add_row(escape(result.filepath.name), "[green]OK[/green]", str(result.track_count), "")
        else:
            where = f" @ 0x{result.offset:X}" if result.offset is not None else ""
            table.add_row(
                escape(result.filepath.name),
                "[red]FAIL[/red]",
                "-",
                escape(f"{result.error_type}{where}: {result.message}"),
            )

    console.print(table)

    failed = sum(1 for r in results if not r.valid)
    if failed:
        console.print(f"[red]{failed} of {len(results)} file(s) failed[/red]")
        raise typer.Exit(1)

    console.print(f"[green]All {len(results)} file(s) valid[/green]")


if __name__ == "__main__":
    app()
