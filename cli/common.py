"""
Shared helpers for CLI commands.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from drumsplice.formats.splice.reader import SpliceReader
from drumsplice.models.pattern import Pattern
from drumsplice.utils.validation import SpliceFormatError

console = Console()
err_console = Console(stderr=True)


def load_pattern(file: Path, lenient: bool = False) -> Pattern:
    """
    Decode a splice file or exit with an error message.

    Args:
        file: Path to .splice file
        lenient: Accept files without the "SPLICE" signature
    """
    try:
        return SpliceReader.read(file, strict=not lenient)
    except FileNotFoundError:
        err_console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)
    except OSError as e:
        err_console.print(f"[red]Error: Cannot read {escape(str(file))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except SpliceFormatError as e:
        err_console.print(f"[red]Error: {escape(str(file))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)


def read_file_bytes(file: Path) -> bytes:
    """
    Read a whole file or exit with an error message.

    Args:
        file: Path to read
    """
    try:
        with open(file, "rb") as f:
            return f.read()
    except FileNotFoundError:
        err_console.print(f"[red]Error: File not found: {escape(str(file))}[/red]")
        raise typer.Exit(1)
    except OSError as e:
        err_console.print(f"[red]Error: Cannot read {escape(str(file))}: {escape(str(e))}[/red]")
        raise typer.Exit(1)
