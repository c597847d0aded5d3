"""
Display formatting utilities for CLI output.

Provides step grids and other formatting helpers.
"""

from rich.text import Text

from drumsplice.models.track import Track


def step_grid(
    track: Track,
    on_char: str = "x",
    off_char: str = "-",
    on_style: str = "bold green",
    off_style: str = "dim",
) -> Text:
    """
    Create a colored step grid for a track.

    Returns:
        Rich Text like "|x---|----|x---|----|"
    """
    text = Text()
    text.append("|", style="dim")
    for group in track.step_groups:
        for on in group:
            if on:
                text.append(on_char, style=on_style)
            else:
                text.append(off_char, style=off_style)
        text.append("|", style="dim")
    return text


def density_bar(active: int, total: int = 16, width: int = 8) -> str:
    """
    Create a bar showing how many steps of a track are active.

    Returns:
        Formatted string like " 4 [██░░░░░░]  25%"
    """
    if total <= 0:
        total = 1

    clamped = max(0, min(active, total))
    fill_count = int((clamped / total) * width)
    bar = "█" * fill_count + "░" * (width - fill_count)
    percent = int((clamped / total) * 100)

    return f"{active:2d} [{bar}] {percent:3d}%"


def byte_ascii(byte: int) -> str:
    """Printable ASCII for a byte, "." otherwise."""
    return chr(byte) if 32 <= byte < 127 else "."
