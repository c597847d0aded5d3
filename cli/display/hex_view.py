"""
Hex dump display utilities.
"""

from typing import List, Tuple

from rich.table import Table
from rich.text import Text
from rich import box

from cli.display.formatters import byte_ascii
from drumsplice.formats.splice.decoder import SpliceDecoder

# Region: (start, end, name, description, color)
Region = Tuple[int, int, str, str, str]

HEADER_REGIONS: List[Region] = [
    (0x00, 0x06, "SIGNATURE", "File signature", "bright_blue"),
    (0x06, 0x0D, "PADDING", "Padding", "dim"),
    (0x0D, 0x0E, "RESERVED", "Unknown/reserved", "dim"),
    (0x0E, 0x2E, "HW_VERSION", "Hardware version string", "cyan"),
    (0x2E, 0x32, "TEMPO", "Tempo (float32 LE)", "yellow"),
]

TRACK_COLORS = ["green", "magenta"]


def build_regions(data: bytes) -> List[Region]:
    """
    List the named regions of a splice buffer.

    Header regions are always listed; one TRACK region follows for each
    complete track record. Bytes after the last complete record are
    reported as TRAILING.
    """
    regions = [r for r in HEADER_REGIONS if r[0] < len(data)]

    spans = SpliceDecoder().record_spans(data)
    for index, (start, end) in enumerate(spans):
        regions.append(
            (
                start,
                end,
                f"TRACK_{index + 1}",
                f"Track record ({end - start} bytes)",
                TRACK_COLORS[index % len(TRACK_COLORS)],
            )
        )

    tail = spans[-1][1] if spans else SpliceDecoder.HEADER_SIZE
    if tail < len(data):
        regions.append((tail, len(data), "TRAILING", "Incomplete record", "red"))

    return regions


def region_for_offset(regions: List[Region], offset: int) -> Tuple[str, str]:
    """Get region name and color for an offset."""
    for start, end, name, _, color in regions:
        if start <= offset < end:
            return name, color
    return "UNKNOWN", "white"


def format_hex_line(data: bytes, offset: int, regions: List[Region], width: int = 16) -> Text:
    """
    Format one line of hex dump, each byte colored by its region.
    """
    text = Text()
    text.append(f"0x{offset:04X} ", style="dim")

    for i, byte in enumerate(data):
        _, color = region_for_offset(regions, offset + i)
        style = "dim" if byte == 0x00 else color
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    if len(data) < width:
        text.append("   " * (width - len(data)))

    text.append(" ")
    for byte in data:
        text.append(byte_ascii(byte), style="green" if 32 <= byte < 127 else "dim")

    return text


def create_legend(regions: List[Region]) -> Table:
    """Create a legend for the hex dump colors."""
    table = Table(title="Regions", box=box.SIMPLE, show_header=False, expand=False)
    table.add_column("Region", width=12)
    table.add_column("Description", width=44)

    for start, end, name, desc, color in regions:
        table.add_row(
            Text(name, style=color),
            f"{desc} ({end - start} bytes, 0x{start:04X}-0x{end - 1:04X})",
        )

    return table
