"""
CLI display modules.
"""

from cli.display.tables import display_pattern_info, display_tracks_table
from cli.display.hex_view import build_regions, create_legend, format_hex_line

__all__ = [
    "display_pattern_info",
    "display_tracks_table",
    "build_regions",
    "create_legend",
    "format_hex_line",
]
