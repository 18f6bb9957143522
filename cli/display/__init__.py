"""
CLI display modules.
"""

from cli.display.tables import (
    display_pattern_info,
    display_tracks_table,
    display_issues,
)
from cli.display.hex_view import format_hex_line

__all__ = [
    "display_pattern_info",
    "display_tracks_table",
    "display_issues",
    "format_hex_line",
]
