"""
Hex dump display utilities.
"""

from typing import Dict, Optional

from rich.text import Text

from splicedrum.analysis import FrameAnalysis, FrameRegion

REGION_COLORS: Dict[str, str] = {
    "MAGIC": "bright_blue",
    "LENGTH": "cyan",
    "VERSION": "magenta",
    "TEMPO": "yellow",
    "TRK_ID": "bold green",
    "TRK_LEN": "green",
    "TRK_NAME": "bright_white",
    "TRK_STEPS": "red",
    "TRAILING": "dim",
}

REGION_DESCRIPTIONS: Dict[str, str] = {
    "MAGIC": "Magic marker \"SPLICE\"",
    "LENGTH": "Payload length (uint64 BE)",
    "VERSION": "Version string (32 bytes)",
    "TEMPO": "Tempo (float32 LE)",
    "TRK_ID": "Track id (uint8)",
    "TRK_LEN": "Track name length (uint32 BE)",
    "TRK_NAME": "Track name",
    "TRK_STEPS": "Track steps (16 bytes)",
    "TRAILING": "Bytes after declared frame",
}


def region_color(region: Optional[FrameRegion]) -> str:
    if region is None:
        return "white"
    return REGION_COLORS.get(region.name, "white")


def format_hex_line(
    data: bytes, offset: int, analysis: FrameAnalysis, bytes_per_line: int = 16
) -> Text:
    """
    Format a single line of hex dump, coloring each byte by its region.

    Returns Rich Text object with colored output.
    """
    first_region = analysis.region_at(offset)

    text = Text()
    text.append(f"0x{offset:04X} ", style="dim")
    tag = first_region.name if first_region else "UNMAPPED"
    text.append(f"[{tag:9s}] ", style=region_color(first_region))

    for i, byte in enumerate(data):
        style = region_color(analysis.region_at(offset + i))
        if byte == 0x00:
            style = "dim"
        text.append(f"{byte:02X}", style=style)
        text.append(" ")

    # Pad if less than full line
    if len(data) < bytes_per_line:
        text.append("   " * (bytes_per_line - len(data)))

    text.append(" ", style="dim")
    for byte in data:
        if 32 <= byte < 127:
            text.append(chr(byte), style="green")
        elif byte == 0x00:
            text.append(".", style="dim")
        else:
            text.append(".", style="yellow")

    return text
