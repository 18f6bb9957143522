"""
Display formatting utilities for CLI output.

Provides step grids, density bars, and other formatting helpers.
"""

from typing import Sequence

from rich.text import Text

from splicedrum.models.track import STEPS_PER_BEAT, STEPS_PER_TRACK
from splicedrum.utils.binary import format_float32


def step_grid(
    steps: Sequence[bool],
    on_char: str = "x",
    off_char: str = "-",
    on_style: str = "bold green",
    downbeat_style: str = "bold yellow",
) -> Text:
    """
    Create a colored step grid.

    Downbeats (first step of each group of four) use their own style so
    the pulse is easy to read.

    Returns:
        Rich Text like "|x---|x---|x---|x---|"
    """
    text = Text("|", style="dim")
    for i, step in enumerate(steps):
        if step:
            style = downbeat_style if i % STEPS_PER_BEAT == 0 else on_style
            text.append(on_char, style=style)
        else:
            text.append(off_char, style="dim")
        if (i + 1) % STEPS_PER_BEAT == 0:
            text.append("|", style="dim")
    return text


def density_bar(
    used: int,
    total: int = STEPS_PER_TRACK,
    width: int = 8,
    filled_char: str = "█",
    empty_char: str = "░",
) -> str:
    """
    Create a bar showing how many of `total` slots are used.

    Returns:
        Formatted string like "[████░░░░]  4/16"
    """
    if total <= 0:
        total = 1

    fill_count = int((min(used, total) / total) * width)
    bar = filled_char * fill_count + empty_char * (width - fill_count)
    return f"[{bar}] {used:2d}/{total}"


def format_tempo(tempo: float) -> str:
    """Format tempo in BPM using its float32 form."""
    return f"{format_float32(tempo)} BPM"


def format_size(size: int) -> str:
    return f"{size} bytes (0x{size:X})"
