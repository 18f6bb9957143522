"""
Pattern data model - the decoded contents of a SPLICE file.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from splicedrum.models.track import Track
from splicedrum.utils.binary import format_float32


@dataclass(frozen=True)
class Pattern:
    """
    Complete drum pattern.

    A Pattern is created once per decode call and never changes
    afterwards; tracks are stored as a tuple in file order, duplicates
    included.

    Attributes:
        version: Hardware/software version string that saved the file
        tempo: Beats per minute (float32 in the file)
        tracks: Instrument lanes in order of appearance
    """

    version: str = ""
    tempo: float = 0.0
    tracks: Tuple[Track, ...] = ()

    # Payload length from the frame header; only used to bound decoding
    _declared_length: int = field(default=0, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "tracks", tuple(self.tracks))

    def find_tracks(self, track_id: int) -> List[Track]:
        """Return every track carrying `track_id`, in file order."""
        return [t for t in self.tracks if t.id == track_id]

    def header(self) -> str:
        """Version and tempo lines of the text rendering."""
        return f"Saved with HW Version: {self.version}\nTempo: {format_float32(self.tempo)}\n"

    def __str__(self) -> str:
        res = self.header()
        for track in self.tracks:
            res += f"{track}\n"
        return res
